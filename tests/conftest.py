"""Shared test fixtures for the strfile_index test suite.

WHY: The sample fortune text and its two index images are used across
modules; fixtures hand each test a fresh copy.

HOW: Images are built with the packers in dat_images.py.
"""

import pytest

from dat_images import (
    SAMPLE_LINES,
    SAMPLE_LONGEST,
    SAMPLE_OFFSETS,
    SAMPLE_SHORTEST,
    SAMPLE_TEXT,
    pack_padded,
    pack_standard,
)


@pytest.fixture
def sample_text() -> bytes:
    return SAMPLE_TEXT


@pytest.fixture
def sample_standard_dat() -> bytes:
    """The reference sample as written by a 32-bit strfile."""
    return pack_standard(
        count=len(SAMPLE_LINES),
        longest=SAMPLE_LONGEST,
        shortest=SAMPLE_SHORTEST,
        offsets=SAMPLE_OFFSETS,
    )


@pytest.fixture
def sample_padded_dat() -> bytes:
    """The same sample as written by a 64-bit strfile (version 1)."""
    return pack_padded(
        count=len(SAMPLE_LINES),
        longest=SAMPLE_LONGEST,
        shortest=SAMPLE_SHORTEST,
        offsets=SAMPLE_OFFSETS,
    )
