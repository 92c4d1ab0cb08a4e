"""Layout registry: maps the version sentinel to a read strategy.

WHY: The decoder must pick exactly one layout per file and use it for
both the header and the offset table. A central registry and a single
selection function make that choice explicit and keep it in one place.

HOW: LAYOUTS maps names to layout *classes*. select_layout() turns the
version field into an instance: 1 selects the padded layout, anything
else the standard one, subject to the strict version policy.

RULES:
- version == PADDED_VERSION (1) → PaddedLayout, always
- Any other version → StandardLayout
- strict=True rejects versions outside KNOWN_STANDARD_VERSIONS with
  UnsupportedVersionError; strict=False accepts them and logs a warning
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from strfile_index.config import KNOWN_STANDARD_VERSIONS, PADDED_VERSION
from strfile_index.core.errors import UnsupportedVersionError
from strfile_index.layouts.padded import PaddedLayout
from strfile_index.layouts.standard import StandardLayout

if TYPE_CHECKING:
    from strfile_index.layouts.base import BaseLayout

logger = logging.getLogger(__name__)

LAYOUTS: dict[str, type[BaseLayout]] = {
    "standard": StandardLayout,
    "padded": PaddedLayout,
}


def select_layout(
    version: int,
    strict: bool = False,
    known_versions: Optional[Iterable[int]] = None,
) -> BaseLayout:
    """Choose the layout strategy for a file with the given version.

    Args:
        version: Raw value of the first u32 in the file.
        strict: Reject versions not known to use the standard layout.
        known_versions: Overrides KNOWN_STANDARD_VERSIONS from config.

    Returns:
        A layout instance to read the rest of the file with.
    """
    if version == PADDED_VERSION:
        return LAYOUTS["padded"]()

    known = KNOWN_STANDARD_VERSIONS if known_versions is None else frozenset(known_versions)
    if version not in known:
        if strict:
            raise UnsupportedVersionError(version)
        logger.warning(
            "Unknown strfile version %d, reading with the standard layout", version
        )
    return LAYOUTS["standard"]()


__all__ = ["LAYOUTS", "PaddedLayout", "StandardLayout", "select_layout"]
