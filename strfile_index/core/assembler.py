"""Index assembly: version dispatch, offset pairing, and count validation.

WHY: Header and offset table mean nothing on their own. The version
field decides how both are laid out, and the declared count has to be
checked against what the offset table really contains, or consumers
would index past the end of a truncated or foreign file.

HOW: decode_index() runs one linear pass:
  1. read the version (bytes 0-3, same in both layouts)
  2. select_layout() picks the padded or standard strategy, once
  3. that strategy reads the header and then the raw offset table
  4. build_spans() pairs neighbouring offsets into spans
  5. StrfileIndex is constructed, which enforces len(spans) == count

RULES:
- The same layout instance reads both header and offsets
- An offset table with no complete entry is a TruncatedError
- Any failure aborts the decode; there is no partial index and no retry
- The source must be positioned at byte 0 and is not closed here
- strict_version=None falls back to STRICT_VERSION from config
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO, Optional

from strfile_index.config import STRICT_VERSION
from strfile_index.core.errors import CountMismatchError, TruncatedError
from strfile_index.core.ir import StrfileIndex
from strfile_index.core.offsets import build_spans
from strfile_index.core.reader import read_u32
from strfile_index.layouts import select_layout

logger = logging.getLogger(__name__)


def decode_index(
    source: BinaryIO,
    *,
    strict_version: Optional[bool] = None,
) -> StrfileIndex:
    """Decode a strfile .dat stream into a StrfileIndex.

    Args:
        source: Readable binary stream positioned at the start of the index.
        strict_version: Reject versions outside the known set instead of
            reading them with the standard layout. Defaults to config.

    Returns:
        The validated, immutable index.

    Raises:
        TruncatedError: The header ends early, or the offset table is empty.
        UnrecognizedFlagsError: The flags word has unknown bits.
        CountMismatchError: The offset table yields the wrong number of spans.
        UnsupportedVersionError: Strict mode and an unknown version.
        SourceReadError: The stream raised while a field was being read.
    """
    if strict_version is None:
        strict_version = STRICT_VERSION

    version = read_u32(source, "version")
    layout = select_layout(version, strict=strict_version)
    logger.debug("strfile version %d, using %s layout", version, layout.name)

    header = layout.read_header(source, version)
    raw_offsets = layout.read_offsets(source, header.count)
    if not raw_offsets:
        # even a zero-count table carries its terminating offset
        raise TruncatedError("offset table", layout.offset_slot_size, 0)
    spans = build_spans(raw_offsets)

    if len(spans) != header.count:
        raise CountMismatchError(header.count, len(spans))

    index = StrfileIndex.from_header(header, spans)
    logger.debug(
        "Decoded strfile index: %d strings, flags=%s, delimiter=%r",
        index.count,
        index.flags,
        index.delimiter_char,
    )
    return index


def decode_bytes(data: bytes, *, strict_version: Optional[bool] = None) -> StrfileIndex:
    """Decode an index already held in memory."""
    return decode_index(io.BytesIO(data), strict_version=strict_version)
