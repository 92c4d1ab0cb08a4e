"""Fixed-width big-endian read primitives over a binary byte source.

WHY: Every strfile field is a fixed-width network-order integer read in a
fixed order, and every read can fail in two ways: the file ends early, or
the underlying stream raises. Centralizing the reads keeps both failure
modes uniform and tagged with the name of the field being read.

HOW: Thin wrappers around source.read() and precompiled struct formats
(``!L`` for u32). Header reads demand the full width and raise
TruncatedError otherwise. Offset-table slot reads return None at end of
stream, because a short offset table is diagnosed later by count
validation, not here.

RULES:
- Byte order is always network order (big-endian)
- A source is any object with a binary read(size) method
- OSError from the source becomes SourceReadError(field) chained from it
- read_u32_slot never raises TruncatedError
- Short reads are retried; only an empty read means end of stream
"""

from __future__ import annotations

import struct
from typing import BinaryIO, Optional

from strfile_index.core.errors import SourceReadError, TruncatedError

U32 = struct.Struct("!L")


def _read(source: BinaryIO, size: int, field: str) -> bytes:
    """Read up to ``size`` bytes, stopping early only at end of stream.

    Raw streams may return fewer bytes than asked for before EOF, so
    reads are repeated until ``size`` bytes arrive or a read returns
    nothing.
    """
    chunks = []
    remaining = size
    while remaining > 0:
        try:
            chunk = source.read(remaining)
        except OSError as exc:
            raise SourceReadError(field, exc) from exc
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_exact(source: BinaryIO, size: int, field: str) -> bytes:
    """Read exactly ``size`` bytes for ``field`` or raise TruncatedError."""
    data = _read(source, size, field)
    if len(data) < size:
        raise TruncatedError(field, size, len(data))
    return data


def read_u32(source: BinaryIO, field: str) -> int:
    return U32.unpack(read_exact(source, U32.size, field))[0]


def read_u8(source: BinaryIO, field: str) -> int:
    return read_exact(source, 1, field)[0]


def skip(source: BinaryIO, size: int, field: str) -> None:
    """Consume ``size`` padding bytes that follow ``field``."""
    read_exact(source, size, field + " padding")


def read_u32_slot(source: BinaryIO, slot_size: int, field: str = "offset") -> Optional[int]:
    """Read one offset-table slot and return its leading u32.

    WHY: The standard layout stores offsets back to back (4-byte slots);
    the padded layout follows each one with 4 pad bytes (8-byte slots).
    An offset only counts when its whole slot is present.

    Returns:
        The big-endian u32 at the start of the slot, or None if the
        source ends before ``slot_size`` bytes are available.
    """
    data = _read(source, slot_size, field)
    if len(data) < slot_size:
        return None
    return U32.unpack_from(data)[0]
