"""Padded (64-bit) strfile layout, selected when version == 1.

64-bit builds write every field into an 8-byte slot: each u32 is
followed by 4 pad bytes, the delimiter byte sits at the start of its own
slot (byte 40), and every offset in the table is followed by 4 pad bytes,
including the last one.

    byte  0  version   8  count   16 longest   24 shortest
    byte 32  flags    40  delimiter           48 offsets (8-byte slots)
"""

from __future__ import annotations

from typing import BinaryIO

from strfile_index.core.ir import Header, StrFlags
from strfile_index.core.reader import read_u32, read_u8, skip
from strfile_index.layouts.base import BaseLayout

HEADER_SIZE = 48
_FIELD_PAD = 4


class PaddedLayout(BaseLayout):
    """Layout with every header field and offset widened to 8 bytes."""

    offset_slot_size = 8

    @property
    def name(self) -> str:
        return "padded"

    def _read_field(self, source: BinaryIO, field: str) -> int:
        value = read_u32(source, field)
        skip(source, _FIELD_PAD, field)
        return value

    def read_header(self, source: BinaryIO, version: int) -> Header:
        # version's own padding is still ahead of us
        skip(source, _FIELD_PAD, "version")
        count = self._read_field(source, "count")
        longest = self._read_field(source, "longest")
        shortest = self._read_field(source, "shortest")
        flags = StrFlags.decode(self._read_field(source, "flags"))
        delimiter = read_u8(source, "delimiter")
        skip(source, 7, "delimiter")
        return Header(
            version=version,
            count=count,
            longest=longest,
            shortest=shortest,
            flags=flags,
            delimiter=delimiter,
        )
