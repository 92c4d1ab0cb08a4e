"""Standard (32-bit) strfile layout.

Header fields are packed back to back as big-endian u32s, the delimiter
is a single byte followed by three pad bytes, and offsets start at byte
24 with no padding between them::

    version:u32 count:u32 longest:u32 shortest:u32 flags:u32
    delimiter:u8 pad:u8[3] offsets:u32[count + 1]
"""

from __future__ import annotations

from typing import BinaryIO

from strfile_index.core.ir import Header, StrFlags
from strfile_index.core.reader import read_u32, read_u8, skip
from strfile_index.layouts.base import BaseLayout

HEADER_SIZE = 24


class StandardLayout(BaseLayout):
    """Layout written by 32-bit builds and used for every version other than 1."""

    offset_slot_size = 4

    @property
    def name(self) -> str:
        return "standard"

    def read_header(self, source: BinaryIO, version: int) -> Header:
        count = read_u32(source, "count")
        longest = read_u32(source, "longest")
        shortest = read_u32(source, "shortest")
        flags = StrFlags.decode(read_u32(source, "flags"))
        delimiter = read_u8(source, "delimiter")
        skip(source, 3, "delimiter")
        return Header(
            version=version,
            count=count,
            longest=longest,
            shortest=shortest,
            flags=flags,
            delimiter=delimiter,
        )
