"""Immutable value types for a decoded strfile index.

WHY: The .dat file stores nothing but a header and cumulative start
offsets. Consumers (fortune pickers, text extractors) need the header
metadata as named values and each record's byte range as a ready-made
span. These types are the stable contract between decoding and those
consumers.

HOW: Four types:
  StrFlags      IntFlag of the three recognized header flag bits
  Span          one record's (start, end) byte range in the text file
  Header        the six preamble fields exactly as read
  StrfileIndex  the complete decoded index: header fields plus spans

RULES:
- StrfileIndex and Header are frozen; spans are stored as a tuple
- len(spans) must equal count, checked at construction
- Flags are decoded totally: unknown bits raise, they are never masked off
- version is stored as read (1 = padded layout), never renumbered
- Spans are in on-disk order, which is not necessarily sorted
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Tuple

from strfile_index.config import FLAG_MASK, PADDED_VERSION
from strfile_index.core.errors import CountMismatchError, UnrecognizedFlagsError


class StrFlags(enum.IntFlag):
    """Bit flags stored in the strfile header's 32-bit flags word."""

    RANDOM = 0x1
    ORDERED = 0x2
    ROTATED = 0x4

    @classmethod
    def decode(cls, word: int) -> StrFlags:
        """Decode a raw flags word, rejecting any bit outside FLAG_MASK."""
        unknown = word & ~FLAG_MASK
        if unknown:
            raise UnrecognizedFlagsError(word, unknown)
        return cls(word)


class Span(NamedTuple):
    """Byte range of one record in the companion text file.

    end is the start of the next record, so it still covers the trailing
    delimiter line; trimming is up to the consumer.
    """

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Header:
    """The six preamble fields of a .dat file.

    RULES:
    - version: raw value of bytes 0-3
    - count: declared number of records
    - longest / shortest: declared record lengths, surfaced unverified
    - flags: decoded StrFlags
    - delimiter: the byte value that ends each record
    """

    version: int
    count: int
    longest: int
    shortest: int
    flags: StrFlags
    delimiter: int


@dataclass(frozen=True)
class StrfileIndex:
    """A decoded strfile index.

    WHY: Consumers only ever need read access to the header values and
    the span table, and the same index is typically shared by everything
    that draws fortunes from one database. A frozen value makes that
    sharing safe.

    HOW: Built by decode_index() once the offset table has been reduced
    to spans. __post_init__ normalizes spans to a tuple of Span and checks
    the declared count, so an instance can never exist in an
    inconsistent state.

    RULES:
    - len(spans) == count, else CountMismatchError
    - flags must be a StrFlags (ints are decoded and checked)
    - Sequence protocol (len, iter, indexing) delegates to spans
    """

    version: int
    count: int
    longest: int
    shortest: int
    flags: StrFlags
    delimiter: int
    spans: Tuple[Span, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # frozen dataclass: normalize through object.__setattr__
        spans = tuple(Span(*span) for span in self.spans)
        object.__setattr__(self, "spans", spans)
        if not isinstance(self.flags, StrFlags):
            object.__setattr__(self, "flags", StrFlags.decode(int(self.flags)))
        if len(spans) != self.count:
            raise CountMismatchError(self.count, len(spans))

    @classmethod
    def from_header(cls, header: Header, spans) -> StrfileIndex:
        return cls(
            version=header.version,
            count=header.count,
            longest=header.longest,
            shortest=header.shortest,
            flags=header.flags,
            delimiter=header.delimiter,
            spans=spans,
        )

    @property
    def header(self) -> Header:
        return Header(
            version=self.version,
            count=self.count,
            longest=self.longest,
            shortest=self.shortest,
            flags=self.flags,
            delimiter=self.delimiter,
        )

    @property
    def format_version(self) -> int:
        """Alias of ``version``: the raw version field as read."""
        return self.version

    @property
    def is_padded(self) -> bool:
        """True when the index was read from the padded (64-bit) layout."""
        return self.version == PADDED_VERSION

    @property
    def is_random(self) -> bool:
        return bool(self.flags & StrFlags.RANDOM)

    @property
    def is_ordered(self) -> bool:
        return bool(self.flags & StrFlags.ORDERED)

    @property
    def is_rotated(self) -> bool:
        """True when the text file's records are ROT13-encoded."""
        return bool(self.flags & StrFlags.ROTATED)

    @property
    def delimiter_char(self) -> str:
        return chr(self.delimiter)

    def __len__(self) -> int:
        return len(self.spans)

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __getitem__(self, index):
        return self.spans[index]
