"""strfile index decoder for the .dat files written by strfile(8).

WHY: fortune databases ship as a plain text file plus a binary index of
record offsets. The index is fixed-width, big-endian, and comes in two
incompatible layouts told apart by a single version value, so it cannot
be read safely without validating it.

HOW: One decode pass. Read the version, pick the layout, read the
header and offset table with that layout, pair offsets into spans, check
the declared count. The result is an immutable StrfileIndex.

RULES:
- Decoding is read-only; this package never writes .dat files
- Callers own the byte source and the companion text file
- Every failure is a StrfileIndexError subclass
"""

from strfile_index.core.assembler import decode_bytes, decode_index
from strfile_index.core.errors import (
    CountMismatchError,
    SourceReadError,
    StrfileIndexError,
    TruncatedError,
    UnrecognizedFlagsError,
    UnsupportedVersionError,
)
from strfile_index.core.ir import Header, Span, StrFlags, StrfileIndex

__version__ = "0.1.0"

__all__ = [
    "CountMismatchError",
    "Header",
    "SourceReadError",
    "Span",
    "StrFlags",
    "StrfileIndex",
    "StrfileIndexError",
    "TruncatedError",
    "UnrecognizedFlagsError",
    "UnsupportedVersionError",
    "decode_bytes",
    "decode_index",
]
