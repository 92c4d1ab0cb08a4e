"""Exception taxonomy for strfile index decoding.

WHY: A .dat file cannot be trusted. Callers need typed exceptions to tell
a truncated file from an unknown format variant or an internally
inconsistent offset table, and each needs enough detail to diagnose the
file without re-reading it.

HOW: One base class, StrfileIndexError, with a subclass per failure kind.
Each subclass stores its diagnostic values as attributes and builds a
readable message in __init__.

RULES:
- Every decode failure raised by this package is a StrfileIndexError
- Nothing is retried or recovered; the first failure aborts the decode
- I/O errors from the byte source are re-raised as SourceReadError with
  the original exception chained as __cause__
"""

from __future__ import annotations


class StrfileIndexError(Exception):
    """Base class for all strfile index decode failures."""


class TruncatedError(StrfileIndexError):
    """Raised when the source ends before a required field is complete.

    RULES:
    - field names what was being read ("count", "flags", "offset table", ...)
    - expected / actual are byte counts for that single read
    """

    def __init__(self, field: str, expected: int, actual: int) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Truncated strfile index: {field} needs {expected} bytes, got {actual}"
        )


class UnrecognizedFlagsError(StrfileIndexError):
    """Raised when the flags word has bits outside RANDOM | ORDERED | ROTATED.

    WHY: An unknown bit may mark a format variant this decoder does not
    model, so it is rejected rather than masked off.
    """

    def __init__(self, flags: int, unknown_bits: int) -> None:
        self.flags = flags
        self.unknown_bits = unknown_bits
        super().__init__(
            f"Unrecognized strfile flags 0x{flags:08x} (unknown bits 0x{unknown_bits:08x})"
        )


class CountMismatchError(StrfileIndexError):
    """Raised when the offset table yields a different number of spans than declared."""

    def __init__(self, declared: int, actual: int) -> None:
        self.declared = declared
        self.actual = actual
        super().__init__(
            f"strfile header declares {declared} strings but offset table yields {actual}"
        )


class UnsupportedVersionError(StrfileIndexError):
    """Raised in strict mode for a version not known to use the standard layout."""

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"Unsupported strfile version {version}")


class SourceReadError(StrfileIndexError):
    """Raised when the byte source itself fails while a field is being read."""

    def __init__(self, field: str, error: OSError) -> None:
        self.field = field
        super().__init__(f"I/O error while reading {field}: {error}")
