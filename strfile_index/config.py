"""Format constants, version policy defaults, and .env loading.

WHY: The strfile format has a handful of magic numbers (the padded-layout
version sentinel, the recognized flag bits) and one policy knob that the
format itself cannot settle: whether version numbers other than the known
ones are safe to read with the standard layout. Keeping both here makes
them easy to find and override without touching decode logic.

HOW: python-dotenv loads the .env file on import. Constants are
module-level values. The version policy is read from the environment via
load_known_versions(), which raises a clear error on malformed input.

RULES:
- PADDED_VERSION (1) selects the padded 64-bit layout; it is fixed by the format
- FLAG_MASK covers the three recognized flag bits; anything else is rejected
- STRFILE_STRICT_VERSION=true rejects versions outside KNOWN_STANDARD_VERSIONS
- STRFILE_KNOWN_VERSIONS is a comma-separated list of integers (default "0,2")
- Byte order is never configurable
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Format constants
# ---------------------------------------------------------------------------

PADDED_VERSION = 1
"""Version value written by 64-bit builds, whose fields are padded to 8 bytes."""

FLAG_MASK = 0x7
"""RANDOM | ORDERED | ROTATED."""

# ---------------------------------------------------------------------------
# Version policy
# ---------------------------------------------------------------------------

_DEFAULT_KNOWN_VERSIONS = "0,2"


def load_known_versions(raw: str | None = None) -> frozenset[int]:
    """Parse the set of versions known to use the standard layout.

    WHY: Only a few version numbers have been seen in the wild. Strict
    decoding needs an explicit allow-list, and deployments reading
    unusual fortune databases may need to extend it.

    HOW: Splits STRFILE_KNOWN_VERSIONS (or ``raw``) on commas and parses
    each non-blank entry as a base-10 integer.

    RULES:
    - Blank entries are ignored ("0, 2," is fine)
    - Non-integer or negative entries raise ValueError naming the entry
    - The padded sentinel (1) is never part of this set; it is dispatched separately
    """
    if raw is None:
        raw = os.getenv("STRFILE_KNOWN_VERSIONS", _DEFAULT_KNOWN_VERSIONS)
    versions = set()
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        try:
            value = int(entry, 10)
        except ValueError:
            raise ValueError(
                "Invalid entry in STRFILE_KNOWN_VERSIONS: {!r} "
                "(expected comma-separated integers)".format(entry)
            ) from None
        if value < 0:
            raise ValueError(
                "Invalid entry in STRFILE_KNOWN_VERSIONS: {!r} "
                "(versions are unsigned)".format(entry)
            )
        versions.add(value)
    versions.discard(PADDED_VERSION)
    return frozenset(versions)


KNOWN_STANDARD_VERSIONS: frozenset[int] = load_known_versions()
STRICT_VERSION = os.getenv("STRFILE_STRICT_VERSION", "false").lower() == "true"
