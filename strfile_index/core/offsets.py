"""Reduction of the raw offset table into record spans.

WHY: The format never stores record lengths, only cumulative start
offsets, with one extra trailing offset marking the end of the last
record. Each span is therefore derived from two neighbouring offsets.

HOW: The raw table is fully materialized before pairing, so the
reduction is a pure zip of the sequence with itself shifted by one.

RULES:
- [o0, o1, ..., on] yields [(o0, o1), (o1, o2), ..., (o(n-1), on)]
- The final raw offset never starts a span
- Fewer than two raw offsets yield no spans
- Order is preserved exactly; offsets are not sorted or checked for monotonicity
"""

from __future__ import annotations

from typing import Sequence, Tuple

from strfile_index.core.ir import Span


def adjacent_pairs(seq: Sequence[int]) -> list[tuple[int, int]]:
    """Return each element paired with its successor."""
    return list(zip(seq, seq[1:]))


def build_spans(raw_offsets: Sequence[int]) -> Tuple[Span, ...]:
    """Turn ``count + 1`` raw offsets into ``count`` spans.

    Args:
        raw_offsets: Offsets in on-disk order, as read from the table.

    Returns:
        Tuple of Span, ``max(0, len(raw_offsets) - 1)`` long.
    """
    return tuple(Span(start, end) for start, end in adjacent_pairs(raw_offsets))
