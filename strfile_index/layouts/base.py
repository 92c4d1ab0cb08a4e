"""Abstract base for the two physical .dat layouts.

WHY: A single version sentinel switches the whole file between two byte
layouts. Modelling each as a named strategy, selected once, keeps the
header and the offset table read with the same rules and keeps the two
layouts independently testable.

HOW: BaseLayout is an ABC. Subclasses set the ``offset_slot_size`` class
attribute and implement the ``name`` property and ``read_header()``. The
offset-table reading is shared: it is the same loop for both layouts,
only the slot width differs.

RULES:
- A layout is chosen once per decode and used for both header and offsets
- read_header() is called with the source positioned just after the
  version field and must leave it at the start of the offset table
- read_offsets() reads at most count + 1 slots and stops quietly at EOF

To add a layout:
1. Create a new module in layouts/
2. Subclass BaseLayout and set ``offset_slot_size``
3. Implement the ``name`` property and read_header()
4. Register it in LAYOUTS in layouts/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO, List

from strfile_index.core.ir import Header
from strfile_index.core.reader import read_u32_slot


class BaseLayout(ABC):
    """One physical arrangement of the strfile header and offset table."""

    #: Bytes occupied by each offset-table entry, padding included.
    offset_slot_size = 4

    @property
    @abstractmethod
    def name(self) -> str:
        """Short layout name, e.g. 'standard'."""

    @abstractmethod
    def read_header(self, source: BinaryIO, version: int) -> Header:
        """Read the header fields that follow ``version``.

        Args:
            source: Binary stream positioned at byte 4.
            version: The already-read version field.

        Returns:
            The complete Header, with the source left at the offset table.
        """

    def read_offsets(self, source: BinaryIO, count: int) -> List[int]:
        """Read up to ``count + 1`` raw offsets from the table."""
        offsets: List[int] = []
        for _ in range(count + 1):
            value = read_u32_slot(source, self.offset_slot_size)
            if value is None:
                break
            offsets.append(value)
        return offsets

    def __repr__(self) -> str:
        return "<{} layout>".format(self.name)
