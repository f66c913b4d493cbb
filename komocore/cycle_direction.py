"""Cycling forwards and backwards through an indexed collection."""

from __future__ import annotations

from .types import _WireEnum


class CycleDirection(_WireEnum):
    PREVIOUS = "previous"
    NEXT = "next"

    def next_idx(self, idx: int, length: int) -> int:
        """Return the index after ``idx`` in this direction, wrapping around."""
        if length <= 0:
            raise ValueError("length must be greater than zero")
        if self is CycleDirection.PREVIOUS:
            return length - 1 if idx == 0 else idx - 1
        return 0 if idx == length - 1 else idx + 1