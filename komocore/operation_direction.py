"""Directions for focus, move and resize operations."""

from __future__ import annotations

from typing import Any

from .types import Axis, _WireEnum


class OperationDirection(_WireEnum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def opposite(self) -> OperationDirection:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]

    def flip(self, layout_flip: Axis | None) -> OperationDirection:
        """Return the direction as seen in a layout flipped along ``layout_flip``."""
        if layout_flip is None:
            return self
        horizontal = layout_flip in (Axis.HORIZONTAL, Axis.HORIZONTAL_AND_VERTICAL)
        vertical = layout_flip in (Axis.VERTICAL, Axis.HORIZONTAL_AND_VERTICAL)
        if self in (OperationDirection.LEFT, OperationDirection.RIGHT) and horizontal:
            return self.opposite()
        if self in (OperationDirection.UP, OperationDirection.DOWN) and vertical:
            return self.opposite()
        return self

    def destination(
        self, layout: Any, layout_flip: Axis | None, idx: int, length: int
    ) -> int | None:
        """Return the container index reached from ``idx`` in this direction, if any."""
        if length <= 0:
            raise ValueError("length must be greater than zero")
        return layout.index_in_direction(self.flip(layout_flip), idx, length)


_OPPOSITES = {
    OperationDirection.LEFT: OperationDirection.RIGHT,
    OperationDirection.RIGHT: OperationDirection.LEFT,
    OperationDirection.UP: OperationDirection.DOWN,
    OperationDirection.DOWN: OperationDirection.UP,
}