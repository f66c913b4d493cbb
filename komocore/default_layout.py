"""The built-in tiling layouts, their resize rules and directional navigation."""

from __future__ import annotations

import dataclasses

from .operation_direction import OperationDirection
from .rect import Rect
from .types import Sizing, _WireEnum

_MAX_DIVISOR = 1.005


def _minus(value: int, amount: int) -> int:
    result = value - amount
    if result < 0:
        raise ValueError(f"index {value} has no neighbour {amount} place(s) before it")
    return result


class DefaultLayout(_WireEnum):
    BSP = "bsp"
    COLUMNS = "columns"
    ROWS = "rows"
    VERTICAL_STACK = "vertical_stack"
    HORIZONTAL_STACK = "horizontal_stack"
    ULTRAWIDE_VERTICAL_STACK = "ultrawide_vertical_stack"

    @property
    def wire_name(self) -> str:
        if self is DefaultLayout.BSP:
            return "BSP"
        return super().wire_name

    def resize(
        self,
        unaltered: Rect,
        resize: Rect | None,
        edge: OperationDirection,
        sizing: Sizing,
        delta: int,
    ) -> Rect | None:
        """Return the new resize adjustment for one edge, or None when there is none.

        Only the BSP layout supports resizing; other layouts always give None.
        An adjustment that would push past the window's own size is ignored.
        """
        if self is not DefaultLayout.BSP:
            return None

        r = dataclasses.replace(resize) if resize is not None else Rect()
        increase = sizing is Sizing.INCREASE

        if edge is OperationDirection.LEFT:
            field, limit = "left", unaltered.right
            current = r.left
            checked = current - delta if increase else current + delta
            updated = checked
        elif edge is OperationDirection.UP:
            field, limit = "top", unaltered.bottom
            current = r.top
            checked = current + delta if increase else current - delta
            updated = current - delta if increase else current + delta
        elif edge is OperationDirection.RIGHT:
            field, limit = "right", unaltered.right
            current = r.right
            checked = current + delta if increase else current - delta
            updated = checked
        else:
            field, limit = "bottom", unaltered.bottom
            current = r.bottom
            checked = current + delta if increase else current - delta
            updated = checked

        if abs(float(checked)) < float(limit) / _MAX_DIVISOR:
            setattr(r, field, updated)

        return None if r == Rect() else r

    def index_in_direction(
        self, op_direction: OperationDirection, idx: int, count: int
    ) -> int | None:
        """Return the container index reached from ``idx``, or None if there is none."""
        if not self.is_valid_direction(op_direction, idx, count):
            return None
        return {
            OperationDirection.LEFT: self.left_index,
            OperationDirection.RIGHT: self.right_index,
            OperationDirection.UP: self.up_index,
            OperationDirection.DOWN: self.down_index,
        }[op_direction](idx)

    def is_valid_direction(
        self, op_direction: OperationDirection, idx: int, count: int
    ) -> bool:
        """Return whether a container exists from ``idx`` in the given direction."""
        L = DefaultLayout
        if op_direction is OperationDirection.UP:
            if self is L.BSP:
                return count > 2 and idx not in (0, 1)
            if self is L.COLUMNS:
                return False
            if self in (L.ROWS, L.HORIZONTAL_STACK):
                return idx != 0
            if self is L.VERTICAL_STACK:
                return idx not in (0, 1)
            return idx > 2
        if op_direction is OperationDirection.DOWN:
            if self is L.BSP:
                return count > 2 and idx != count - 1 and idx % 2 != 0
            if self is L.COLUMNS:
                return False
            if self is L.ROWS:
                return idx != count - 1
            if self is L.VERTICAL_STACK:
                return idx != 0 and idx != count - 1
            if self is L.HORIZONTAL_STACK:
                return idx == 0
            return idx > 1 and idx != count - 1
        if op_direction is OperationDirection.LEFT:
            if self is L.BSP:
                return count > 1 and idx != 0
            if self in (L.COLUMNS, L.VERTICAL_STACK):
                return idx != 0
            if self is L.ROWS:
                return False
            if self is L.HORIZONTAL_STACK:
                return idx not in (0, 1)
            return count > 1 and idx != 1
        if self is L.BSP:
            return count > 1 and idx % 2 == 0 and idx != count - 1
        if self is L.COLUMNS:
            return idx != count - 1
        if self is L.ROWS:
            return False
        if self is L.VERTICAL_STACK:
            return idx == 0
        if self is L.HORIZONTAL_STACK:
            return idx != 0 and idx != count - 1
        if count in (0, 1):
            return False
        if count == 2:
            return idx != 0
        return idx < 2

    def up_index(self, idx: int) -> int:
        L = DefaultLayout
        if self is L.BSP:
            return _minus(idx, 1 if idx % 2 == 0 else 2)
        if self is L.COLUMNS:
            raise ValueError("the columns layout has no container above another")
        if self is L.HORIZONTAL_STACK:
            return 0
        return _minus(idx, 1)

    def down_index(self, idx: int) -> int:
        if self is DefaultLayout.COLUMNS:
            raise ValueError("the columns layout has no container below another")
        if self is DefaultLayout.HORIZONTAL_STACK:
            return 1
        return idx + 1

    def left_index(self, idx: int) -> int:
        L = DefaultLayout
        if self is L.BSP:
            return _minus(idx, 2 if idx % 2 == 0 else 1)
        if self in (L.COLUMNS, L.HORIZONTAL_STACK):
            return _minus(idx, 1)
        if self is L.ROWS:
            raise ValueError("the rows layout has no container left of another")
        if self is L.VERTICAL_STACK:
            return 0
        if idx == 0:
            return 1
        if idx == 1:
            raise ValueError("the left-most ultrawide column has nothing to its left")
        return 0

    def right_index(self, idx: int) -> int:
        L = DefaultLayout
        if self in (L.BSP, L.COLUMNS, L.HORIZONTAL_STACK):
            return idx + 1
        if self is L.ROWS:
            raise ValueError("the rows layout has no container right of another")
        if self is L.VERTICAL_STACK:
            return 1
        if idx == 1:
            return 0
        if idx == 0:
            return 2
        raise ValueError("the right-most ultrawide column has nothing to its right")