"""A workspace layout: either a built-in one or a custom column layout."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .arrangement import calculate as _calculate
from .custom_layout import CustomLayout
from .default_layout import DefaultLayout
from .operation_direction import OperationDirection
from .rect import Rect
from .types import Axis


@dataclass
class Layout:
    """Wraps a default or custom layout behind one interface."""

    layout: DefaultLayout | CustomLayout

    def __post_init__(self) -> None:
        if not isinstance(self.layout, (DefaultLayout, CustomLayout)):
            raise TypeError(f"not a layout: {self.layout!r}")

    @property
    def is_custom(self) -> bool:
        return isinstance(self.layout, CustomLayout)

    def calculate(
        self,
        area: Rect,
        length: int,
        container_padding: int | None = None,
        layout_flip: Axis | None = None,
        resize_dimensions: Sequence[Rect | None] = (),
    ) -> list[Rect]:
        """Return the area of each container tiled by this layout."""
        return _calculate(
            self.layout, area, length, container_padding, layout_flip, resize_dimensions
        )

    def index_in_direction(
        self, op_direction: OperationDirection, idx: int, count: int
    ) -> int | None:
        """Return the container index reached from ``idx``, or None if there is none."""
        return self.layout.index_in_direction(op_direction, idx, count)

    def to_data(self) -> dict[str, Any]:
        """Return the externally tagged form used when serialising state."""
        if isinstance(self.layout, DefaultLayout):
            return {"Default": self.layout.wire_name}
        return {"Custom": self.layout.to_data()}

    @classmethod
    def from_data(cls, data: Any) -> Layout:
        """Build a layout from its externally tagged form."""
        if not isinstance(data, Mapping) or len(data) != 1:
            raise ValueError(f"invalid layout {data!r}")
        tag, value = next(iter(data.items()))
        if tag == "Default":
            if not isinstance(value, str):
                raise ValueError(f"invalid default layout {value!r}")
            return cls(DefaultLayout.from_wire(value))
        if tag == "Custom":
            return cls(CustomLayout.from_data(value))
        raise ValueError(f"unknown layout kind {tag!r}")