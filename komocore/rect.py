"""Rectangles as used by the tiling engine: an origin plus a width and height."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_FIELDS = ("left", "top", "right", "bottom")


@dataclass
class Rect:
    """A rectangle whose ``right`` and ``bottom`` hold its width and height."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @classmethod
    def from_corners(cls, left: int, top: int, right: int, bottom: int) -> Rect:
        """Build a rect from absolute corner coordinates."""
        return cls(left=left, top=top, right=right - left, bottom=bottom - top)

    def add_padding(self, padding: int | None) -> None:
        """Shrink the rect in place by ``padding`` on every side."""
        if padding is None:
            return
        self.left += padding
        self.top += padding
        self.right -= padding * 2
        self.bottom -= padding * 2

    def contains_point(self, point: tuple[int, int]) -> bool:
        """Return whether the point lies within the rect, edges included."""
        x, y = point
        return (
            self.left <= x <= self.left + self.right
            and self.top <= y <= self.top + self.bottom
        )

    def to_dict(self) -> dict[str, int]:
        """Return the rect as a mapping of its four fields."""
        return {name: getattr(self, name) for name in _FIELDS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rect:
        """Build a rect from a mapping holding all four integer fields."""
        if not isinstance(data, Mapping):
            raise ValueError(f"a rect must be a mapping, not {type(data).__name__}")
        values: dict[str, int] = {}
        for name in _FIELDS:
            if name not in data:
                raise ValueError(f"rect is missing the field {name!r}")
            value = data[name]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"rect field {name!r} must be an integer, not {value!r}")
            values[name] = value
        return cls(**values)