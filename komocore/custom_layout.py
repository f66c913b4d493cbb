"""User-defined column layouts loaded from JSON or YAML files."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Any, ClassVar, Union

import yaml

from .default_layout import DefaultLayout
from .operation_direction import OperationDirection
from .rect import Rect


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class ColumnSplit(Enum):
    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"


@dataclass(frozen=True)
class ColumnWidth:
    """The share of the work area's width given to the primary column."""

    width_percentage: float


@dataclass(frozen=True)
class ColumnSplitWithCapacity:
    """A split column holding a fixed number of containers."""

    split: ColumnSplit
    capacity: int

    def __post_init__(self) -> None:
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int) or self.capacity < 0:
            raise ValueError(f"capacity must be a non-negative integer, not {self.capacity!r}")


Configuration = Union[ColumnWidth, ColumnSplitWithCapacity, ColumnSplit, None]


@dataclass
class Column:
    """One column of a custom layout: Primary, Secondary or Tertiary."""

    PRIMARY: ClassVar[str] = "Primary"
    SECONDARY: ClassVar[str] = "Secondary"
    TERTIARY: ClassVar[str] = "Tertiary"

    kind: str
    configuration: Configuration = None

    def __post_init__(self) -> None:
        expected = {
            Column.PRIMARY: (ColumnWidth, type(None)),
            Column.SECONDARY: (ColumnSplitWithCapacity, type(None)),
            Column.TERTIARY: (ColumnSplit,),
        }
        if self.kind not in expected:
            raise ValueError(f"unknown column kind {self.kind!r}")
        if not isinstance(self.configuration, expected[self.kind]):
            raise ValueError(
                f"invalid configuration for a {self.kind} column: {self.configuration!r}"
            )

    @property
    def is_horizontal_split(self) -> bool:
        """Whether containers in this column are stacked on top of each other."""
        if self.kind == Column.SECONDARY:
            return (
                isinstance(self.configuration, ColumnSplitWithCapacity)
                and self.configuration.split is ColumnSplit.HORIZONTAL
            )
        return self.kind == Column.TERTIARY and self.configuration is ColumnSplit.HORIZONTAL


def _split_from_data(raw: Any) -> ColumnSplit:
    try:
        return ColumnSplit(raw)
    except ValueError:
        raise ValueError(f"invalid column split {raw!r}") from None


def _single_entry(raw: Any, what: str) -> tuple[str, Any]:
    if not isinstance(raw, Mapping) or len(raw) != 1:
        raise ValueError(f"invalid {what} {raw!r}")
    return next(iter(raw.items()))


def _column_from_data(raw: Any) -> Column:
    if not isinstance(raw, Mapping) or "column" not in raw:
        raise ValueError(f"a column must be a mapping with a 'column' key, not {raw!r}")
    kind = raw["column"]
    config = raw.get("configuration")
    if kind == Column.PRIMARY:
        if config is None:
            return Column(kind)
        name, value = _single_entry(config, "column width")
        if name != "WidthPercentage" or isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"invalid column width {config!r}")
        return Column(kind, ColumnWidth(float(value)))
    if kind == Column.SECONDARY:
        if config is None:
            return Column(kind)
        name, value = _single_entry(config, "column split")
        try:
            return Column(kind, ColumnSplitWithCapacity(_split_from_data(name), value))
        except ValueError as error:
            raise ValueError(f"invalid column split {config!r}: {error}") from None
    if kind == Column.TERTIARY:
        return Column(kind, _split_from_data(config))
    raise ValueError(f"unknown column kind {kind!r}")


def _column_to_data(column: Column) -> dict[str, Any]:
    config = column.configuration
    if isinstance(config, ColumnWidth):
        data: Any = {"WidthPercentage": config.width_percentage}
    elif isinstance(config, ColumnSplitWithCapacity):
        data = {config.split.value: config.capacity}
    elif isinstance(config, ColumnSplit):
        data = config.value
    else:
        data = None
    return {"column": column.kind, "configuration": data}


@dataclass
class CustomLayout:
    """An ordered list of columns describing how containers are tiled."""

    columns: list[Column] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def __getitem__(self, idx: int) -> Column:
        return self.columns[idx]

    @classmethod
    def from_data(cls, data: Any) -> CustomLayout:
        """Build a layout from its decoded JSON or YAML form."""
        if not isinstance(data, list):
            raise ValueError("a custom layout must be a list of columns")
        return cls([_column_from_data(item) for item in data])

    def to_data(self) -> list[dict[str, Any]]:
        """Return the layout in the form stored in layout files."""
        return [_column_to_data(column) for column in self.columns]

    def column_with_idx(self, idx: int) -> tuple[int, Column | None]:
        """Return the column index holding container ``idx`` and that column."""
        column_idx = self.column_for_container_idx(idx)
        column = self.columns[column_idx] if 0 <= column_idx < len(self) else None
        return column_idx, column

    def primary_idx(self) -> int | None:
        return next(
            (i for i, column in enumerate(self.columns) if column.kind == Column.PRIMARY),
            None,
        )

    def primary_width_percentage(self) -> float | None:
        for column in self.columns:
            if column.kind == Column.PRIMARY and isinstance(column.configuration, ColumnWidth):
                return column.configuration.width_percentage
        return None

    def set_primary_width_percentage(self, percentage: float) -> None:
        """Change the width of primary columns that already have one."""
        for column in self.columns:
            if column.kind == Column.PRIMARY and isinstance(column.configuration, ColumnWidth):
                column.configuration = ColumnWidth(percentage)

    def is_valid(self) -> bool:
        """Check the layout has one primary, ends in its only tertiary and splits no column vertically."""
        if not self.columns:
            return False
        for column in self.columns:
            config = column.configuration
            if column.kind == Column.TERTIARY and config is ColumnSplit.VERTICAL:
                return False
            if isinstance(config, ColumnSplitWithCapacity) and config.split is ColumnSplit.VERTICAL:
                return False
        if self.columns[-1].kind != Column.TERTIARY:
            return False
        primaries = sum(1 for c in self.columns if c.kind == Column.PRIMARY)
        tertiaries = sum(1 for c in self.columns if c.kind == Column.TERTIARY)
        return primaries == 1 and tertiaries == 1

    def column_container_counts(self) -> dict[int, int]:
        """Map each fixed-size column's index to its number of containers."""
        counts: dict[int, int] = {}
        for idx, column in enumerate(self.columns):
            if column.kind == Column.TERTIARY:
                continue
            config = column.configuration
            counts[idx] = config.capacity if isinstance(config, ColumnSplitWithCapacity) else 1
        return counts

    def first_container_idx(self, col_idx: int) -> int:
        counts = self.column_container_counts()
        return sum(counts.get(i, 0) for i in range(col_idx))

    def column_for_container_idx(self, idx: int) -> int:
        counts = self.column_container_counts()
        accumulated = 0
        for i in range(len(self) - 1):
            if i in counts:
                accumulated += counts[i]
                if accumulated > idx:
                    return i
        return len(self) - 1

    def column_area(self, work_area: Rect, idx: int, offset: int | None) -> Rect:
        """Return the area of column ``idx`` when all columns share the width equally."""
        divisor = len(self) if offset is None else len(self) - offset
        width = _trunc_div(work_area.right, divisor)
        return Rect(
            left=work_area.left + width * idx,
            top=work_area.top,
            right=width,
            bottom=work_area.bottom,
        )

    @staticmethod
    def column_area_with_last(
        length: int,
        work_area: Rect,
        primary_right: int,
        last_column: Rect | None,
        offset: int | None,
    ) -> Rect:
        """Return a non-primary column's area, placed after ``last_column``."""
        divisor = length - 1 if offset is None else length - offset - 1
        width = _trunc_div(work_area.right - primary_right, divisor)
        left = work_area.left if last_column is None else last_column.left + last_column.right
        return Rect(left=left, top=work_area.top, right=width, bottom=work_area.bottom)

    @staticmethod
    def main_column_area(
        work_area: Rect, primary_right: int, last_column: Rect | None
    ) -> Rect:
        """Return the primary column's area, placed after ``last_column``."""
        left = work_area.left if last_column is None else last_column.left + last_column.right
        return Rect(left=left, top=work_area.top, right=primary_right, bottom=work_area.bottom)

    def index_in_direction(
        self, op_direction: OperationDirection, idx: int, count: int
    ) -> int | None:
        """Return the container index reached from ``idx``, or None if there is none."""
        if count <= len(self):
            return DefaultLayout.COLUMNS.index_in_direction(op_direction, idx, count)
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
        if count <= len(self):
            return DefaultLayout.COLUMNS.is_valid_direction(op_direction, idx, count)
        if op_direction is OperationDirection.LEFT:
            return idx != 0 and self.column_for_container_idx(idx) != 0
        if op_direction is OperationDirection.RIGHT:
            return idx != count - 1 and self.column_for_container_idx(idx) != len(self) - 1
        if op_direction is OperationDirection.UP:
            if idx == 0:
                return False
            neighbour = idx - 1
        else:
            if idx == count - 1:
                return False
            neighbour = idx + 1
        column_idx, column = self.column_with_idx(idx)
        if column is None or not column.is_horizontal_split:
            return False
        return self.column_for_container_idx(neighbour) == column_idx

    def up_index(self, idx: int) -> int:
        if idx == 0:
            raise ValueError("the first container has nothing above it")
        return idx - 1

    def down_index(self, idx: int) -> int:
        return idx + 1

    def left_index(self, idx: int) -> int:
        column_idx = self.column_for_container_idx(idx)
        if column_idx == 0:
            raise ValueError("the first column has nothing to its left")
        if column_idx - 1 == 0:
            return 0
        return self.first_container_idx(column_idx - 1)

    def right_index(self, idx: int) -> int:
        return self.first_container_idx(self.column_for_container_idx(idx) + 1)


def load_custom_layout(path: str | PathLike[str]) -> CustomLayout:
    """Load and validate a custom layout from a ``.json``, ``.yaml`` or ``.yml`` file."""
    path = Path(path)
    suffix = path.suffix
    if suffix in (".yaml", ".yml"):
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    else:
        raise ValueError("custom layouts must be json or yaml files")
    layout = CustomLayout.from_data(data)
    if not layout.is_valid():
        raise ValueError("the layout file provided was invalid")
    return layout