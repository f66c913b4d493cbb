"""Computing the area of every container for a layout."""

from __future__ import annotations

from collections.abc import Sequence

from .custom_layout import Column, ColumnSplit, ColumnSplitWithCapacity, CustomLayout
from .default_layout import DefaultLayout
from .rect import Rect
from .types import Axis

_HORIZONTAL_FLIPS = (Axis.HORIZONTAL, Axis.HORIZONTAL_AND_VERTICAL)
_VERTICAL_FLIPS = (Axis.VERTICAL, Axis.HORIZONTAL_AND_VERTICAL)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _check_length(length: int) -> None:
    if length <= 0:
        raise ValueError("length must be greater than zero")


def columns(area: Rect, length: int) -> list[Rect]:
    """Split the area into ``length`` side-by-side columns of equal width."""
    _check_length(length)
    width = _trunc_div(area.right, length)
    return [
        Rect(left=area.left + width * i, top=area.top, right=width, bottom=area.bottom)
        for i in range(length)
    ]


def rows(area: Rect, length: int) -> list[Rect]:
    """Split the area into ``length`` stacked rows of equal height."""
    _check_length(length)
    height = _trunc_div(area.bottom, length)
    return [
        Rect(left=area.left, top=area.top + height * i, right=area.right, bottom=height)
        for i in range(length)
    ]


def _adjust_neighbours(
    adjustments: list[Rect | None],
    indices: range,
    should_adjust: bool,
    field: str,
    amount: int,
) -> None:
    for n in indices:
        if (n % 2 == 0) != should_adjust:
            continue
        existing = adjustments[n]
        if existing is not None:
            setattr(existing, field, getattr(existing, field) + amount)
        else:
            fresh = Rect()
            setattr(fresh, field, amount)
            adjustments[n] = fresh


def calculate_resize_adjustments(
    resize_dimensions: Sequence[Rect | None],
) -> list[Rect | None]:
    """Turn per-container resizes into adjustments that also move neighbouring edges."""
    adjustments: list[Rect | None] = [
        None if rect is None else Rect(rect.left, rect.top, rect.right, rect.bottom)
        for rect in resize_dimensions
    ]

    for i, resize_ref in enumerate(resize_dimensions):
        if resize_ref is None or i == 0:
            continue

        if resize_ref.left != 0:
            if i == 1:
                indices = range(0, 1)
            elif i % 2 == 1:
                indices = range(i - 1, i)
            else:
                indices = range(i - 2, i)
            _adjust_neighbours(adjustments, indices, True, "right", resize_ref.left)
            own = adjustments[i]
            if own is not None:
                own.left = 0

        if resize_ref.top != 0:
            if i == 1:
                indices = range(0, 1)
            elif i % 2 == 0:
                indices = range(i - 1, i)
            else:
                indices = range(i - 2, i)
            _adjust_neighbours(adjustments, indices, False, "bottom", resize_ref.top)
            own = adjustments[i]
            if own is not None:
                own.top = 0

    return [None if rect is None or rect == Rect() else rect for rect in adjustments]


def recursive_fibonacci(
    idx: int,
    count: int,
    area: Rect,
    layout_flip: Axis | None,
    resize_adjustments: Sequence[Rect | None],
) -> list[Rect]:
    """Lay containers out as a binary space partition starting at container ``idx``."""
    result: list[Rect] = []
    current = Rect(area.left, area.top, area.right, area.bottom)

    while count > 0:
        adjustment = resize_adjustments[idx] if idx < len(resize_adjustments) else None
        if adjustment is not None:
            resized = Rect(
                current.left + adjustment.left,
                current.top + adjustment.top,
                current.right + adjustment.right,
                current.bottom + adjustment.bottom,
            )
        else:
            resized = Rect(current.left, current.top, current.right, current.bottom)

        half_width = _trunc_div(current.right, 2)
        half_height = _trunc_div(current.bottom, 2)
        half_resized_width = _trunc_div(resized.right, 2)
        half_resized_height = _trunc_div(resized.bottom, 2)

        main_x, alt_x = resized.left, resized.left + half_resized_width
        main_y, alt_y = resized.top, resized.top + half_resized_height
        if layout_flip in _HORIZONTAL_FLIPS:
            main_x = resized.left + half_width + (half_width - half_resized_width)
            alt_x = resized.left
        if layout_flip in _VERTICAL_FLIPS:
            main_y = resized.top + half_height + (half_height - half_resized_height)
            alt_y = resized.top

        if count == 1:
            result.append(resized)
            break

        if idx % 2 != 0:
            result.append(
                Rect(resized.left, main_y, resized.right, half_resized_height)
            )
            current = Rect(
                current.left, alt_y, current.right, current.bottom - half_resized_height
            )
        else:
            result.append(
                Rect(main_x, resized.top, half_resized_width, resized.bottom)
            )
            current = Rect(
                alt_x, current.top, current.right - half_resized_width, current.bottom
            )

        idx += 1
        count -= 1

    return result


def _vertical_stack(area: Rect, length: int, layout_flip: Axis | None) -> list[Rect]:
    primary_right = area.right if length == 1 else _trunc_div(area.right, 2)
    main_left = area.left
    stack_left = area.left + primary_right
    if layout_flip in _HORIZONTAL_FLIPS and length > 1:
        main_left = area.left + area.right - primary_right
        stack_left = area.left

    layouts = [Rect(main_left, area.top, primary_right, area.bottom)]
    if length > 1:
        layouts.extend(
            rows(
                Rect(stack_left, area.top, area.right - primary_right, area.bottom),
                length - 1,
            )
        )
    return layouts


def _horizontal_stack(area: Rect, length: int, layout_flip: Axis | None) -> list[Rect]:
    bottom = area.bottom if length == 1 else _trunc_div(area.bottom, 2)
    main_top = area.top
    stack_top = area.top + bottom
    if layout_flip in _VERTICAL_FLIPS and length > 1:
        main_top = area.top + area.bottom - bottom
        stack_top = area.top

    layouts = [Rect(area.left, main_top, area.right, bottom)]
    if length > 1:
        layouts.extend(
            columns(
                Rect(area.left, stack_top, area.right, area.bottom - bottom),
                length - 1,
            )
        )
    return layouts


def _ultrawide_vertical_stack(
    area: Rect, length: int, layout_flip: Axis | None
) -> list[Rect]:
    primary_right = area.right if length == 1 else _trunc_div(area.right, 2)
    if length == 1:
        secondary_right = 0
    elif length == 2:
        secondary_right = area.right - primary_right
    else:
        secondary_right = _trunc_div(area.right - primary_right, 2)

    flipped = layout_flip in _HORIZONTAL_FLIPS
    if length == 1:
        primary_left, secondary_left, stack_left = area.left, 0, 0
    elif length == 2:
        if flipped:
            primary_left, secondary_left = area.left, area.left + primary_right
        else:
            primary_left, secondary_left = area.left + secondary_right, area.left
        stack_left = 0
    else:
        primary_left = area.left + secondary_right
        if flipped:
            secondary_left = area.left + primary_right + secondary_right
            stack_left = area.left
        else:
            secondary_left = area.left
            stack_left = area.left + primary_right + secondary_right

    layouts = [Rect(primary_left, area.top, primary_right, area.bottom)]
    if length >= 2:
        layouts.append(Rect(secondary_left, area.top, secondary_right, area.bottom))
        if length > 2:
            layouts.extend(
                rows(
                    Rect(stack_left, area.top, secondary_right, area.bottom),
                    length - 2,
                )
            )
    return layouts


def _calculate_default(
    layout: DefaultLayout,
    area: Rect,
    length: int,
    layout_flip: Axis | None,
    resize_dimensions: Sequence[Rect | None],
) -> list[Rect]:
    if layout is DefaultLayout.BSP:
        return recursive_fibonacci(
            0, length, area, layout_flip, calculate_resize_adjustments(resize_dimensions)
        )
    if layout is DefaultLayout.COLUMNS:
        return columns(area, length)
    if layout is DefaultLayout.ROWS:
        return rows(area, length)
    if layout is DefaultLayout.VERTICAL_STACK:
        return _vertical_stack(area, length, layout_flip)
    if layout is DefaultLayout.HORIZONTAL_STACK:
        return _horizontal_stack(area, length, layout_flip)
    return _ultrawide_vertical_stack(area, length, layout_flip)


def _calculate_custom(layout: CustomLayout, area: Rect, length: int) -> list[Rect]:
    column_count = len(layout)
    if length <= column_count:
        return columns(area, length)

    counts = layout.column_container_counts()
    try:
        threshold = sum(counts[i] for i in range(column_count - 1))
    except KeyError:
        raise ValueError("only the final column of a custom layout may be tertiary") from None

    offset = None if length > threshold else 1

    percentage = layout.primary_width_percentage()
    if percentage is None:
        primary_right = _trunc_div(area.right, column_count)
    else:
        primary_right = _trunc_div(area.right, 100) * int(percentage)

    dimensions: list[Rect] = []

    def last_column(idx: int) -> Rect | None:
        if idx == 0:
            return None
        return dimensions[layout.first_container_idx(idx - 1)]

    for idx, column in enumerate(layout):
        if idx >= column_count - (offset or 0):
            continue

        column_area = CustomLayout.column_area_with_last(
            column_count, area, primary_right, last_column(idx), offset
        )
        config = column.configuration

        if column.kind == Column.PRIMARY and config is not None:
            dimensions.append(
                CustomLayout.main_column_area(area, primary_right, last_column(idx))
            )
        elif column.kind in (Column.PRIMARY, Column.SECONDARY) and config is None:
            dimensions.append(column_area)
        elif isinstance(config, ColumnSplitWithCapacity):
            split = rows if config.split is ColumnSplit.HORIZONTAL else columns
            dimensions.extend(split(column_area, config.capacity))
        else:
            if idx == 0:
                raise ValueError("a tertiary column cannot be the first column")
            remaining = length - threshold
            split = rows if config is ColumnSplit.HORIZONTAL else columns
            dimensions.extend(split(column_area, remaining))

    return dimensions


def calculate(
    layout: DefaultLayout | CustomLayout,
    area: Rect,
    length: int,
    container_padding: int | None = None,
    layout_flip: Axis | None = None,
    resize_dimensions: Sequence[Rect | None] = (),
) -> list[Rect]:
    """Return the area of each of ``length`` containers tiled by ``layout``."""
    _check_length(length)
    if isinstance(layout, DefaultLayout):
        dimensions = _calculate_default(
            layout, area, length, layout_flip, resize_dimensions
        )
    elif isinstance(layout, CustomLayout):
        dimensions = _calculate_custom(layout, area, length)
    else:
        raise TypeError(f"cannot arrange containers with {layout!r}")

    for rect in dimensions:
        rect.add_padding(container_padding)
    return dimensions