import pytest

from komocore.arrangement import (
    calculate,
    calculate_resize_adjustments,
    columns,
    recursive_fibonacci,
    rows,
)
from komocore.custom_layout import (
    Column,
    ColumnSplit,
    ColumnSplitWithCapacity,
    ColumnWidth,
    CustomLayout,
)
from komocore.default_layout import DefaultLayout
from komocore.rect import Rect
from komocore.types import Axis

AREA = Rect(left=0, top=0, right=1200, bottom=800)


def _assert_side_by_side(rects):
    for a, b in zip(rects, rects[1:]):
        assert a.left + a.right == b.left


def _assert_stacked(rects):
    for a, b in zip(rects, rects[1:]):
        assert a.top + a.bottom == b.top


def test_columns_cover_area():
    result = columns(AREA, 4)
    assert len(result) == 4
    _assert_side_by_side(result)
    assert result[0].left == AREA.left
    assert sum(r.right for r in result) == AREA.right
    assert all(r.top == AREA.top and r.bottom == AREA.bottom for r in result)


def test_rows_cover_area():
    result = rows(AREA, 4)
    assert len(result) == 4
    _assert_stacked(result)
    assert sum(r.bottom for r in result) == AREA.bottom
    assert all(r.left == AREA.left and r.right == AREA.right for r in result)


def test_columns_and_rows_reject_zero():
    with pytest.raises(ValueError):
        columns(AREA, 0)
    with pytest.raises(ValueError):
        rows(AREA, 0)


def test_calculate_rejects_zero_length():
    with pytest.raises(ValueError):
        calculate(DefaultLayout.BSP, AREA, 0)


def test_calculate_rejects_non_layout():
    with pytest.raises(TypeError):
        calculate("bsp", AREA, 2)


def test_single_container_fills_area_in_every_default_layout():
    for layout in DefaultLayout:
        assert calculate(layout, AREA, 1) == [AREA]


def test_calculate_does_not_mutate_area():
    original = Rect(AREA.left, AREA.top, AREA.right, AREA.bottom)
    calculate(DefaultLayout.BSP, AREA, 3, container_padding=5)
    assert AREA == original


def test_columns_and_rows_layouts_match_helpers():
    assert calculate(DefaultLayout.COLUMNS, AREA, 3) == columns(AREA, 3)
    assert calculate(DefaultLayout.ROWS, AREA, 3) == rows(AREA, 3)


def test_padding_applied_to_every_rect():
    plain = calculate(DefaultLayout.VERTICAL_STACK, AREA, 3)
    padded = calculate(DefaultLayout.VERTICAL_STACK, AREA, 3, container_padding=10)
    for rect in plain:
        rect.add_padding(10)
    assert padded == plain


def test_vertical_stack_layout():
    main, *stack = calculate(DefaultLayout.VERTICAL_STACK, AREA, 3)
    assert main.left == AREA.left
    assert main.right + stack[0].right == AREA.right
    assert all(r.left == main.left + main.right for r in stack)
    _assert_stacked(stack)


def test_vertical_stack_horizontal_flip_puts_main_on_right():
    main, *stack = calculate(
        DefaultLayout.VERTICAL_STACK, AREA, 3, layout_flip=Axis.HORIZONTAL
    )
    assert all(r.left == AREA.left for r in stack)
    assert main.left == stack[0].left + stack[0].right
    assert main.left + main.right == AREA.right


def test_horizontal_stack_layout_and_flip():
    main, *stack = calculate(DefaultLayout.HORIZONTAL_STACK, AREA, 3)
    assert main.top == AREA.top
    assert all(r.top == main.top + main.bottom for r in stack)
    _assert_side_by_side(stack)

    main, *stack = calculate(
        DefaultLayout.HORIZONTAL_STACK, AREA, 3, layout_flip=Axis.VERTICAL
    )
    assert all(r.top == AREA.top for r in stack)
    assert main.top == stack[0].top + stack[0].bottom


def test_ultrawide_puts_primary_in_middle():
    primary, secondary, *stack = calculate(
        DefaultLayout.ULTRAWIDE_VERTICAL_STACK, AREA, 4
    )
    assert secondary.left == AREA.left
    assert secondary.left + secondary.right == primary.left
    assert all(r.left == primary.left + primary.right for r in stack)
    assert stack[0].right == secondary.right
    _assert_stacked(stack)


def test_ultrawide_horizontal_flip_moves_stack_left():
    primary, secondary, *stack = calculate(
        DefaultLayout.ULTRAWIDE_VERTICAL_STACK, AREA, 4, layout_flip=Axis.HORIZONTAL
    )
    assert all(r.left == AREA.left for r in stack)
    assert stack[0].left + stack[0].right == primary.left
    assert primary.left + primary.right == secondary.left


def test_bsp_two_containers_split_the_width():
    first, second = calculate(DefaultLayout.BSP, AREA, 2)
    assert first.left == AREA.left
    _assert_side_by_side([first, second])
    assert second.left + second.right == AREA.right
    assert first.bottom == second.bottom == AREA.bottom


def test_bsp_three_containers_stack_on_the_right():
    first, second, third = calculate(DefaultLayout.BSP, AREA, 3)
    assert second.left == third.left == first.left + first.right
    _assert_stacked([second, third])
    assert third.top + third.bottom == AREA.bottom


def test_bsp_horizontal_flip_swaps_sides():
    first, second = calculate(DefaultLayout.BSP, AREA, 2, layout_flip=Axis.HORIZONTAL)
    assert second.left == AREA.left
    assert second.left + second.right == first.left


def test_resize_adjustments_all_none():
    assert calculate_resize_adjustments([None, None, None]) == [None, None, None]


def test_resize_left_moves_neighbour_right_edge():
    result = calculate_resize_adjustments([None, Rect(left=50)])
    assert result == [Rect(right=50), None]


def test_resize_top_on_even_index_moves_previous_bottom():
    result = calculate_resize_adjustments([None, None, Rect(top=30)])
    assert result == [None, Rect(bottom=30), None]


def test_resize_adjustments_do_not_mutate_input():
    given = [Rect(right=5), Rect(left=50)]
    calculate_resize_adjustments(given)
    assert given == [Rect(right=5), Rect(left=50)]


def test_fibonacci_honours_resize_and_stays_contiguous():
    plain = recursive_fibonacci(0, 2, AREA, None, [])
    resized = recursive_fibonacci(0, 2, AREA, None, [Rect(right=100)])
    assert resized[0].right > plain[0].right
    _assert_side_by_side(resized)
    assert resized[1].left + resized[1].right == AREA.right


def test_fibonacci_zero_count_is_empty():
    assert recursive_fibonacci(0, 0, AREA, None, []) == []


def _custom_layout():
    return CustomLayout(
        [
            Column(Column.PRIMARY, ColumnWidth(50.0)),
            Column(Column.SECONDARY),
            Column(Column.TERTIARY, ColumnSplit.HORIZONTAL),
        ]
    )


def test_custom_layout_with_few_containers_uses_columns():
    assert calculate(_custom_layout(), AREA, 3) == columns(AREA, 3)


def test_custom_layout_fills_tertiary_column():
    result = calculate(_custom_layout(), AREA, 5)
    assert len(result) == 5
    primary, secondary, *tertiary = result
    assert primary.right == AREA.right // 2
    _assert_side_by_side([primary, secondary, tertiary[0]])
    assert all(r.left == tertiary[0].left and r.right == tertiary[0].right for r in tertiary)
    _assert_stacked(tertiary)


def test_custom_layout_without_enough_for_tertiary():
    layout = CustomLayout(
        [
            Column(Column.PRIMARY),
            Column(
                Column.SECONDARY,
                ColumnSplitWithCapacity(ColumnSplit.HORIZONTAL, 3),
            ),
            Column(Column.TERTIARY, ColumnSplit.HORIZONTAL),
        ]
    )
    result = calculate(layout, AREA, 4)
    assert len(result) == 4
    _assert_stacked(result[1:])