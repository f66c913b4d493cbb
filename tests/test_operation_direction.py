import pytest

from komocore.operation_direction import OperationDirection
from komocore.types import Axis


class RecordingLayout:
    def __init__(self, answer):
        self.answer = answer
        self.calls = []

    def index_in_direction(self, op_direction, idx, count):
        self.calls.append((op_direction, idx, count))
        return self.answer


def test_opposite_pairs():
    assert OperationDirection.LEFT.opposite() is OperationDirection.RIGHT
    assert OperationDirection.UP.opposite() is OperationDirection.DOWN


@pytest.mark.parametrize("direction", list(OperationDirection))
def test_opposite_is_involution(direction):
    opposite = OperationDirection.opposite(direction)
    assert OperationDirection.opposite(opposite) is direction
    assert opposite is not direction


@pytest.mark.parametrize("direction", list(OperationDirection))
def test_no_flip_is_identity(direction):
    assert OperationDirection.flip(direction, None) is direction


def test_horizontal_flip_swaps_left_right_only():
    assert OperationDirection.LEFT.flip(Axis.HORIZONTAL) is OperationDirection.RIGHT
    assert OperationDirection.RIGHT.flip(Axis.HORIZONTAL) is OperationDirection.LEFT
    assert OperationDirection.UP.flip(Axis.HORIZONTAL) is OperationDirection.UP
    assert OperationDirection.DOWN.flip(Axis.HORIZONTAL) is OperationDirection.DOWN


def test_vertical_flip_swaps_up_down_only():
    assert OperationDirection.UP.flip(Axis.VERTICAL) is OperationDirection.DOWN
    assert OperationDirection.DOWN.flip(Axis.VERTICAL) is OperationDirection.UP
    assert OperationDirection.LEFT.flip(Axis.VERTICAL) is OperationDirection.LEFT


@pytest.mark.parametrize("direction", list(OperationDirection))
def test_flip_both_axes_is_opposite(direction):
    flipped = OperationDirection.flip(direction, Axis.HORIZONTAL_AND_VERTICAL)
    assert flipped is OperationDirection.opposite(direction)


def test_destination_passes_flipped_direction():
    layout = RecordingLayout(answer=3)
    result = OperationDirection.LEFT.destination(layout, Axis.HORIZONTAL, 2, 5)
    assert result == 3
    assert layout.calls == [(OperationDirection.RIGHT, 2, 5)]


def test_destination_returns_none_from_layout():
    layout = RecordingLayout(answer=None)
    assert OperationDirection.DOWN.destination(layout, None, 0, 1) is None
    assert layout.calls == [(OperationDirection.DOWN, 0, 1)]


def test_destination_zero_length_rejected():
    layout = RecordingLayout(answer=0)
    with pytest.raises(ValueError):
        OperationDirection.UP.destination(layout, None, 0, 0)
    assert layout.calls == []