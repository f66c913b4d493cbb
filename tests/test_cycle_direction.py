import pytest

from komocore.cycle_direction import CycleDirection


@pytest.mark.parametrize("length", [1, 2, 5])
def test_previous_wraps_from_start(length):
    assert CycleDirection.PREVIOUS.next_idx(0, length) == length - 1


@pytest.mark.parametrize("length", [1, 2, 5])
def test_next_wraps_from_end(length):
    assert CycleDirection.NEXT.next_idx(length - 1, length) == 0


@pytest.mark.parametrize("length", [1, 3, 7])
def test_next_and_previous_are_inverse(length):
    for idx in range(length):
        forward = CycleDirection.NEXT.next_idx(idx, length)
        assert CycleDirection.PREVIOUS.next_idx(forward, length) == idx


def test_next_visits_every_index():
    length = 4
    seen = []
    idx = 0
    for _ in range(length):
        seen.append(idx)
        idx = CycleDirection.NEXT.next_idx(idx, length)
    assert sorted(seen) == list(range(length))
    assert idx == 0


def test_zero_length_rejected():
    with pytest.raises(ValueError):
        CycleDirection.NEXT.next_idx(0, 0)


def test_parse_from_str():
    assert CycleDirection.from_str("next") is CycleDirection.NEXT
    assert str(CycleDirection.PREVIOUS) == "previous"