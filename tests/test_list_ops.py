import pytest

from chromasteps.colors import RED, GREEN, BLUE
from chromasteps.utils.list_ops import (
    duplicate_colors,
    duplicate_stops_with_offset,
    interpret_stops,
    stretch_list,
)
from chromasteps.utils.num_utils import lerp_double, floor_at_zero, round_half_away, finite_or


def test_duplicate_colors_doubles_length():
    for colors in ([], [RED], [RED, BLUE], [RED, GREEN, BLUE, RED]):
        duplicated = duplicate_colors(colors)
        assert len(duplicated) == 2 * len(colors)
        for i, color in enumerate(colors):
            assert duplicated[2 * i] == duplicated[2 * i + 1] == color


def test_duplicate_colors_does_not_mutate_input():
    colors = [RED, BLUE]
    duplicate_colors(colors)
    assert colors == [RED, BLUE]


def test_duplicate_stops_with_offset():
    assert duplicate_stops_with_offset([0.0, 0.25, 0.5], 0.125) == [0.0, 0.125, 0.25, 0.375, 0.5, 0.625]
    assert duplicate_stops_with_offset([0.0, 0.5], 0.0) == [0.0, 0.0, 0.5, 0.5]
    assert duplicate_stops_with_offset([], 0.1) == []


def test_interpret_stops_even_spacing():
    assert interpret_stops(None, 3) == pytest.approx([0.0, 0.5, 1.0])
    assert interpret_stops(None, 5) == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])
    assert interpret_stops(None, 2) == pytest.approx([0.0, 1.0])


def test_interpret_stops_are_exact_doubles():
    # i / (count - 1), with no single-precision rounding
    assert interpret_stops(None, 4) == [0.0, 1 / 3, 2 / 3, 1.0]
    assert interpret_stops(None, 7)[1] == 1 / 6
    assert all(type(s) is float for s in interpret_stops(None, 4))


def test_interpret_stops_degenerate_counts():
    assert interpret_stops(None, 0) == []
    assert interpret_stops(None, -3) == []
    assert interpret_stops(None, 1) == [0.0]


def test_interpret_stops_explicit_wins():
    # the count is ignored when stops are given
    assert interpret_stops([0.2, 0.7], 5) == [0.2, 0.7]
    assert interpret_stops((0.1,), 1) == [0.1]
    assert isinstance(interpret_stops((0.1, 0.9), 2), list)


def test_interpret_stops_returns_fresh_list():
    explicit = [0.0, 0.5]
    result = interpret_stops(explicit, 2)
    result.append(1.0)
    assert explicit == [0.0, 0.5]


class TestStretchList:
    def test_repeats_last_entry(self):
        assert stretch_list([1, 2], 4) == [1, 2, 2, 2]

    def test_empty_input(self):
        assert stretch_list([], 3) == []

    def test_longer_input_is_kept(self):
        assert stretch_list([1, 2, 3], 2) == [1, 2, 3]

    def test_does_not_mutate(self):
        original = [1, 2]
        stretch_list(original, 5)
        assert original == [1, 2]


def test_lerp_double():
    assert lerp_double(None, None, 0.5) is None
    assert lerp_double(None, 2.0, 0.5) == pytest.approx(1.0)
    assert lerp_double(2.0, None, 0.25) == pytest.approx(1.5)
    assert lerp_double(1.0, 3.0, 0.5) == pytest.approx(2.0)
    assert lerp_double(1.0, 3.0, 2.0) == pytest.approx(5.0)
    assert lerp_double(4.0, 4.0, 123.0) == 4.0


def test_lerp_double_nan():
    import math
    assert math.isnan(lerp_double(float('nan'), float('nan'), 0.5))
    assert math.isnan(lerp_double(float('nan'), 1.0, 0.5))


def test_floor_at_zero():
    import math
    assert floor_at_zero(-1.0) == 0.0
    assert floor_at_zero(0.3) == 0.3
    assert math.isnan(floor_at_zero(float('nan')))


def test_round_half_away():
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(127.5) == 128
    assert round_half_away(1.4) == 1


def test_finite_or():
    assert finite_or(0.5, 0.0) == 0.5
    assert finite_or(None, 0.0) == 0.0
    assert finite_or(float('inf'), 0.0) == 0.0
    assert finite_or(float('nan'), 1.0) == 1.0
