"""
Tests for gradient interpolation: same-variant lerp, null endpoints, scaling
and the cross-variant fallback.
"""
import pytest

from chromasteps.colors import Color, RED, GREEN, BLUE, WHITE
from chromasteps.errors import GradientError, ShapeMismatchError
from chromasteps.gradients import (
    LinearGradient,
    RadialGradient,
    SweepGradient,
    LinearSteps,
    RadialSteps,
    SweepSteps,
    LinearShadedSteps,
    PrimitiveGradient,
    interpolate_from,
    lerp_gradient,
)
from chromasteps.types import Alignment, CENTER, CENTER_LEFT, TOP_LEFT, BOTTOM_RIGHT, TileMode

PURPLE = Color((127, 0, 127, 255))


def _geometry(g):
    return {k: v for k, v in vars(g).items() if k not in ('colors', 'stops')}


class TestEndpointIdentity:
    @pytest.mark.parametrize("a, b", [
        (LinearGradient(colors=[RED, BLUE], begin=TOP_LEFT),
         LinearGradient(colors=[GREEN, WHITE], stops=[0.2, 0.9], end=BOTTOM_RIGHT)),
        (RadialGradient(colors=[RED, BLUE], radius=0.2, focal=TOP_LEFT),
         RadialGradient(colors=[BLUE, RED], radius=0.9, focal=CENTER, focal_radius=0.3)),
        (SweepSteps(colors=[RED, BLUE], start_angle=0.5),
         SweepSteps(colors=[GREEN, RED], stops=[0.0, 0.7], end_angle=3.0, softness=0.01)),
    ])
    def test_start_and_end(self, a, b):
        cls = type(a)
        start = cls.lerp(a, b, 0.0)
        end = cls.lerp(a, b, 1.0)
        assert start.colors == a.colors
        assert end.colors == b.colors
        assert list(start.implied_stops()) == pytest.approx(a.implied_stops())
        assert list(end.implied_stops()) == pytest.approx(b.implied_stops())
        for name, value in _geometry(a).items():
            if name != 'transform':
                assert getattr(start, name) == value
        for name, value in _geometry(b).items():
            if name != 'transform':
                assert getattr(end, name) == value

    def test_stepped_stops_at_start(self):
        a = LinearSteps(colors=[RED, BLUE], softness=0.0)
        b = LinearSteps(colors=[RED, BLUE], stops=[0.0, 0.4], softness=0.0)
        assert LinearSteps.lerp(a, b, 0.0).stepped_stops == pytest.approx(a.stepped_stops)
        assert LinearSteps.lerp(a, b, 1.0).stepped_stops == pytest.approx(b.stepped_stops)


def test_midpoint():
    a = LinearGradient(colors=[RED, BLUE], begin=CENTER_LEFT)
    b = LinearGradient(colors=[BLUE, RED], begin=TOP_LEFT)
    mid = LinearGradient.lerp(a, b, 0.5)
    assert type(mid) is LinearGradient
    assert mid.colors == (PURPLE, PURPLE)
    assert mid.begin == Alignment(-1.0, -0.5)
    assert mid.stops is None


def test_stops_mix_when_one_side_is_explicit():
    a = LinearGradient(colors=[RED, GREEN, BLUE])
    b = LinearGradient(colors=[RED, GREEN, BLUE], stops=[0.0, 0.9, 1.0])
    mid = LinearGradient.lerp(a, b, 0.5)
    assert list(mid.stops) == pytest.approx([0.0, 0.7, 1.0])


class TestNullEndpoints:
    def test_both_null(self):
        assert RadialSteps.lerp(None, None, 0.5) is None
        assert lerp_gradient(None, None, 0.5) is None

    def test_null_start_fades_in(self):
        b = LinearGradient(colors=[RED, BLUE], stops=[0.0, 0.6])
        transparent = LinearGradient.lerp(None, b, 0.0)
        assert all(c.alpha == 0 for c in transparent.colors)
        assert transparent.stops == b.stops
        assert LinearGradient.lerp(None, b, 1.0) == b

    def test_null_end_fades_out(self):
        a = SweepGradient(colors=[RED, BLUE])
        assert SweepGradient.lerp(a, None, 0.0) == a
        assert all(c.alpha == 0 for c in SweepGradient.lerp(a, None, 1.0).colors)
        assert [c.alpha for c in SweepGradient.lerp(a, None, 0.5).colors] == [128, 128]


def test_scale_to_zero_keeps_stops_and_geometry():
    steps = RadialSteps(colors=[RED, BLUE], stops=[0.0, 0.3], radius=0.7, softness=0.02)
    scaled = steps.scale(0.0)
    assert type(scaled) is RadialSteps
    assert [c.alpha for c in scaled.colors] == [0, 0]
    assert [c.value[:3] for c in scaled.colors] == [c.value[:3] for c in steps.colors]
    assert scaled.stops == steps.stops
    assert _geometry(scaled) == _geometry(steps)


class TestTieBreaks:
    a = LinearGradient(colors=[RED], tile_mode=TileMode.CLAMP, transform="a")
    b = LinearGradient(colors=[BLUE], tile_mode=TileMode.MIRROR, transform="b")

    def test_before_half(self):
        g = LinearGradient.lerp(self.a, self.b, 0.25)
        assert g.tile_mode is TileMode.CLAMP
        assert g.transform == "b"

    def test_at_half(self):
        g = LinearGradient.lerp(self.a, self.b, 0.5)
        assert g.tile_mode is TileMode.MIRROR
        assert g.transform == "b"

    def test_after_half(self):
        g = LinearGradient.lerp(self.a, self.b, 0.75)
        assert g.tile_mode is TileMode.MIRROR
        assert g.transform == "a"


class TestClamping:
    def test_radius_floors_at_zero(self):
        a = RadialGradient(colors=[RED], radius=0.5, focal_radius=0.1)
        b = RadialGradient(colors=[RED], radius=1.0, focal_radius=0.4)
        g = RadialGradient.lerp(a, b, -2.0)
        assert g.radius == 0.0
        assert g.focal_radius == 0.0

    def test_angles_floor_at_zero(self):
        a = SweepGradient(colors=[RED], start_angle=0.0, end_angle=1.0)
        b = SweepGradient(colors=[RED], start_angle=1.0, end_angle=3.0)
        g = SweepGradient.lerp(a, b, -1.0)
        assert g.start_angle == 0.0
        assert g.end_angle == 0.0

    def test_extrapolated_alignments_are_not_clamped(self):
        a = LinearGradient(colors=[RED], begin=CENTER)
        b = LinearGradient(colors=[RED], begin=BOTTOM_RIGHT)
        assert LinearGradient.lerp(a, b, 2.0).begin == Alignment(2.0, 2.0)

    def test_softness(self):
        a = LinearSteps(colors=[RED], softness=0.001)
        b = LinearSteps(colors=[RED], softness=0.003)
        assert LinearSteps.lerp(a, b, 0.5).softness == pytest.approx(0.002)

    def test_non_finite_softness_becomes_hard_edge(self):
        a = LinearSteps(colors=[RED], softness=float('inf'))
        b = LinearSteps(colors=[RED], softness=0.0)
        assert LinearSteps.lerp(a, b, 0.5).softness == 0.0
        c = LinearSteps(colors=[RED], softness=float('nan'))
        assert LinearSteps.lerp(c, b, 0.5).softness == 0.0


class TestErrors:
    def test_shape_mismatch(self):
        a = LinearGradient(colors=[RED, BLUE])
        b = LinearGradient(colors=[RED, GREEN, BLUE])
        with pytest.raises(ShapeMismatchError) as excinfo:
            LinearGradient.lerp(a, b, 0.5)
        assert (excinfo.value.a_length, excinfo.value.b_length) == (2, 3)
        assert isinstance(excinfo.value, ValueError)
        assert isinstance(excinfo.value, GradientError)

    def test_interpolate_from_mismatch(self):
        with pytest.raises(ValueError):
            interpolate_from(PrimitiveGradient(colors=[RED]), PrimitiveGradient(colors=[RED, RED]), 0.5)

    def test_wrong_variant(self):
        with pytest.raises(TypeError):
            LinearGradient.lerp(LinearGradient(colors=[RED]), RadialGradient(colors=[RED]), 0.5)


class TestLerpGradient:
    def test_same_variant(self):
        a = RadialSteps(colors=[RED, BLUE])
        b = RadialSteps(colors=[BLUE, RED])
        assert lerp_gradient(a, b, 0.3) == RadialSteps.lerp(a, b, 0.3)

    def test_cross_variant_fades_through_transparent(self):
        a = LinearGradient(colors=[RED, BLUE])
        b = RadialGradient(colors=[GREEN])
        first = lerp_gradient(a, b, 0.25)
        assert type(first) is LinearGradient
        assert [c.alpha for c in first.colors] == [128, 128]
        halfway = lerp_gradient(a, b, 0.5)
        assert type(halfway) is RadialGradient
        assert halfway.colors[0].alpha == 0
        assert lerp_gradient(a, b, 1.0) == b

    def test_null_side(self):
        b = SweepSteps(colors=[RED])
        assert lerp_gradient(None, b, 1.0) == b
        assert lerp_gradient(b, None, 1.0).colors[0].alpha == 0


def test_primitive_interpolation():
    a = PrimitiveGradient(colors=[RED, BLUE])
    b = PrimitiveGradient(colors=[BLUE, RED], stops=[0.0, 0.5])
    mid = interpolate_from(a, b, 0.5)
    assert mid.colors == (PURPLE, PURPLE)
    assert list(mid.stops) == pytest.approx([0.0, 0.75])
    assert interpolate_from(a, PrimitiveGradient(colors=[RED, RED]), 0.5).stops is None


def test_overshooting_channels_saturate():
    a = LinearGradient(colors=[Color((200, 10, 0, 255)), BLUE])
    b = LinearGradient(colors=[Color((250, 0, 0, 255)), RED])
    far = LinearGradient.lerp(a, b, 2.0)
    assert far.colors == (Color((255, 0, 0, 255)), Color((255, 0, 0, 255)))
    back = LinearGradient.lerp(a, b, -1.0)
    assert back.colors == (Color((150, 20, 0, 255)), Color((0, 0, 255, 255)))
    for color in far.colors + back.colors:
        assert all(0 <= channel <= 255 for channel in color.value)


def test_shaded_steps_lerp_saturates():
    a = LinearShadedSteps(colors=[WHITE, RED])
    b = LinearShadedSteps(colors=[RED, WHITE])
    far = LinearShadedSteps.lerp(a, b, 3.0)
    assert far.colors == (RED, WHITE)
    assert far.stepped_colors[2] == Color((165, 0, 0, 255))
