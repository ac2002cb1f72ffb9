"""
Shaded steps: stepped gradients whose every band ramps into a shade of its color.

Each band keeps its color flat for the leading ``1 - distance`` of its width,
then gradates to ``shade_function(color, shade_factor)`` at its trailing edge.
Bands stay separated by hard edges (nudged by ``softness``).
"""
from __future__ import annotations
import dataclasses
from typing import List

from .steps import Steps, LinearSteps, RadialSteps, SweepSteps
from . import defaults
from ..colors.rgb import Color
from ..colors.shades import Shades, ColorArithmetic
from ..utils.num_utils import lerp_double


def _shaded_colors(steps: Steps) -> List[Color]:
    colors: List[Color] = []
    for color in steps.colors:
        colors.extend((color, color, steps.shade_function(color, steps.shade_factor)))
    return colors


def _shaded_stops(steps: Steps) -> List[float]:
    starts = steps.implied_stops()
    stops: List[float] = []
    for i, start in enumerate(starts):
        if i > 0:
            start += steps.softness
        end = starts[i + 1] if i + 1 < len(starts) else 1.0
        stops.extend((start, end - steps.distance * (end - start), end))
    return stops


def _lerp_shading(a, b, t: float) -> dict:
    return {
        'shade_function': a.shade_function if t < 0.5 else b.shade_function,
        'shade_factor': lerp_double(a.shade_factor, b.shade_factor, t),
        'distance': lerp_double(a.distance, b.distance, t),
    }


class _ShadedMixin:
    """Stepped sequences shared by the three shaded variants."""

    @property
    def stepped_colors(self) -> List[Color]:
        return _shaded_colors(self)

    @property
    def stepped_stops(self) -> List[float]:
        return _shaded_stops(self)

    @classmethod
    def _lerp_fields(cls, a, b, t):
        return {**super()._lerp_fields(a, b, t), **_lerp_shading(a, b, t)}


@dataclasses.dataclass(frozen=True, kw_only=True)
class LinearShadedSteps(_ShadedMixin, LinearSteps):
    shade_function: ColorArithmetic = Shades.with_white
    shade_factor: float = defaults.SHADE_FACTOR
    distance: float = defaults.SHADE_DISTANCE


@dataclasses.dataclass(frozen=True, kw_only=True)
class RadialShadedSteps(_ShadedMixin, RadialSteps):
    shade_function: ColorArithmetic = Shades.with_white
    shade_factor: float = defaults.SHADE_FACTOR
    distance: float = defaults.SHADE_DISTANCE


@dataclasses.dataclass(frozen=True, kw_only=True)
class SweepShadedSteps(_ShadedMixin, SweepSteps):
    shade_function: ColorArithmetic = Shades.with_white
    shade_factor: float = defaults.SHADE_FACTOR
    distance: float = defaults.SHADE_DISTANCE
