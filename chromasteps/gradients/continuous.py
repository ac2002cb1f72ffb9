from __future__ import annotations
import dataclasses
from typing import Optional

from .base import Gradient, lerp_linear_fields, lerp_radial_fields, lerp_sweep_fields
from . import defaults
from ..types.alignment import Alignment
from ..types.tile_mode import TileMode


@dataclasses.dataclass(frozen=True, kw_only=True)
class LinearGradient(Gradient):
    """Blends its colors along the line from ``begin`` to ``end``."""
    tile_mode: TileMode = defaults.DEFAULT_TILE_MODE
    begin: Alignment = defaults.LINEAR_BEGIN
    end: Alignment = defaults.LINEAR_END

    @classmethod
    def _lerp_fields(cls, a, b, t):
        return lerp_linear_fields(a, b, t)


@dataclasses.dataclass(frozen=True, kw_only=True)
class RadialGradient(Gradient):
    """
    Blends its colors outward from ``center`` over ``radius``.

    ``radius`` is a fraction of the shortest side of the painted box. With a
    ``focal`` point the ramp starts from a circle of ``focal_radius`` around it.
    """
    tile_mode: TileMode = defaults.DEFAULT_TILE_MODE
    center: Alignment = defaults.RADIAL_CENTER
    radius: float = defaults.RADIAL_RADIUS
    focal: Optional[Alignment] = None
    focal_radius: float = defaults.RADIAL_FOCAL_RADIUS

    @classmethod
    def _lerp_fields(cls, a, b, t):
        return lerp_radial_fields(a, b, t)


@dataclasses.dataclass(frozen=True, kw_only=True)
class SweepGradient(Gradient):
    """Blends its colors around ``center`` from ``start_angle`` to ``end_angle`` (radians)."""
    tile_mode: TileMode = defaults.DEFAULT_TILE_MODE
    center: Alignment = defaults.SWEEP_CENTER
    start_angle: float = defaults.SWEEP_START_ANGLE
    end_angle: float = defaults.SWEEP_END_ANGLE

    @classmethod
    def _lerp_fields(cls, a, b, t):
        return lerp_sweep_fields(a, b, t)
