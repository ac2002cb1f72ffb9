#chromasteps\gradients\steps.py
"""
Stepped gradients: ``LinearSteps``, ``RadialSteps``, ``SweepSteps``.

These do not gradate but hard-transition from one color to the next. Each
color is duplicated and each stop is doubled (the second copy nudged by
``softness``), so that the continuous gradient drawn from the stepped
sequences keeps every color flat across its band.

Explicit ``stops`` follow a simple, but important format:

- they *should* start with ``0.0``, as after duplication the first zero is
  dropped;
- they *should not* end with ``1.0``, as that is appended automatically.

Imagine ``stops`` is ``[0.0, 0.3, 0.8]`` with a ``softness`` of ``0.001``; the
resolved stops are ``[0.001, 0.3, 0.301, 0.8, 0.801, 1.0]``. With a softness of
``0.0`` they are ``[0.0, 0.3, 0.3, 0.8, 0.8, 1.0]``.
"""
from __future__ import annotations
import dataclasses
import warnings
from typing import List, Optional

from .base import (
    Gradient,
    lerp_linear_fields,
    lerp_radial_fields,
    lerp_sweep_fields,
    lerp_softness,
)
from .continuous import LinearGradient, RadialGradient, SweepGradient
from . import defaults
from ..colors.rgb import Color
from ..types.alignment import Alignment
from ..types.tile_mode import TileMode
from ..utils.list_ops import duplicate_colors, duplicate_stops_with_offset, interpret_stops


@dataclasses.dataclass(frozen=True, kw_only=True)
class Steps(Gradient):
    """
    Base of the stepped gradients.

    Attributes:
        softness: Offset added to the second copy of every duplicated stop.
            A larger softness blurs each hard edge, making the steps look more
            like their continuous counterpart.
    """
    softness: float = 0.0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.stops is not None:
            if self.stops[0] != 0.0:
                warnings.warn(
                    f"{type(self).__name__} stops should start with 0.0, got {self.stops[0]}; "
                    "the resolved stops will not line up with the stepped colors",
                    UserWarning,
                    stacklevel=3,
                )
            if len(self.stops) > 1 and self.stops[-1] == 1.0:
                warnings.warn(
                    f"{type(self).__name__} stops should not end with 1.0, it is appended automatically",
                    UserWarning,
                    stacklevel=3,
                )

    def implied_stops(self) -> List[float]:
        """Band start positions: the explicit stops, or ``n`` evenly spaced starts."""
        stops = interpret_stops(self.stops, len(self.colors) + 1)
        # explicit stops come back as given; only synthesized ones carry the extra 1.0
        if self.stops is None:
            stops.pop()
        return stops

    @property
    def stepped_colors(self) -> List[Color]:
        return duplicate_colors(self.colors)

    @property
    def stepped_stops(self) -> List[float]:
        stops = duplicate_stops_with_offset(self.implied_stops(), self.softness)
        if 0 in stops:
            stops.remove(0)
        stops.append(1.0)
        return stops


@dataclasses.dataclass(frozen=True, kw_only=True)
class LinearSteps(Steps):
    softness: float = defaults.default_softness["linear"]
    tile_mode: TileMode = defaults.DEFAULT_TILE_MODE
    begin: Alignment = defaults.LINEAR_BEGIN
    end: Alignment = defaults.LINEAR_END

    @classmethod
    def _lerp_fields(cls, a, b, t):
        return {**lerp_softness(a, b, t), **lerp_linear_fields(a, b, t)}

    def as_continuous(self) -> LinearGradient:
        return LinearGradient(
            colors=self.stepped_colors,
            stops=self.stepped_stops,
            transform=self.transform,
            tile_mode=self.tile_mode,
            begin=self.begin,
            end=self.end,
        )


@dataclasses.dataclass(frozen=True, kw_only=True)
class RadialSteps(Steps):
    softness: float = defaults.default_softness["radial"]
    tile_mode: TileMode = defaults.DEFAULT_TILE_MODE
    center: Alignment = defaults.RADIAL_CENTER
    radius: float = defaults.RADIAL_RADIUS
    focal: Optional[Alignment] = None
    focal_radius: float = defaults.RADIAL_FOCAL_RADIUS

    @classmethod
    def _lerp_fields(cls, a, b, t):
        return {**lerp_softness(a, b, t), **lerp_radial_fields(a, b, t)}

    def as_continuous(self) -> RadialGradient:
        return RadialGradient(
            colors=self.stepped_colors,
            stops=self.stepped_stops,
            transform=self.transform,
            tile_mode=self.tile_mode,
            center=self.center,
            radius=self.radius,
            focal=self.focal,
            focal_radius=self.focal_radius,
        )


@dataclasses.dataclass(frozen=True, kw_only=True)
class SweepSteps(Steps):
    softness: float = defaults.default_softness["sweep"]
    tile_mode: TileMode = defaults.DEFAULT_TILE_MODE
    center: Alignment = defaults.SWEEP_CENTER
    start_angle: float = defaults.SWEEP_START_ANGLE
    end_angle: float = defaults.SWEEP_END_ANGLE

    @classmethod
    def _lerp_fields(cls, a, b, t):
        return {**lerp_softness(a, b, t), **lerp_sweep_fields(a, b, t)}

    def as_continuous(self) -> SweepGradient:
        return SweepGradient(
            colors=self.stepped_colors,
            stops=self.stepped_stops,
            transform=self.transform,
            tile_mode=self.tile_mode,
            center=self.center,
            start_angle=self.start_angle,
            end_angle=self.end_angle,
        )
