#chromasteps\gradients\base.py
from __future__ import annotations
import dataclasses
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from ..colors.rgb import Color
from ..colors.lerp import color_lerp
from ..types.alignment import alignment_lerp
from ..utils.list_ops import interpret_stops
from ..utils.num_utils import lerp_double, floor_at_zero, finite_or


@dataclasses.dataclass(frozen=True, kw_only=True)
class Gradient(ABC):
    """
    Immutable base of every gradient variant.

    Attributes:
        colors: The base color ramp, at least one color.
        stops: Optional stop positions in [0, 1], one per color. When None,
            stops are interpreted as evenly spaced.
        transform: Opaque geometric transform handed to the renderer untouched.
    """
    colors: Tuple[Color, ...]
    stops: Optional[Tuple[float, ...]] = None
    transform: Any = None

    def __post_init__(self) -> None:
        colors = tuple(self.colors)
        if not colors:
            raise ValueError(f"{type(self).__name__} needs at least one color")
        object.__setattr__(self, 'colors', colors)
        if self.stops is not None:
            stops = tuple(float(s) for s in self.stops)
            if len(stops) != len(colors):
                raise ValueError(
                    f"{type(self).__name__} has {len(colors)} colors but {len(stops)} stops"
                )
            object.__setattr__(self, 'stops', stops)

    # ------------------ stops ------------------
    def implied_stops(self) -> List[float]:
        """Stops used when interpolating against a gradient with explicit stops."""
        return interpret_stops(self.stops, len(self.colors))

    # ------------------ copying ------------------
    def copy_with(self, **overrides: Any) -> Gradient:
        """Shortcut for :func:`chromasteps.gradients.utils.copy_with`."""
        from .utils import copy_with  # local import to avoid cycles
        return copy_with(self, **overrides)

    @property
    def reversed(self) -> Gradient:
        from .utils import reversed_gradient  # local import to avoid cycles
        return reversed_gradient(self)

    def as_continuous(self) -> Gradient:
        """The gradient a rendering backend should draw for this value."""
        return self

    # ------------------ interpolation ------------------
    def scale(self, factor: float) -> Gradient:
        """
        Returns a copy with its colors scaled by the given factor.
        Since the alpha channel is what receives the scale factor,
        ``0.0`` or less results in a gradient that is fully transparent.
        """
        return self.copy_with(colors=[color_lerp(None, c, factor) for c in self.colors])

    @classmethod
    @abstractmethod
    def _lerp_fields(cls, a: Any, b: Any, t: float) -> Dict[str, Any]:
        """Interpolated constructor arguments other than colors, stops and transform."""

    @classmethod
    def lerp(cls, a: Optional[Gradient], b: Optional[Gradient], t: float) -> Optional[Gradient]:
        """
        Linearly interpolate between two gradients of this variant.

        If either gradient is None, the other one is returned with its colors
        scaled (see :meth:`scale`), fading from or to fully transparent.

        If neither is None, they must have the same number of colors.

        ``t`` is a position on the timeline: 0.0 gives ``a`` (or an equivalent),
        1.0 gives ``b``. Values outside [0, 1] extrapolate.
        """
        if a is None and b is None:
            return None
        if a is None:
            return b.scale(t)
        if b is None:
            return a.scale(1.0 - t)
        for side in (a, b):
            if not isinstance(side, cls):
                raise TypeError(f"{cls.__name__}.lerp cannot interpolate a {type(side).__name__}")

        from .interpolation import interpolate_from  # local import to avoid cycles
        interpolated = interpolate_from(a, b, t)
        return cls(
            colors=interpolated.colors,
            stops=interpolated.stops,
            transform=a.transform if t > 0.5 else b.transform,
            **cls._lerp_fields(a, b, t),
        )

    def lerp_from(self, a: Optional[Gradient], t: float) -> Optional[Gradient]:
        """Interpolate from ``a`` to ``self``; None when this variant cannot."""
        if a is None or isinstance(a, type(self)):
            return type(self).lerp(a, self, t)
        return None

    def lerp_to(self, b: Optional[Gradient], t: float) -> Optional[Gradient]:
        """Interpolate from ``self`` to ``b``; None when this variant cannot."""
        if b is None or isinstance(b, type(self)):
            return type(self).lerp(self, b, t)
        return None


def lerp_gradient(a: Optional[Gradient], b: Optional[Gradient], t: float) -> Optional[Gradient]:
    """
    Interpolate between two gradients of any variants.

    Asks ``b`` to lerp from ``a``, then ``a`` to lerp to ``b``. If neither
    knows the other, fades ``a`` out over the first half of the timeline and
    ``b`` in over the second half.
    """
    if a is None and b is None:
        return None
    result = None
    if b is not None:
        result = b.lerp_from(a, t)
    if result is None and a is not None:
        result = a.lerp_to(b, t)
    if result is not None:
        return result
    if t < 0.5:
        return a.scale(1.0 - t * 2.0)
    return b.scale((t - 0.5) * 2.0)


# ===================== Field interpolation =====================

def lerp_tile_mode(a: Any, b: Any, t: float) -> Dict[str, Any]:
    return {'tile_mode': a.tile_mode if t < 0.5 else b.tile_mode}


def lerp_linear_fields(a: Any, b: Any, t: float) -> Dict[str, Any]:
    return {
        **lerp_tile_mode(a, b, t),
        'begin': alignment_lerp(a.begin, b.begin, t),
        'end': alignment_lerp(a.end, b.end, t),
    }


def lerp_radial_fields(a: Any, b: Any, t: float) -> Dict[str, Any]:
    return {
        **lerp_tile_mode(a, b, t),
        'center': alignment_lerp(a.center, b.center, t),
        'radius': floor_at_zero(lerp_double(a.radius, b.radius, t)),
        'focal': alignment_lerp(a.focal, b.focal, t),
        'focal_radius': floor_at_zero(lerp_double(a.focal_radius, b.focal_radius, t)),
    }


def lerp_sweep_fields(a: Any, b: Any, t: float) -> Dict[str, Any]:
    return {
        **lerp_tile_mode(a, b, t),
        'center': alignment_lerp(a.center, b.center, t),
        'start_angle': floor_at_zero(lerp_double(a.start_angle, b.start_angle, t)),
        'end_angle': floor_at_zero(lerp_double(a.end_angle, b.end_angle, t)),
    }


def lerp_softness(a: Any, b: Any, t: float) -> Dict[str, Any]:
    # undefined or non-finite softness falls back to a hard edge
    return {'softness': finite_or(lerp_double(a.softness, b.softness, t), 0.0)}
