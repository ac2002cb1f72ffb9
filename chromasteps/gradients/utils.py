#chromasteps\gradients\utils.py
"""
Utilities for copying gradients and reading their fields, whatever the variant.

- ``copy_with``: rebuilds any gradient with some fields overridden.
- ``*_of`` accessors: read any field from any gradient, with a fallback
  when the field does not apply to its variant.
- ``reversed_gradient``: the same gradient with its colors (and explicit
  stops) in reverse order.
"""
from __future__ import annotations
import dataclasses
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Sequence

from .base import Gradient
from .continuous import LinearGradient, RadialGradient, SweepGradient
from .steps import Steps, LinearSteps, RadialSteps, SweepSteps
from .shaded_steps import LinearShadedSteps, RadialShadedSteps, SweepShadedSteps
from .interpolation import PrimitiveGradient, IntermediateGradient, GradientPacket
from .defaults import field_fallbacks
from ..colors.rgb import Color
from ..colors.shades import Shades, ColorArithmetic
from ..types.alignment import Alignment
from ..types.tile_mode import TileMode

# Signature shared by copy_with and its replacements (see IntermediateGradient.copy_with_fn).
GradientCopyWith = Callable[..., Gradient]

_KNOWN_VARIANTS = (
    LinearGradient,
    RadialGradient,
    SweepGradient,
    LinearSteps,
    RadialSteps,
    SweepSteps,
    LinearShadedSteps,
    RadialShadedSteps,
    SweepShadedSteps,
)

# Constructor fields accepted by each variant.
_variant_fields: Dict[type, FrozenSet[str]] = {
    cls: frozenset(f.name for f in dataclasses.fields(cls) if f.init)
    for cls in _KNOWN_VARIANTS
}


def _variant_of(gradient: Gradient) -> Optional[type]:
    """The most specific known variant ``gradient`` is an instance of."""
    for cls in type(gradient).__mro__:
        if cls in _variant_fields:
            return cls
    return None


def _applies(gradient: Gradient, name: str) -> bool:
    variant = _variant_of(gradient)
    return variant is not None and name in _variant_fields[variant]


# ===================== copy_with =====================

def copy_with(
    gradient: Gradient,
    *,
    # Universal
    colors: Optional[Sequence[Color]] = None,
    stops: Optional[Sequence[float]] = None,
    transform: Any = None,
    tile_mode: Optional[TileMode] = None,
    # Linear
    begin: Optional[Alignment] = None,
    end: Optional[Alignment] = None,
    # Radial or Sweep
    center: Optional[Alignment] = None,
    # Radial
    radius: Optional[float] = None,
    focal: Optional[Alignment] = None,
    focal_radius: Optional[float] = None,
    # Sweep
    start_angle: Optional[float] = None,
    end_angle: Optional[float] = None,
    # Steps
    softness: Optional[float] = None,
    # Shaded Steps
    shade_function: Optional[ColorArithmetic] = None,
    shade_factor: Optional[float] = None,
    distance: Optional[float] = None,
) -> Gradient:
    """
    Returns a new copy of ``gradient`` with any provided overrides applied.

    None means "keep the current value". Overrides that do not apply to the
    gradient's variant are ignored.

    - ``PrimitiveGradient`` is returned unchanged.
    - ``IntermediateGradient`` has the overrides applied to both endpoints of
      its packet. Its colors and stops belong to its primitive, so ``colors``
      and ``stops`` are never forwarded to the endpoints.
    - Known variants (and their subclasses) are rebuilt as the same variant.
    - Anything else is rebuilt as a ``RadialGradient``.
    """
    overrides = {
        'colors': colors,
        'stops': stops,
        'transform': transform,
        'tile_mode': tile_mode,
        'begin': begin,
        'end': end,
        'center': center,
        'radius': radius,
        'focal': focal,
        'focal_radius': focal_radius,
        'start_angle': start_angle,
        'end_angle': end_angle,
        'softness': softness,
        'shade_function': shade_function,
        'shade_factor': shade_factor,
        'distance': distance,
    }

    if isinstance(gradient, PrimitiveGradient):
        return gradient

    if isinstance(gradient, IntermediateGradient):
        forwarded = {k: v for k, v in overrides.items() if k not in ('colors', 'stops')}
        packet = gradient.packet
        return dataclasses.replace(
            gradient,
            packet=GradientPacket(
                copy_with(packet.a, **forwarded),
                copy_with(packet.b, **forwarded),
                packet.t,
            ),
        )

    variant = _variant_of(gradient)
    if variant is not None:
        return variant(**{
            name: overrides[name] if overrides[name] is not None else getattr(gradient, name)
            for name in _variant_fields[variant]
        })

    # Unknown variant: radial is an arbitrary but stable choice.
    return RadialGradient(
        colors=colors if colors is not None else gradient.colors,
        stops=stops if stops is not None else gradient.stops,
        transform=transform if transform is not None else gradient.transform,
        tile_mode=tile_mode if tile_mode is not None else tile_mode_of(gradient),
        center=center if center is not None else center_of(gradient),
        radius=radius if radius is not None else radius_of(gradient),
        focal=focal if focal is not None else focal_of(gradient),
        focal_radius=focal_radius if focal_radius is not None else focal_radius_of(gradient),
    )


def reversed_gradient(gradient: Gradient) -> Gradient:
    """
    Returns a copy of ``gradient`` with its colors reversed, as well as its
    stops when they are explicit.

    Stop values are only reordered, not mirrored (``1 - stop``).
    """
    return copy_with(
        gradient,
        colors=gradient.colors[::-1],
        stops=gradient.stops[::-1] if gradient.stops is not None else None,
    )


# ===================== Universal accessors =====================

def _field_of(gradient: Gradient, name: str) -> Any:
    if isinstance(gradient, IntermediateGradient):
        return getattr(gradient.packet, name)
    if _applies(gradient, name):
        return getattr(gradient, name)
    return field_fallbacks[name]


def tile_mode_of(gradient: Gradient) -> TileMode:
    """How the gradient tiles beyond its first and last stops; ``CLAMP`` by default."""
    return _field_of(gradient, 'tile_mode')


#  LINEAR

def begin_of(gradient: Gradient) -> Alignment:
    """``begin`` of a linear-type gradient, otherwise ``CENTER``."""
    return _field_of(gradient, 'begin')


def end_of(gradient: Gradient) -> Alignment:
    """``end`` of a linear-type gradient, otherwise ``CENTER``."""
    return _field_of(gradient, 'end')


#  RADIAL or SWEEP

def center_of(gradient: Gradient) -> Alignment:
    """``center`` of a radial- or sweep-type gradient, otherwise ``CENTER``."""
    return _field_of(gradient, 'center')


#  RADIAL

def radius_of(gradient: Gradient) -> float:
    return _field_of(gradient, 'radius')


def focal_of(gradient: Gradient) -> Optional[Alignment]:
    """``focal`` of a radial-type gradient (possibly None), otherwise None."""
    return _field_of(gradient, 'focal')


def focal_radius_of(gradient: Gradient) -> float:
    return _field_of(gradient, 'focal_radius')


#  SWEEP

def start_angle_of(gradient: Gradient) -> float:
    return _field_of(gradient, 'start_angle')


def end_angle_of(gradient: Gradient) -> float:
    return _field_of(gradient, 'end_angle')


#  STEPS

def stepped_colors_of(gradient: Gradient) -> List[Color]:
    """``stepped_colors`` of a Steps-type gradient, otherwise its colors."""
    if isinstance(gradient, Steps):
        return gradient.stepped_colors
    return list(gradient.colors)


def stepped_stops_of(gradient: Gradient) -> Optional[List[float]]:
    """``stepped_stops`` of a Steps-type gradient, otherwise its stops (maybe None)."""
    if isinstance(gradient, Steps):
        return gradient.stepped_stops
    return list(gradient.stops) if gradient.stops is not None else None


def softness_of(gradient: Gradient) -> float:
    return _field_of(gradient, 'softness')


#  SHADED STEPS

def shade_function_of(gradient: Gradient) -> ColorArithmetic:
    """``shade_function`` of a shaded-steps gradient, otherwise ``Shades.with_white``."""
    if _applies(gradient, 'shade_function'):
        return gradient.shade_function
    return Shades.with_white


def shade_factor_of(gradient: Gradient) -> float:
    if _applies(gradient, 'shade_factor'):
        return gradient.shade_factor
    return field_fallbacks['shade_factor']


def distance_of(gradient: Gradient) -> float:
    if _applies(gradient, 'distance'):
        return gradient.distance
    return field_fallbacks['distance']
