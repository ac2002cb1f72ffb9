from __future__ import annotations
import math
from typing import Optional


def lerp_double(a: Optional[float], b: Optional[float], t: float) -> Optional[float]:
    """
    Linearly interpolate between two optional numbers.

    Returns None only when both ends are None; a missing end counts as 0.0.
    Equal ends (or two NaNs) are returned untouched so that ``t`` never
    perturbs a constant field.
    """
    if a is None and b is None:
        return None
    a = 0.0 if a is None else a
    b = 0.0 if b is None else b
    if a == b or (math.isnan(a) and math.isnan(b)):
        return a
    return a * (1.0 - t) + b * t


def floor_at_zero(value: float) -> float:
    """max(0.0, value), except that NaN is passed through."""
    if math.isnan(value):
        return value
    return max(0.0, value)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def finite_or(value: Optional[float], fallback: float) -> float:
    """Return value when it is a finite number, fallback otherwise."""
    if value is None or not math.isfinite(value):
        return fallback
    return value
