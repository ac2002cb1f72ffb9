from __future__ import annotations
from typing import Optional, Sequence, List

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function, clamp

from .rgb import Color
from ..utils.num_utils import round_half_away


_clamp_array = bound_type_to_np_function[BoundType.CLAMP]


def scale_alpha(color: Color, factor: float) -> Color:
    """Multiply the alpha channel by ``factor`` (rounded, clamped to 0..255)."""
    return color.with_alpha(clamp(round_half_away(color.alpha * factor), 0, 255))


def color_lerp(a: Optional[Color], b: Optional[Color], t: float) -> Optional[Color]:
    """
    Linearly interpolate between two colors.

    A missing end is treated as the other color made fully transparent, so
    ``color_lerp(None, c, t)`` fades ``c`` in as ``t`` goes from 0 to 1.
    Channels are truncated toward zero and clamped to 0..255; ``t`` may lie
    outside [0, 1].
    """
    if a is None and b is None:
        return None
    if a is None:
        return scale_alpha(b, t)
    if b is None:
        return scale_alpha(a, 1.0 - t)
    return Color(lerp_channels(a.as_array(), b.as_array(), t))


def lerp_channels(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """Channel-wise ``trunc(a + (b - a) * t)`` clamped to 0..255, as int64."""
    mixed = np.trunc(a + (b - a) * t)
    return np.asarray(_clamp_array(mixed, 0, 255)).astype(np.int64)


def lerp_color_lists(a: Sequence[Color], b: Sequence[Color], t: float) -> List[Color]:
    """Interpolate two equally long color lists pairwise in one vectorised pass."""
    if not a:
        return []
    mixed = lerp_channels(
        np.array([c.value for c in a], dtype=np.float64),
        np.array([c.value for c in b], dtype=np.float64),
        t,
    )
    return [Color(row) for row in mixed]


def with_opacity(color: Color, opacity: float) -> Color:
    """Replace alpha with ``opacity`` in [0, 1]."""
    return color.with_alpha(round_half_away(clamp(opacity, 0.0, 1.0) * 255))
