from __future__ import annotations
from typing import Callable

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function

from .rgb import Color
from .lerp import with_opacity

ColorArithmetic = Callable[[Color, float], Color]
_clamp_array = bound_type_to_np_function[BoundType.CLAMP]


def _shift_rgb(color: Color, amount: float) -> Color:
    rgb = np.asarray(_clamp_array(color.as_array()[:3] + amount, 0.0, 255.0))
    return Color(tuple(int(v) for v in np.trunc(rgb)) + (color.alpha,))


class Shades:
    """
    Stock color arithmetic for shaded steps.

    Every shade takes a color and a factor and returns a new color; alpha is
    kept unless the shade is about opacity.
    """

    @staticmethod
    def with_white(color: Color, factor: float) -> Color:
        """Add ``factor`` to each RGB channel; negative factors darken."""
        return _shift_rgb(color, factor)

    @staticmethod
    def with_black(color: Color, factor: float) -> Color:
        """Subtract ``factor`` from each RGB channel; negative factors lighten."""
        return _shift_rgb(color, -factor)

    @staticmethod
    def with_opacity(color: Color, factor: float) -> Color:
        """Use ``factor`` (0..1) as the new opacity."""
        return with_opacity(color, factor)

    @staticmethod
    def none(color: Color, factor: float) -> Color:
        return color
