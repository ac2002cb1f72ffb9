"""
Colors
======

Immutable 8-bit RGBA colors and the blending primitives the gradient engine
builds on.

>>> from chromasteps.colors import Color, color_lerp
>>> red = Color((255, 0, 0, 255))
>>> color_lerp(None, red, 0.5).alpha
128
>>> Color.from_hex(0xFF0000FF) == Color((0, 0, 255, 255))
True
"""

from .color_base import ColorBase, WithAlpha
from .rgb import ColorRGBAINT, Color, TRANSPARENT, BLACK, WHITE, RED, GREEN, BLUE
from .lerp import color_lerp, scale_alpha, lerp_color_lists, with_opacity
from .shades import Shades, ColorArithmetic

__all__ = [
    "ColorBase",
    "WithAlpha",
    "ColorRGBAINT",
    "Color",
    "TRANSPARENT",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "color_lerp",
    "scale_alpha",
    "lerp_color_lists",
    "with_opacity",
    "Shades",
    "ColorArithmetic",
]
