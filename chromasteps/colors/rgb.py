from __future__ import annotations
from typing import ClassVar, Tuple

from .color_base import ColorBase, WithAlpha


class ColorRGBAINT(ColorBase, WithAlpha):
    """8-bit straight-alpha RGBA color, channels ordered (r, g, b, a)."""
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "rgba"
    _type: ClassVar[type] = int
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)
    alpha_max: ClassVar[int] = 255

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> ColorRGBAINT:
        return cls((r, g, b, a))

    @classmethod
    def from_hex(cls, argb: int) -> ColorRGBAINT:
        """Build from a packed 0xAARRGGBB integer."""
        return cls((
            (argb >> 16) & 0xFF,
            (argb >> 8) & 0xFF,
            argb & 0xFF,
            (argb >> 24) & 0xFF,
        ))

    @property
    def red(self) -> int:
        return self.value[0]

    @property
    def green(self) -> int:
        return self.value[1]

    @property
    def blue(self) -> int:
        return self.value[2]

    def to_hex(self) -> int:
        """Packed 0xAARRGGBB integer."""
        r, g, b, a = self.value
        return (a << 24) | (r << 16) | (g << 8) | b

    def __repr__(self) -> str:
        return f"Color(0x{self.to_hex():08x})"


Color = ColorRGBAINT

TRANSPARENT = Color((0, 0, 0, 0))
BLACK = Color((0, 0, 0, 255))
WHITE = Color((255, 255, 255, 255))
RED = Color((255, 0, 0, 255))
GREEN = Color((0, 255, 0, 255))
BLUE = Color((0, 0, 255, 255))
