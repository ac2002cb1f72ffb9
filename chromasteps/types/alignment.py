from __future__ import annotations
import dataclasses
from typing import Optional

from ..utils.num_utils import lerp_double


@dataclasses.dataclass(frozen=True)
class Alignment:
    """
    A point within a rectangle, in box-relative coordinates.

    ``(-1, -1)`` is the top-left corner, ``(1, 1)`` the bottom-right corner and
    ``(0, 0)`` the center. Values outside [-1, 1] lie outside the box.
    """
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Alignment) -> Alignment:
        return Alignment(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Alignment) -> Alignment:
        return Alignment(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Alignment:
        return Alignment(self.x * factor, self.y * factor)

    def __neg__(self) -> Alignment:
        return Alignment(-self.x, -self.y)

    @staticmethod
    def lerp(a: Optional[Alignment], b: Optional[Alignment], t: float) -> Optional[Alignment]:
        return alignment_lerp(a, b, t)


def alignment_lerp(a: Optional[Alignment], b: Optional[Alignment], t: float) -> Optional[Alignment]:
    """
    Interpolate two alignments; a missing end behaves like ``CENTER``.

    Returns None only when both ends are None.
    """
    if a is None and b is None:
        return None
    if a is None:
        return Alignment(lerp_double(0.0, b.x, t), lerp_double(0.0, b.y, t))
    if b is None:
        return Alignment(lerp_double(a.x, 0.0, t), lerp_double(a.y, 0.0, t))
    return Alignment(lerp_double(a.x, b.x, t), lerp_double(a.y, b.y, t))


TOP_LEFT = Alignment(-1.0, -1.0)
TOP_CENTER = Alignment(0.0, -1.0)
TOP_RIGHT = Alignment(1.0, -1.0)
CENTER_LEFT = Alignment(-1.0, 0.0)
CENTER = Alignment(0.0, 0.0)
CENTER_RIGHT = Alignment(1.0, 0.0)
BOTTOM_LEFT = Alignment(-1.0, 1.0)
BOTTOM_CENTER = Alignment(0.0, 1.0)
BOTTOM_RIGHT = Alignment(1.0, 1.0)
