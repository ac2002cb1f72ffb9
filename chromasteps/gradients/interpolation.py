#chromasteps\gradients\interpolation.py
"""
Gradients produced mid-interpolation.

- ``PrimitiveGradient``: the bare colors and stops of an interpolation, with
  no geometry of its own.
- ``GradientPacket``: the two endpoints of an interpolation and its ``t``,
  answering every geometry field by interpolating the endpoints.
- ``IntermediateGradient``: a primitive plus the packet it came from, used
  when two gradients of different variants are tweened.
"""
from __future__ import annotations
import dataclasses
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from .base import Gradient
from ..colors.lerp import color_lerp, lerp_color_lists
from ..colors.rgb import Color
from ..errors import ShapeMismatchError
from ..types.alignment import Alignment, alignment_lerp
from ..types.tile_mode import TileMode
from ..utils.num_utils import lerp_double, floor_at_zero, finite_or


@dataclasses.dataclass(frozen=True, kw_only=True)
class PrimitiveGradient(Gradient):
    """Colors and stops only. ``copy_with`` passes it through untouched."""

    @classmethod
    def _lerp_fields(cls, a, b, t):
        return {}

    def scale(self, factor: float) -> PrimitiveGradient:
        return PrimitiveGradient(
            colors=[color_lerp(None, c, factor) for c in self.colors],
            stops=self.stops,
            transform=self.transform,
        )


def _lerp_stop_lists(a: List[float], b: List[float], t: float) -> List[float]:
    sa = np.asarray(a, dtype=np.float64)
    sb = np.asarray(b, dtype=np.float64)
    mixed = np.where(sa == sb, sa, sa * (1.0 - t) + sb * t)
    return [float(s) for s in mixed]


def interpolate_from(a: Gradient, b: Gradient, t: float) -> PrimitiveGradient:
    """
    Cross-fade the colors and stops of two equally long gradients.

    Colors are mixed channel by channel. Stops stay None when neither side
    has explicit stops; otherwise each side's implied stops are mixed pairwise.

    Raises:
        ShapeMismatchError: if the gradients have different numbers of colors.
    """
    if len(a.colors) != len(b.colors):
        raise ShapeMismatchError(len(a.colors), len(b.colors))
    colors = lerp_color_lists(a.colors, b.colors, t)
    if a.stops is None and b.stops is None:
        stops = None
    else:
        stops = _lerp_stop_lists(a.implied_stops(), b.implied_stops(), t)
    return PrimitiveGradient(colors=colors, stops=stops)


@dataclasses.dataclass(frozen=True)
class GradientPacket:
    """Two gradients and a position between them."""
    a: Gradient
    b: Gradient
    t: float

    def _lerp_accessor(self, name: str) -> Optional[float]:
        from . import utils  # local import to avoid cycles
        accessor = getattr(utils, f"{name}_of")
        return lerp_double(accessor(self.a), accessor(self.b), self.t)

    def _lerp_alignment(self, name: str) -> Optional[Alignment]:
        from . import utils  # local import to avoid cycles
        accessor = getattr(utils, f"{name}_of")
        return alignment_lerp(accessor(self.a), accessor(self.b), self.t)

    @property
    def tile_mode(self) -> TileMode:
        from .utils import tile_mode_of
        return tile_mode_of(self.a) if self.t < 0.5 else tile_mode_of(self.b)

    @property
    def begin(self) -> Alignment:
        return self._lerp_alignment('begin')

    @property
    def end(self) -> Alignment:
        return self._lerp_alignment('end')

    @property
    def center(self) -> Alignment:
        return self._lerp_alignment('center')

    @property
    def focal(self) -> Optional[Alignment]:
        return self._lerp_alignment('focal')

    @property
    def radius(self) -> float:
        return floor_at_zero(self._lerp_accessor('radius'))

    @property
    def focal_radius(self) -> float:
        return floor_at_zero(self._lerp_accessor('focal_radius'))

    @property
    def start_angle(self) -> float:
        return floor_at_zero(self._lerp_accessor('start_angle'))

    @property
    def end_angle(self) -> float:
        return floor_at_zero(self._lerp_accessor('end_angle'))

    @property
    def softness(self) -> float:
        return finite_or(self._lerp_accessor('softness'), 0.0)

    def geometry(self) -> Dict[str, Any]:
        """Every interpolated field, as ``copy_with`` overrides."""
        return {
            'tile_mode': self.tile_mode,
            'begin': self.begin,
            'end': self.end,
            'center': self.center,
            'radius': self.radius,
            'focal': self.focal,
            'focal_radius': self.focal_radius,
            'start_angle': self.start_angle,
            'end_angle': self.end_angle,
            'softness': self.softness,
        }


@dataclasses.dataclass(frozen=True, kw_only=True)
class IntermediateGradient(Gradient):
    """
    The state of a tween between two gradients of different variants.

    Colors and stops come from ``primitive``; every other field is answered
    by ``packet``. ``copy_with_fn`` rebuilds a drawable gradient and may be
    swapped for one that knows about bespoke gradient types.
    """
    colors: Tuple[Color, ...] = dataclasses.field(init=False, default=())
    stops: Optional[Tuple[float, ...]] = dataclasses.field(init=False, default=None)
    primitive: PrimitiveGradient
    packet: GradientPacket
    copy_with_fn: Optional[Callable[..., Gradient]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'colors', self.primitive.colors)
        object.__setattr__(self, 'stops', self.primitive.stops)
        super().__post_init__()

    @property
    def tile_mode(self) -> TileMode:
        return self.packet.tile_mode

    def implied_stops(self) -> List[float]:
        return self.primitive.implied_stops()

    @classmethod
    def _lerp_fields(cls, a, b, t):
        raise TypeError("IntermediateGradient cannot be interpolated pairwise")

    def lerp_from(self, a: Optional[Gradient], t: float) -> Optional[Gradient]:
        return self.scale(t) if a is None else None

    def lerp_to(self, b: Optional[Gradient], t: float) -> Optional[Gradient]:
        return self.scale(1.0 - t) if b is None else None

    def scale(self, factor: float) -> IntermediateGradient:
        return dataclasses.replace(self, primitive=self.primitive.scale(factor))

    def as_continuous(self) -> Gradient:
        """The nearer endpoint rebuilt with the interpolated colors and geometry."""
        copy = self.copy_with_fn
        if copy is None:
            from .utils import copy_with as copy
        nearer = self.packet.a if self.packet.t < 0.5 else self.packet.b
        return copy(
            nearer,
            colors=self.colors,
            stops=self.stops,
            **self.packet.geometry(),
        ).as_continuous()
