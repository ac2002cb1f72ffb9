#chromasteps\gradients\tween.py
from __future__ import annotations
from typing import Iterable, Iterator, List, Optional

from .base import Gradient, lerp_gradient
from .interpolation import PrimitiveGradient, GradientPacket, IntermediateGradient, interpolate_from
from .utils import GradientCopyWith, copy_with
from ..utils.list_ops import stretch_list


def _stretched(gradient: Gradient, size: int, explicit: bool) -> PrimitiveGradient:
    """
    The colors of ``gradient`` grown to ``size`` by repeating the tail.

    With ``explicit``, its implied stops (band starts for steps) are carried
    along, the last one repeated for every added color.
    """
    stops: Optional[List[float]] = None
    if explicit:
        stops = stretch_list(gradient.implied_stops(), size)
    return PrimitiveGradient(colors=stretch_list(gradient.colors, size), stops=stops)


class GradientTween:
    """
    Maps a timeline position ``t`` to a gradient between ``begin`` and ``end``.

    Endpoints of the same variant are interpolated field by field. Endpoints
    of different variants produce an ``IntermediateGradient``, whose
    ``as_continuous()`` gives something a renderer can draw; ``copy_with_fn``
    is what rebuilds it, and may be replaced to support bespoke gradients.
    """

    def __init__(
        self,
        begin: Optional[Gradient],
        end: Optional[Gradient],
        copy_with_fn: GradientCopyWith = copy_with,
    ):
        self.begin = begin
        self.end = end
        self.copy_with_fn = copy_with_fn

    def __repr__(self) -> str:
        return f"GradientTween({self.begin!r} -> {self.end!r})"

    def lerp(self, t: float) -> Optional[Gradient]:
        a, b = self.begin, self.end
        if a is None or b is None or type(a) is type(b):
            return lerp_gradient(a, b, t)

        size = max(len(a.colors), len(b.colors))
        explicit = a.stops is not None or b.stops is not None
        primitive = interpolate_from(_stretched(a, size, explicit), _stretched(b, size, explicit), t)
        return IntermediateGradient(
            primitive=primitive,
            packet=GradientPacket(a, b, t),
            copy_with_fn=self.copy_with_fn,
        )

    def transform(self, t: float) -> Optional[Gradient]:
        """Like :meth:`lerp`, but exactly ``begin`` at 0.0 and exactly ``end`` at 1.0."""
        if t == 0.0:
            return self.begin
        if t == 1.0:
            return self.end
        return self.lerp(t)

    def frames(self, ticks: Iterable[float]) -> Iterator[Optional[Gradient]]:
        """One transformed gradient per tick value, in order."""
        for t in ticks:
            yield self.transform(t)
