#chromasteps\gradients\ramp.py
"""
Evaluate the 1-D color ramp of a gradient.

A rendering backend maps every pixel to a position ``t`` along the ramp
(distance along the line for linear, from the center for radial, angle for
sweep) and looks up the color there. ``sample_ramp`` performs that lookup, so
gradients can be checked without a renderer.
"""
from __future__ import annotations
from typing import Optional, Sequence, Union

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function

from .base import Gradient
from .utils import tile_mode_of
from ..types.tile_mode import TileMode

tile_mode_to_bound_type = {
    TileMode.CLAMP: BoundType.CLAMP,
    TileMode.MIRROR: BoundType.BOUNCE,
    TileMode.REPEATED: BoundType.CYCLIC,
    # decal is clamped for lookup, then masked out
    TileMode.DECAL: BoundType.CLAMP,
}


def _wrap_positions(positions: np.ndarray, tile_mode: TileMode) -> np.ndarray:
    fn = bound_type_to_np_function[tile_mode_to_bound_type[tile_mode]]
    return np.asarray(fn(positions, 0.0, 1.0), dtype=np.float64)


def sample_ramp(
    gradient: Gradient,
    positions: Union[Sequence[float], np.ndarray],
    tile_mode: Optional[TileMode] = None,
) -> np.ndarray:
    """
    Sample the resolved color ramp of ``gradient``.

    Steps are sampled through their stepped sequences, intermediate gradients
    through ``as_continuous()``. Between two stops the color is interpolated
    linearly; two equal adjacent stops form a hard edge where the later color
    wins. Before the first stop the first color holds, after the last stop the
    last color holds.

    Args:
        gradient: Any gradient.
        positions: Ramp positions; values outside [0, 1] are tiled.
        tile_mode: Overrides the gradient's own tile mode.

    Returns:
        np.ndarray: Shape (N, 4), float64 RGBA channels in 0..255. Positions
        outside [0, 1] are fully transparent under ``TileMode.DECAL``.
    """
    resolved = gradient.as_continuous()
    if tile_mode is None:
        tile_mode = tile_mode_of(gradient)
    tile_mode = TileMode(tile_mode)

    stops = np.asarray(resolved.implied_stops(), dtype=np.float64)
    colors = np.stack([color.as_array() for color in resolved.colors])

    pos = np.asarray(positions, dtype=np.float64).reshape(-1)
    u = _wrap_positions(pos, tile_mode)

    if len(stops) == 1:
        result = np.repeat(colors[:1], len(u), axis=0)
    else:
        idx = np.clip(np.searchsorted(stops, u, side='right') - 1, 0, len(stops) - 2)
        left, right = stops[idx], stops[idx + 1]
        width = right - left
        with np.errstate(divide='ignore', invalid='ignore'):
            weight = np.where(width > 0, (u - left) / width, 1.0)
        weight = np.clip(weight, 0.0, 1.0)[:, np.newaxis]
        result = colors[idx] + (colors[idx + 1] - colors[idx]) * weight

    if tile_mode is TileMode.DECAL:
        result[(pos < 0.0) | (pos > 1.0)] = 0.0
    return result
