from __future__ import annotations
from typing import List, Optional, Sequence, TypeVar

import numpy as np
from unitfield import flat_1d_upbm

T = TypeVar('T')


# ===================== Duplication =====================

def duplicate_colors(colors: Sequence[T]) -> List[T]:
    """Return ``colors`` with every entry repeated once: [a, a, b, b, ...]."""
    duplicated: List[T] = []
    for color in colors:
        duplicated.extend((color, color))
    return duplicated


def duplicate_stops_with_offset(stops: Sequence[float], additive: float) -> List[float]:
    """
    Duplicate every stop, adding ``additive`` to the second copy.

    With ``additive == 0.0`` the copies are exactly equal, which a renderer
    must accept as a zero-width (hard) transition.

    Example:
        >>> duplicate_stops_with_offset([0.0, 0.25, 0.5], 0.125)
        [0.0, 0.125, 0.25, 0.375, 0.5, 0.625]
    """
    duplicated: List[float] = []
    for stop in stops:
        duplicated.extend((stop, stop + additive))
    return duplicated


# ===================== Stop interpretation =====================

def interpret_stops(explicit_stops: Optional[Sequence[float]], required_count: int) -> List[float]:
    """
    Resolve the stop positions of a color ramp.

    Args:
        explicit_stops: Stops given by the caller. Returned unchanged (as a
            list) when present; their validity is the caller's concern.
        required_count: Number of evenly spaced stops to synthesize when
            ``explicit_stops`` is None.

    Returns:
        ``required_count`` values from 0.0 to 1.0 inclusive, or the explicit
        stops.
    """
    if explicit_stops is not None:
        return list(explicit_stops)
    if required_count <= 0:
        return []
    if required_count == 1:
        return [0.0]
    return [float(u) for u in flat_1d_upbm(required_count, dtype=np.float64)]


# ===================== Size mismatch =====================

def stretch_list(
        input_list: Sequence[T],
        target_size: int,) -> List[T]:
    """Grow input_list to target_size, repeating its last entry.
    Args:
        input_list (Sequence): The original list; never mutated.
        target_size (int): The desired minimum size of the list.
    Returns:
        List: A new list at least target_size long. Longer inputs are kept whole.
    """
    lst = list(input_list)
    if lst and len(lst) < target_size:
        lst.extend([lst[-1]] * (target_size - len(lst)))
    return lst
