from .list_ops import (
    duplicate_colors,
    duplicate_stops_with_offset,
    interpret_stops,
    stretch_list,
)
from .num_utils import lerp_double, floor_at_zero, round_half_away, finite_or

__all__ = [
    "duplicate_colors",
    "duplicate_stops_with_offset",
    "interpret_stops",
    "stretch_list",
    "lerp_double",
    "floor_at_zero",
    "round_half_away",
    "finite_or",
]
