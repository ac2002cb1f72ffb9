"""Chromasteps: stepped, interpolatable gradient descriptions."""

from .colors.rgb import ColorRGBAINT, Color, TRANSPARENT, BLACK, WHITE, RED, GREEN, BLUE
from .colors.lerp import color_lerp, scale_alpha, with_opacity
from .colors.shades import Shades
from .types.alignment import (
    Alignment,
    alignment_lerp,
    TOP_LEFT,
    TOP_CENTER,
    TOP_RIGHT,
    CENTER_LEFT,
    CENTER,
    CENTER_RIGHT,
    BOTTOM_LEFT,
    BOTTOM_CENTER,
    BOTTOM_RIGHT,
)
from .types.tile_mode import TileMode
from .errors import GradientError, ShapeMismatchError
from .utils.list_ops import duplicate_colors, duplicate_stops_with_offset, interpret_stops

from .gradients import (
    Gradient,
    lerp_gradient,
    LinearGradient,
    RadialGradient,
    SweepGradient,
    Steps,
    LinearSteps,
    RadialSteps,
    SweepSteps,
    LinearShadedSteps,
    RadialShadedSteps,
    SweepShadedSteps,
    PrimitiveGradient,
    GradientPacket,
    IntermediateGradient,
    interpolate_from,
    copy_with,
    reversed_gradient,
    tile_mode_of,
    begin_of,
    end_of,
    center_of,
    radius_of,
    focal_of,
    focal_radius_of,
    start_angle_of,
    end_angle_of,
    stepped_colors_of,
    stepped_stops_of,
    softness_of,
    shade_function_of,
    shade_factor_of,
    distance_of,
    GradientTween,
    sample_ramp,
)

__all__ = [
    # Colors
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
    "with_opacity",
    "Shades",
    # Geometry
    "Alignment",
    "alignment_lerp",
    "TOP_LEFT",
    "TOP_CENTER",
    "TOP_RIGHT",
    "CENTER_LEFT",
    "CENTER",
    "CENTER_RIGHT",
    "BOTTOM_LEFT",
    "BOTTOM_CENTER",
    "BOTTOM_RIGHT",
    "TileMode",
    # Errors
    "GradientError",
    "ShapeMismatchError",
    # List helpers
    "duplicate_colors",
    "duplicate_stops_with_offset",
    "interpret_stops",
    # Gradients
    "Gradient",
    "lerp_gradient",
    "LinearGradient",
    "RadialGradient",
    "SweepGradient",
    "Steps",
    "LinearSteps",
    "RadialSteps",
    "SweepSteps",
    "LinearShadedSteps",
    "RadialShadedSteps",
    "SweepShadedSteps",
    "PrimitiveGradient",
    "GradientPacket",
    "IntermediateGradient",
    "interpolate_from",
    "copy_with",
    "reversed_gradient",
    "tile_mode_of",
    "begin_of",
    "end_of",
    "center_of",
    "radius_of",
    "focal_of",
    "focal_radius_of",
    "start_angle_of",
    "end_angle_of",
    "stepped_colors_of",
    "stepped_stops_of",
    "softness_of",
    "shade_function_of",
    "shade_factor_of",
    "distance_of",
    "GradientTween",
    "sample_ramp",
]
