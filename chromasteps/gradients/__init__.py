from .base import Gradient, lerp_gradient
from .continuous import LinearGradient, RadialGradient, SweepGradient
from .steps import Steps, LinearSteps, RadialSteps, SweepSteps
from .shaded_steps import LinearShadedSteps, RadialShadedSteps, SweepShadedSteps
from .interpolation import (
    PrimitiveGradient,
    GradientPacket,
    IntermediateGradient,
    interpolate_from,
)
from .utils import (
    GradientCopyWith,
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
)
from .tween import GradientTween
from .ramp import sample_ramp

__all__ = [
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
    "GradientCopyWith",
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
