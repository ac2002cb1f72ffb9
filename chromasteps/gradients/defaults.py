"""Default field values and accessor fallbacks for every gradient variant."""
import math

from ..types.alignment import CENTER, CENTER_LEFT, CENTER_RIGHT
from ..types.tile_mode import TileMode

# ===================== Constructor defaults =====================

DEFAULT_TILE_MODE = TileMode.CLAMP

LINEAR_BEGIN = CENTER_LEFT
LINEAR_END = CENTER_RIGHT

RADIAL_CENTER = CENTER
RADIAL_RADIUS = 0.5
RADIAL_FOCAL_RADIUS = 0.0

SWEEP_CENTER = CENTER
SWEEP_START_ANGLE = 0.0
SWEEP_END_ANGLE = math.pi * 2

default_softness = {
    "linear": 0.001,
    "radial": 0.0025,
    "sweep": 0.0,
}

SHADE_FACTOR = -90
SHADE_DISTANCE = 0.6

# ===================== Accessor fallbacks =====================
# Returned by the universal accessors when a field does not apply to a variant.

field_fallbacks = {
    "tile_mode": TileMode.CLAMP,
    "begin": CENTER,
    "end": CENTER,
    "center": CENTER,
    "radius": 0.0,
    "focal": None,
    "focal_radius": 0.0,
    "start_angle": 0.0,
    "end_angle": 0.0,
    "softness": 0.0,
    "shade_factor": 0,
    "distance": 0.0,
}
