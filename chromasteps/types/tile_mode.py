# No dependencies
from enum import Enum


class TileMode(str, Enum):
    """How a gradient paints the region before its first and after its last stop."""
    CLAMP = "clamp"
    MIRROR = "mirror"
    REPEATED = "repeated"
    DECAL = "decal"
