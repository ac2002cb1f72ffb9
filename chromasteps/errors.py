class GradientError(Exception):
    """Base class for errors raised by gradient operations."""


class ShapeMismatchError(GradientError, ValueError):
    """Two color ramps that must be interpolated pairwise differ in length."""

    def __init__(self, a_length: int, b_length: int):
        self.a_length = a_length
        self.b_length = b_length
        super().__init__(
            f"Cannot interpolate a gradient of {a_length} colors with one of {b_length} colors"
        )
