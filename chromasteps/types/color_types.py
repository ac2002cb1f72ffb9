from __future__ import annotations
from typing import Tuple, Union

Scalar = int | float
IntVector = Tuple[int, ...]
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[IntVector, ScalarVector]
