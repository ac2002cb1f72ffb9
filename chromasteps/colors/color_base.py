from __future__ import annotations
from abc import ABC
from typing import Any, ClassVar, Tuple, cast, Self

import numpy as np
from boundednumbers import clamp

from ..types.color_types import ColorElement, Scalar, ScalarVector


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[str]
    _type:      ClassVar[type]
    maxima:     ClassVar[ColorElement]
    null_value: ClassVar[ColorElement]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorElement | ColorBase) -> None:
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                raise TypeError(f"{self.mode} cannot be built from a {value.mode} color")
            value = value.value

        if isinstance(value, np.ndarray):
            value = tuple(value.tolist())

        value = cast(ScalarVector, tuple(value))
        if len(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped value, got {value!r}")

        # type enforcement, then clamp each channel to its maximum
        value = tuple(
            self._type(clamp(self._type(v), 0, m))
            for v, m in zip(value, cast(Tuple[Scalar, ...], self.maxima))
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    def as_array(self) -> np.ndarray:
        """Channels as a float64 array."""
        return np.asarray(self._value, dtype=np.float64)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    maxima: ClassVar[ColorElement]
    mode: ClassVar[str]
    value: ScalarVector

    alpha_index: ClassVar[int] = -1
    alpha_max:   ClassVar[Scalar]

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    @property
    def opacity(self) -> float:
        """Alpha normalized to [0, 1]."""
        return self.alpha / self.alpha_max

    def with_alpha(self, alpha: Scalar) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, clamped to [0, alpha_max].

        Returns:
            New color instance with updated alpha.
        """
        a = clamp(alpha, 0, self.alpha_max)
        return self.__class__(self.value[:-1] + (a,))  # type: ignore
