from __future__ import annotations
from typing import ClassVar, Iterator, Sequence, Tuple, Union

import numpy as np
from numpy import ndarray

from ..utils.num_utils import to_color_array

ColorLike = Union["ColorRGB", Sequence[float], ndarray]


class ColorRGB:
    """
    Immutable 8-bit RGB color.

    Raw channel values are rounded half up and clamped into [0, 255] on
    construction, so sums and weighted blends can be passed straight in.
    Compares equal to plain tuples holding the same channels.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorLike) -> None:
        if isinstance(value, ColorRGB):
            channels = value.value
        else:
            arr = np.asarray(value, dtype=np.float64)
            if arr.shape != (self.num_channels,):
                raise ValueError(
                    f"ColorRGB expects {self.num_channels} channels, got shape {arr.shape}"
                )
            if not np.all(np.isfinite(arr)):
                raise ValueError(f"ColorRGB channels must be finite, got {value!r}")
            channels = tuple(int(v) for v in to_color_array(arr))
        self._value = channels
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _from_channels(cls, channels: Tuple[int, int, int]) -> "ColorRGB":
        """Wrap channels already known to be ints in [0, 255]."""
        color = object.__new__(cls)
        object.__setattr__(color, "_value", channels)
        object.__setattr__(color, "_is_frozen", True)
        return color

    @property
    def value(self) -> Tuple[int, int, int]:
        return self._value

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    def to_array(self) -> ndarray:
        return np.array(self._value, dtype=np.uint8)

    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, ColorRGB):
            return self._value == other._value
        if isinstance(other, (tuple, list)):
            return self._value == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"ColorRGB{self._value}"


BLACK = ColorRGB(ColorRGB.null_value)
