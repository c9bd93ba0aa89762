import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function

CHANNEL_MIN = 0
CHANNEL_MAX = 255

_clamp = bound_type_to_np_function[BoundType.CLAMP]


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer, ties toward +inf (``x.5`` -> ``x + 1``)."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5)


def clamp_channels(values: np.ndarray) -> np.ndarray:
    """Clamp channel values into [0, 255]."""
    return _clamp(np.asarray(values, dtype=np.float64), CHANNEL_MIN, CHANNEL_MAX)


def to_color_array(values) -> np.ndarray:
    """
    Finalize raw channel values into integer colors.

    Rounding happens before clamping, and both happen only once on the fully
    composed value, so partial sums may freely leave [0, 255].

    Args:
        values: Array-like with a trailing channel dimension.

    Returns:
        ``uint8`` array with the same shape.
    """
    return clamp_channels(round_half_up(values)).astype(np.uint8)
