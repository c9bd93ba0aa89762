# chromalattice/coords.py
"""
Axis <-> spatial coordinate mapping.

Convention: ``x = c``, ``y = p``, ``z = -s`` and back ``p = y``, ``c = x``,
``s = -z``. The only arithmetic is a sign flip, so the mapping is exact.
A zero component always maps to ``+0.0``.
"""

from __future__ import annotations
import numpy as np

from .types.coord_types import AxisCoord, SpatialCoord


def _negate(value: float) -> float:
    return 0.0 if value == 0 else -float(value)


def to_spatial(coord: AxisCoord) -> SpatialCoord:
    p, c, s = coord
    return SpatialCoord(float(c) + 0.0, float(p) + 0.0, _negate(s))


def to_axis(coord: SpatialCoord) -> AxisCoord:
    x, y, z = coord
    return AxisCoord(float(y) + 0.0, float(x) + 0.0, _negate(z))


def np_to_spatial(coords: np.ndarray) -> np.ndarray:
    """Vectorized ``to_spatial`` over an ``(..., 3)`` array of axis coordinates."""
    coords = np.asarray(coords, dtype=np.float64)
    out = np.empty_like(coords)
    out[..., 0] = coords[..., 1]
    out[..., 1] = coords[..., 0]
    out[..., 2] = -coords[..., 2]
    # adding +0.0 turns every -0.0 into +0.0
    out += 0.0
    return out


def np_to_axis(coords: np.ndarray) -> np.ndarray:
    """Vectorized ``to_axis`` over an ``(..., 3)`` array of spatial coordinates."""
    coords = np.asarray(coords, dtype=np.float64)
    out = np.empty_like(coords)
    out[..., 0] = coords[..., 1]
    out[..., 1] = coords[..., 0]
    out[..., 2] = -coords[..., 2]
    out += 0.0
    return out
