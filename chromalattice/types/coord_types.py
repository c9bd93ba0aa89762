# chromalattice/types/coord_types.py
"""Coordinate value types.

Two coordinate systems describe the same point:

- ``AxisCoord(p, c, s)``: the color space's own axes.
- ``SpatialCoord(x, y, z)``: an orthogonal system used for distances and
  interpolation volumes.

Both are plain NamedTuples of floats, so equality and hashing are exact and
structural. Grid coordinates are dyadic fractions of the domain, which floats
represent exactly.
"""

from __future__ import annotations
from typing import NamedTuple, Tuple

AXIS_NAMES: Tuple[str, str, str] = ("p", "c", "s")
SPATIAL_NAMES: Tuple[str, str, str] = ("x", "y", "z")


def _positive_zero(value: float) -> float:
    """Return ``value`` as float with ``-0.0`` folded into ``0.0``."""
    value = float(value)
    return 0.0 if value == 0 else value


class AxisCoord(NamedTuple):
    p: float
    c: float
    s: float

    def __repr__(self) -> str:
        return f"AxisCoord(p={self.p:g}, c={self.c:g}, s={self.s:g})"


class SpatialCoord(NamedTuple):
    x: float
    y: float
    z: float

    def __repr__(self) -> str:
        return f"SpatialCoord(x={self.x:g}, y={self.y:g}, z={self.z:g})"


def axis_coord(p: float, c: float, s: float) -> AxisCoord:
    """Build an AxisCoord, coercing components to float and dropping negative zero."""
    return AxisCoord(_positive_zero(p), _positive_zero(c), _positive_zero(s))


def spatial_coord(x: float, y: float, z: float) -> SpatialCoord:
    """Build a SpatialCoord, coercing components to float and dropping negative zero."""
    return SpatialCoord(_positive_zero(x), _positive_zero(y), _positive_zero(z))
