"""Value types shared across the lattice engine."""

from .coord_types import AxisCoord, SpatialCoord, axis_coord, spatial_coord, AXIS_NAMES, SPATIAL_NAMES

__all__ = [
    "AxisCoord",
    "SpatialCoord",
    "axis_coord",
    "spatial_coord",
    "AXIS_NAMES",
    "SPATIAL_NAMES",
]
