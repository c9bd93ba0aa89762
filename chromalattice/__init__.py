"""
Chromalattice - editable 3D color spaces
========================================

Define a color mapping over a cube by coloring a few control points ("edit
points"). Everything else is derived: a multi-resolution lattice is built
from the six axis-end colors and the edits, and any coordinate is colored by
trilinear interpolation over its lattice cell.

Quick Start
-----------
>>> from chromalattice import ColorSpaceEngine
>>>
>>> engine = ColorSpaceEngine(resolution=2)
>>> lattice = engine.set_edit((0, 0, 100), (255, 0, 0))
>>> engine.query_color((0, 0, 0))
ColorRGB(128, 0, 0)

Modules
-------
- types: AxisCoord / SpatialCoord value types
- coords: axis <-> spatial mapping
- colors: immutable ColorRGB
- lattice: lattice snapshots, builder, edit merge, region resolution, sampling
- engine: ColorSpaceEngine session object
- config: Domain and LatticeConfig
"""

from .types.coord_types import AxisCoord, SpatialCoord, axis_coord, spatial_coord
from .coords import to_spatial, to_axis, np_to_spatial, np_to_axis
from .colors.rgb import ColorRGB, BLACK
from .config import Domain, LatticeConfig, DEFAULT_DOMAIN, DEFAULT_CONFIG, resolve_level
from .errors import LatticeError, LookupMiss, InvalidLevel
from .lattice import (
    Lattice,
    LatticePoint,
    EditPoint,
    EditSet,
    Region,
    find_bounds,
    resolve_region,
    sample_region,
    sample_color,
    sample_colors,
    merge_edits,
    build_lattice,
    build_levels,
    pure_axis_ends,
    balance_point,
)
from .engine import ColorSpaceEngine, EngineState
from .logging_config import setup_logging

__version__ = "1.0.0"

__all__ = [
    # coordinates
    "AxisCoord",
    "SpatialCoord",
    "axis_coord",
    "spatial_coord",
    "to_spatial",
    "to_axis",
    "np_to_spatial",
    "np_to_axis",
    # colors
    "ColorRGB",
    "BLACK",
    # configuration and errors
    "Domain",
    "LatticeConfig",
    "DEFAULT_DOMAIN",
    "DEFAULT_CONFIG",
    "resolve_level",
    "LatticeError",
    "LookupMiss",
    "InvalidLevel",
    # lattice engine
    "Lattice",
    "LatticePoint",
    "EditPoint",
    "EditSet",
    "Region",
    "find_bounds",
    "resolve_region",
    "sample_region",
    "sample_color",
    "sample_colors",
    "merge_edits",
    "build_lattice",
    "build_levels",
    "pure_axis_ends",
    "balance_point",
    # session
    "ColorSpaceEngine",
    "EngineState",
    "setup_logging",
    "__version__",
]
