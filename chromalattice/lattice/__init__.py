"""Lattice module: multi-resolution sample grids and their interpolation.

- Lattice: immutable snapshot of one resolution level
- EditSet / EditPoint / LatticePoint: point records
- find_bounds: enclosing samples on one axis
- resolve_region / sample_region / sample_color / sample_colors: point queries
- merge_edits: overlay edits onto a lattice
- build_lattice / build_levels: recursive construction
"""

from .points import LatticePoint, EditPoint
from .edits import EditSet, as_edit_set
from .lattice import Lattice
from .bounds import find_bounds, np_find_bound_indices
from .region import Region, resolve_region
from .sampler import sample_region, sample_color, sample_colors
from .merge import merge_edits
from .builder import (
    AxisEnds,
    axis_end_colors,
    balance_point,
    build_lattice,
    build_levels,
    compose_major_color,
    generate_level,
    grid_coords,
    pure_axis_end,
    pure_axis_ends,
)

__all__ = [
    'LatticePoint',
    'EditPoint',
    'EditSet',
    'as_edit_set',
    'Lattice',
    'find_bounds',
    'np_find_bound_indices',
    'Region',
    'resolve_region',
    'sample_region',
    'sample_color',
    'sample_colors',
    'merge_edits',
    'AxisEnds',
    'axis_end_colors',
    'balance_point',
    'build_lattice',
    'build_levels',
    'compose_major_color',
    'generate_level',
    'grid_coords',
    'pure_axis_end',
    'pure_axis_ends',
]
