# chromalattice/lattice/region.py
"""Resolve the lattice cell enclosing a query coordinate."""

from __future__ import annotations
import itertools
from typing import NamedTuple, Optional, Tuple, Union

from ..coords import to_spatial
from ..errors import LookupMiss
from ..types.coord_types import SpatialCoord, axis_coord
from .bounds import find_bounds
from .edits import EditSet, as_edit_set
from .lattice import Lattice
from .points import EditPoint, LatticePoint

RegionPoint = Union[LatticePoint, EditPoint]


class Region(NamedTuple):
    """
    Corners of the cell around a query.

    ``corners`` holds up to 8 points ordered ``+++``, ``++-``, ``+-+`` ...
    ``---`` over (x, y, z), upper bound first. The count is not always 8: on
    an axis where the cell has zero length the two bounds coincide and only
    one side is kept, so a cell collapsed on k axes has ``8 / 2**k`` corners.
    Iterate over ``corners`` rather than indexing a fixed position; the
    matching ``axis_lengths`` entry is 0 for every collapsed axis.
    """
    corners: Tuple[RegionPoint, ...]
    axis_lengths: Tuple[float, float, float]
    lower: SpatialCoord
    upper: SpatialCoord


def _lookup(spatial: SpatialCoord, lattice: Lattice, edits: Optional[EditSet]) -> RegionPoint:
    if edits is not None:
        edit = edits.get_spatial(spatial)
        if edit is not None:
            return edit
    point = lattice.get_spatial(spatial)
    if point is None:
        raise LookupMiss(spatial, "lattice or edits")
    return point


def resolve_region(query, lattice: Lattice, edits: Optional[EditSet] = None) -> Region:
    """
    Find the corners bounding ``query``, edits taking priority over lattice points.

    A full cell has 8 corners; each zero-length axis halves the count
    (see ``Region``).

    Args:
        query: Axis coordinate (anything unpackable into p, c, s).
        lattice: Lattice providing the sample grid.
        edits: Optional edit overrides, looked up by exact spatial coordinate.

    Returns:
        Region with corners and the per-axis cell lengths.

    Raises:
        LookupMiss: if a corner has neither an edit nor a lattice point.
    """
    edits = None if edits is None else as_edit_set(edits)
    spatial = to_spatial(axis_coord(*query))
    bounds = [find_bounds(q, samples) for q, samples in zip(spatial, lattice.samples)]

    sides = [(upper, lower) if upper != lower else (upper,) for lower, upper in bounds]
    corners = tuple(
        _lookup(SpatialCoord(x, y, z), lattice, edits)
        for x, y, z in itertools.product(*sides)
    )
    lengths = tuple(upper - lower for lower, upper in bounds)
    return Region(
        corners=corners,
        axis_lengths=lengths,
        lower=SpatialCoord(*(b[0] for b in bounds)),
        upper=SpatialCoord(*(b[1] for b in bounds)),
    )
