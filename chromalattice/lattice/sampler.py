# chromalattice/lattice/sampler.py
"""
Trilinear interpolation over a resolved cell.

Each corner is weighted by the volume of the sub-box opposite to it,
normalized by the cell volume: per axis ``(length - |query - corner|) / length``.
An axis of zero length contributes a factor of 1.
"""

from __future__ import annotations
import itertools
from typing import Optional

import numpy as np
from numpy import ndarray

from ..colors.rgb import ColorRGB
from ..coords import np_to_spatial, to_spatial
from ..types.coord_types import axis_coord
from ..utils.num_utils import to_color_array
from .bounds import np_find_bound_indices
from .edits import EditSet, as_edit_set
from .lattice import Lattice
from .region import Region, resolve_region



def sample_region(query, region: Region) -> ColorRGB:
    """
    Interpolate the color at ``query`` from a resolved region.

    Args:
        query: Axis coordinate inside the region's cell.
        region: Output of ``resolve_region`` for the same query.

    Returns:
        Rounded and clamped color.
    """
    spatial = to_spatial(axis_coord(*query))
    r = g = b = 0.0
    for point in region.corners:
        weight = 1.0
        for q, v, length in zip(spatial, point.spatial, region.axis_lengths):
            if length == 0:
                continue
            weight *= (length - abs(q - v)) / length
        cr, cg, cb = point.color
        r += weight * cr
        g += weight * cg
        b += weight * cb
    return ColorRGB((r, g, b))


def sample_color(query, lattice: Lattice, edits: Optional[EditSet] = None) -> ColorRGB:
    """Resolve the cell around ``query`` and interpolate its color."""
    return sample_region(query, resolve_region(query, lattice, edits))


def _edited_grid(lattice: Lattice, edits: Optional[EditSet]) -> ndarray:
    """Dense float color grid of the lattice with edits laid over matching samples."""
    grid = lattice.color_grid().astype(np.float64)
    if not edits:
        return grid
    positions = [{v: i for i, v in enumerate(samples)} for samples in lattice.samples]
    for edit in edits:
        idx = tuple(pos.get(v) for pos, v in zip(positions, edit.spatial))
        if None in idx:
            continue
        grid[idx] = edit.color.value
    return grid


def sample_colors(queries, lattice: Lattice, edits: Optional[EditSet] = None) -> ndarray:
    """
    Vectorized ``sample_color`` for many queries.

    Cell bounds, edit priority and the zero-length axis rule match the
    scalar path exactly. The lattice must cover every combination of its
    distinct samples (see ``Lattice.color_grid``).

    Args:
        queries: Array-like ``(N, 3)`` of axis coordinates.
        lattice: Lattice to interpolate.
        edits: Optional edit overrides.

    Returns:
        ``(N, 3)`` uint8 colors.
    """
    axis = np.asarray(queries, dtype=np.float64).reshape(-1, 3)
    if axis.shape[0] == 0:
        return np.zeros((0, 3), dtype=np.uint8)
    spatial = np_to_spatial(axis)
    grid = _edited_grid(lattice, None if edits is None else as_edit_set(edits))

    indices = []
    factors = []
    for k, samples in enumerate(lattice.samples):
        samples = np.asarray(samples, dtype=np.float64)
        q = spatial[:, k]
        lower_idx, upper_idx = np_find_bound_indices(q, samples)
        lower, upper = samples[lower_idx], samples[upper_idx]
        length = upper - lower
        degenerate = length == 0
        safe_length = np.where(degenerate, 1.0, length)
        # upper side first, same corner order as resolve_region
        f_upper = np.where(degenerate, 1.0, (length - np.abs(q - upper)) / safe_length)
        f_lower = np.where(degenerate, 0.0, (length - np.abs(q - lower)) / safe_length)
        indices.append((upper_idx, lower_idx))
        factors.append((f_upper, f_lower))

    total = np.zeros((axis.shape[0], 3), dtype=np.float64)
    for sx, sy, sz in itertools.product((0, 1), repeat=3):
        weight = factors[0][sx] * factors[1][sy] * factors[2][sz]
        corner = grid[indices[0][sx], indices[1][sy], indices[2][sz]]
        total += weight[:, None] * corner

    return to_color_array(total)
