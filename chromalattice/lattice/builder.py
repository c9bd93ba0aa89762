# chromalattice/lattice/builder.py
"""
Multi-resolution lattice construction.

Level 1 is the 3x3x3 grid of "major" coordinates (every component at the
domain minimum, midpoint or maximum). Its colors come only from the six
pure-axis ends:

- a point on one or more axis extremes gets the sum of the matching
  axis-end colors, so edges and corners blend their contributing ends;
- the balance point (all midpoints) averages one pair of ends per channel:
  red from the s ends, green from the c ends, blue from the p ends;
- an axis end without an edit is black.

Each finer level regenerates the major points the same way and colors every
other point by interpolating the previous level, edits included. The level
is then merged with the edits visible at its resolution and becomes the
interpolation source of the next level.
"""

from __future__ import annotations
import logging
from typing import NamedTuple, Optional, Tuple

import numpy as np
from numpy import ndarray

from ..colors.rgb import BLACK, ColorRGB
from ..config import DEFAULT_DOMAIN, Domain, resolve_level
from ..types.coord_types import AxisCoord, axis_coord
from ..utils.num_utils import to_color_array
from .edits import EditSet, as_edit_set
from .lattice import Lattice
from .merge import merge_edits
from .sampler import sample_colors

logger = logging.getLogger(__name__)

P, C, S = 0, 1, 2
# channel -> axis whose two ends it averages at the balance point
BALANCE_CHANNEL_AXES: Tuple[int, int, int] = (S, C, P)


class AxisEnds(NamedTuple):
    minimum: ColorRGB
    maximum: ColorRGB


def pure_axis_end(axis: int, at_max: bool, domain: Domain = DEFAULT_DOMAIN) -> AxisCoord:
    """Coordinate of one axis extreme with the other two components at the midpoint."""
    coord = [domain.midpoint] * 3
    coord[axis] = domain.maximum if at_max else domain.minimum
    return axis_coord(*coord)


def pure_axis_ends(domain: Domain = DEFAULT_DOMAIN) -> Tuple[AxisCoord, ...]:
    """The six pure-axis ends ordered p-, p+, c-, c+, s-, s+."""
    return tuple(
        pure_axis_end(axis, at_max, domain) for axis in (P, C, S) for at_max in (False, True)
    )


def balance_point(domain: Domain = DEFAULT_DOMAIN) -> AxisCoord:
    return axis_coord(domain.midpoint, domain.midpoint, domain.midpoint)


def axis_end_colors(edits, domain: Domain = DEFAULT_DOMAIN) -> Tuple[AxisEnds, AxisEnds, AxisEnds]:
    """Edit color at each pure-axis end, black where there is no edit."""
    edits = as_edit_set(edits)

    def end_color(axis: int, at_max: bool) -> ColorRGB:
        edit = edits.get(pure_axis_end(axis, at_max, domain))
        return BLACK if edit is None else edit.color

    return tuple(AxisEnds(end_color(axis, False), end_color(axis, True)) for axis in (P, C, S))


def compose_major_color(
    coord: AxisCoord,
    ends: Tuple[AxisEnds, AxisEnds, AxisEnds],
    domain: Domain = DEFAULT_DOMAIN,
) -> ndarray:
    """
    Unrounded color of a major coordinate.

    Returns the raw float channels; callers round and clamp once the whole
    composition is done.
    """
    if all(v == domain.midpoint for v in coord):
        return np.array(
            [
                (ends[axis].minimum[channel] + ends[axis].maximum[channel]) / 2
                for channel, axis in enumerate(BALANCE_CHANNEL_AXES)
            ],
            dtype=np.float64,
        )

    total = np.zeros(3, dtype=np.float64)
    for axis, value in enumerate(coord):
        others_major = all(domain.is_major(v) for k, v in enumerate(coord) if k != axis)
        if not others_major:
            continue
        if value == domain.maximum:
            total += ends[axis].maximum.value
        elif value == domain.minimum:
            total += ends[axis].minimum.value
    return total


def grid_coords(level: int, domain: Domain = DEFAULT_DOMAIN) -> ndarray:
    """All ``(p, c, s)`` grid coordinates of ``level``, p outermost and s innermost."""
    samples = domain.samples(level)
    p, c, s = np.meshgrid(samples, samples, samples, indexing="ij")
    return np.stack([p, c, s], axis=-1).reshape(-1, 3) + 0.0


def generate_level(
    level: int,
    previous: Optional[Lattice],
    edits: EditSet,
    domain: Domain = DEFAULT_DOMAIN,
) -> Lattice:
    """
    Generate one level before its edit overlay.

    Args:
        level: Level being generated.
        previous: Fully merged lattice of ``level - 1`` (None at level 1).
        edits: Current edits, used for axis ends and interpolation priority.
        domain: Domain bounds.
    """
    coords = grid_coords(level, domain)
    majors = np.array([domain.minimum, domain.midpoint, domain.maximum])
    is_major = np.isin(coords, majors).all(axis=1)

    colors = np.zeros(coords.shape, dtype=np.float64)
    interpolated = ~is_major
    if interpolated.any():
        if previous is None:
            raise ValueError(f"Level {level} needs the previous level to interpolate from")
        colors[interpolated] = sample_colors(coords[interpolated], previous, edits)

    ends = axis_end_colors(edits, domain)
    for row in np.flatnonzero(is_major):
        colors[row] = compose_major_color(AxisCoord(*coords[row].tolist()), ends, domain)

    lattice = Lattice(coords, to_color_array(colors), level=level, domain=domain)
    logger.debug(
        "Generated level %d: %d points, step %g (%d interpolated)",
        level, len(lattice), domain.step(level), int(interpolated.sum()),
    )
    return lattice


def build_levels(
    level: int,
    edits=None,
    domain: Domain = DEFAULT_DOMAIN,
    previous: Optional[Lattice] = None,
) -> Tuple[Lattice, ...]:
    """
    Build every level up to ``level``.

    Args:
        level: Finest level to build.
        edits: EditSet or iterable of EditPoints.
        domain: Domain bounds.
        previous: Merged lattice to continue from. Building starts at
            ``previous.level + 1``, or at level 1 when omitted.

    Returns:
        Tuple of the merged lattices built, coarsest first.

    Raises:
        InvalidLevel: if ``level`` is not an integer >= 1.
    """
    level = resolve_level(level)
    edits = as_edit_set(edits)
    start = 1 if previous is None else previous.level + 1
    levels = []
    for i in range(start, level + 1):
        generated = generate_level(i, previous, edits, domain)
        previous = merge_edits(generated, edits, i)
        levels.append(previous)
    return tuple(levels)


def build_lattice(level: int, edits=None, domain: Domain = DEFAULT_DOMAIN) -> Lattice:
    """Build the merged lattice of ``level`` from the edits."""
    return build_levels(level, edits, domain)[-1]
