# chromalattice/lattice/lattice.py
"""Immutable, numpy-backed snapshot of one resolution level."""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

import numpy as np
from numpy import ndarray

from ..colors.rgb import ColorRGB, ColorLike
from ..config import DEFAULT_DOMAIN, Domain
from ..coords import np_to_spatial
from ..errors import LookupMiss
from ..types.coord_types import AxisCoord, SpatialCoord, axis_coord
from ..utils.num_utils import to_color_array
from .points import LatticePoint


class Lattice:
    """
    Sample points of one resolution level.

    Points are stored as two read-only arrays, ``axis_coords`` ``(N, 3)`` and
    ``colors`` ``(N, 3)`` uint8, in build order (p outer, c middle, s inner).
    Lookups by axis or spatial coordinate go through exact-key dictionaries.
    No two points share an axis coordinate.

    A Lattice never changes after construction. ``with_colors`` returns a
    new snapshot, so a reader holding a Lattice can not observe a partial
    update.
    """

    __slots__ = (
        "_axis", "_spatial", "_colors", "_level", "_domain",
        "_index", "_spatial_index", "_samples", "_grid",
    )

    def __init__(
        self,
        axis_coords,
        colors,
        level: Optional[int] = None,
        domain: Domain = DEFAULT_DOMAIN,
    ) -> None:
        axis = np.asarray(axis_coords, dtype=np.float64).reshape(-1, 3) + 0.0
        colors = np.asarray(colors)
        if colors.dtype != np.uint8:
            colors = to_color_array(colors)
        colors = colors.reshape(-1, 3).copy()
        if colors.shape[0] != axis.shape[0]:
            raise ValueError(
                f"Lattice got {axis.shape[0]} coordinates but {colors.shape[0]} colors"
            )

        index: Dict[AxisCoord, int] = {}
        for i, row in enumerate(axis.tolist()):
            key = AxisCoord(*row)
            if key in index:
                raise ValueError(f"Duplicate lattice coordinate {key!r}")
            index[key] = i

        spatial = np_to_spatial(axis)
        axis.flags.writeable = False
        spatial.flags.writeable = False
        colors.flags.writeable = False

        self._axis = axis
        self._spatial = spatial
        self._colors = colors
        self._level = level
        self._domain = domain
        self._index = index
        self._spatial_index: Dict[SpatialCoord, int] = {
            SpatialCoord(*row): i for i, row in enumerate(spatial.tolist())
        }
        self._samples: Tuple[Tuple[float, ...], ...] = tuple(
            tuple(np.unique(spatial[:, k]).tolist()) for k in range(3)
        )
        self._grid: Optional[ndarray] = None

    @classmethod
    def from_points(
        cls,
        points: Iterable,
        level: Optional[int] = None,
        domain: Domain = DEFAULT_DOMAIN,
    ) -> "Lattice":
        """Build from ``(axis, color)`` pairs, LatticePoints or EditPoints."""
        coords, colors = [], []
        for point in points:
            coords.append(tuple(point[0]))
            colors.append(tuple(point[-1]))
        return cls(
            np.array(coords, dtype=np.float64).reshape(-1, 3),
            np.array(colors, dtype=np.float64).reshape(-1, 3),
            level=level,
            domain=domain,
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def level(self) -> Optional[int]:
        return self._level

    @property
    def domain(self) -> Domain:
        return self._domain

    @property
    def axis_coords(self) -> ndarray:
        return self._axis

    @property
    def spatial_coords(self) -> ndarray:
        return self._spatial

    @property
    def colors(self) -> ndarray:
        return self._colors

    @property
    def samples(self) -> Tuple[Tuple[float, ...], ...]:
        """Sorted distinct spatial values along x, y and z."""
        return self._samples

    # ------------------ POINT ACCESS ------------------
    def __len__(self) -> int:
        return self._axis.shape[0]

    def __iter__(self) -> Iterator[LatticePoint]:
        for i in range(len(self)):
            yield self._point(i)

    def __contains__(self, axis) -> bool:
        return axis_coord(*axis) in self._index

    def __repr__(self) -> str:
        return f"Lattice(level={self._level}, points={len(self)})"

    def _point(self, i: int) -> LatticePoint:
        return LatticePoint(
            AxisCoord(*self._axis[i].tolist()),
            SpatialCoord(*self._spatial[i].tolist()),
            ColorRGB._from_channels(tuple(self._colors[i].tolist())),
        )

    def get(self, axis) -> Optional[LatticePoint]:
        i = self._index.get(axis_coord(*axis))
        return None if i is None else self._point(i)

    def get_spatial(self, spatial: SpatialCoord) -> Optional[LatticePoint]:
        i = self._spatial_index.get(spatial)
        return None if i is None else self._point(i)

    def point_at(self, axis) -> LatticePoint:
        point = self.get(axis)
        if point is None:
            raise LookupMiss(axis_coord(*axis))
        return point

    def point_at_spatial(self, spatial: SpatialCoord) -> LatticePoint:
        point = self.get_spatial(spatial)
        if point is None:
            raise LookupMiss(spatial)
        return point

    def color_at(self, axis) -> ColorRGB:
        return self.point_at(axis).color

    # ------------------ DERIVED SNAPSHOTS ------------------
    def with_colors(self, updates: Mapping) -> "Lattice":
        """
        Return a copy with the colors at the given axis coordinates replaced.

        Args:
            updates: Mapping of axis coordinate to color.

        Raises:
            LookupMiss: if a coordinate is not a point of this lattice.
        """
        if not updates:
            return self
        colors = self._colors.copy()
        for axis, color in updates.items():
            i = self._index.get(axis_coord(*axis))
            if i is None:
                raise LookupMiss(axis_coord(*axis))
            colors[i] = ColorRGB(color).value
        return Lattice(self._axis, colors, level=self._level, domain=self._domain)

    def color_grid(self) -> ndarray:
        """
        Dense ``(nx, ny, nz, 3)`` uint8 colors indexed by spatial sample position.

        Raises:
            LookupMiss: if some combination of the distinct samples has no point.
        """
        if self._grid is not None:
            return self._grid
        sizes = tuple(len(s) for s in self._samples)
        idx = tuple(
            np.searchsorted(np.asarray(self._samples[k]), self._spatial[:, k])
            for k in range(3)
        )
        filled = np.zeros(sizes, dtype=bool)
        filled[idx] = True
        if not filled.all():
            ix, iy, iz = (int(v[0]) for v in np.nonzero(~filled))
            missing = SpatialCoord(self._samples[0][ix], self._samples[1][iy], self._samples[2][iz])
            raise LookupMiss(missing)
        grid = np.empty(sizes + (3,), dtype=np.uint8)
        grid[idx] = self._colors
        grid.flags.writeable = False
        self._grid = grid
        return grid

    def to_records(self) -> list:
        return [
            {"pcs": row, "color": color}
            for row, color in zip(self._axis.tolist(), self._colors.tolist())
        ]
