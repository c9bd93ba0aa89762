# chromalattice/engine.py
"""
Color space session.

``ColorSpaceEngine`` owns the edit set, the current resolution and an arena
of lattice snapshots indexed by level. State lives in one immutable
``EngineState`` that writers replace wholesale under a lock; readers grab the
current reference and work on it without locking, so a query always sees a
fully built and merged lattice.
"""

from __future__ import annotations
import logging
import threading
from types import MappingProxyType
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple

import numpy as np
from numpy import ndarray

from .colors.rgb import ColorRGB, ColorLike
from .config import DEFAULT_CONFIG, LatticeConfig, resolve_level
from .errors import LookupMiss
from .lattice.builder import build_levels, grid_coords
from .lattice.edits import EditSet, as_edit_set
from .lattice.lattice import Lattice
from .lattice.merge import merge_edits
from .lattice.points import EditPoint
from .lattice.region import Region, resolve_region
from .lattice.sampler import sample_color, sample_colors
from .types.coord_types import axis_coord

logger = logging.getLogger(__name__)


class EngineState(NamedTuple):
    resolution: int
    edits: EditSet
    levels: Mapping[int, Lattice]

    @property
    def lattice(self) -> Lattice:
        return self.levels[self.resolution]


class ColorSpaceEngine:
    """
    Session over one color space: edits, resolution and lattice snapshots.

    Every mutation (edit or resolution change) rebuilds the affected
    lattices from scratch and publishes them in a new ``EngineState``.
    Lattices of levels already built for the same edit set are reused.
    """

    def __init__(
        self,
        config: LatticeConfig = DEFAULT_CONFIG,
        resolution: int = 1,
        edits=None,
        lattice: Optional[Lattice] = None,
    ) -> None:
        self._config = config
        self._lock = threading.RLock()
        resolution = resolve_level(resolution, config.max_resolution)
        edits = as_edit_set(edits)
        self._check_edits(edits)

        if lattice is None:
            levels = self._levels_for(resolution, edits, {})
        else:
            if lattice.level != resolution:
                raise ValueError(
                    f"Lattice level {lattice.level} does not match resolution {resolution}"
                )
            levels = {resolution: lattice}
        self._state = EngineState(resolution, edits, MappingProxyType(levels))

    # ------------------ STATE ------------------
    @property
    def config(self) -> LatticeConfig:
        return self._config

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def resolution(self) -> int:
        return self._state.resolution

    @property
    def edits(self) -> EditSet:
        return self._state.edits

    @property
    def lattice(self) -> Lattice:
        return self._state.lattice

    def lattice_at(self, level: int) -> Lattice:
        """Merged lattice of ``level`` for the current edits, building it if needed."""
        level = resolve_level(level, self._config.max_resolution)
        state = self._state
        if level in state.levels:
            return state.levels[level]
        with self._lock:
            state = self._state
            if level not in state.levels:
                levels = self._levels_for(level, state.edits, state.levels)
                self._publish(state.resolution, state.edits, levels)
            return self._state.levels[level]

    # ------------------ EXTERNAL INTERFACE ------------------
    def build_lattice(self, level: int, edits=None) -> Lattice:
        """Build a lattice for ``level`` without touching session state."""
        level = resolve_level(level, self._config.max_resolution)
        edits = self._state.edits if edits is None else as_edit_set(edits)
        return build_levels(level, edits, self._config.domain)[-1]

    def merge_edits(self, lattice: Lattice, edits=None, level: Optional[int] = None) -> Lattice:
        edits = self._state.edits if edits is None else edits
        return merge_edits(lattice, edits, level)

    def query_color(self, axis, lattice: Optional[Lattice] = None) -> ColorRGB:
        """Interpolated color at ``axis``; edits take priority at cell corners."""
        state = self._state
        return sample_color(axis, state.lattice if lattice is None else lattice, state.edits)

    def query_colors(self, coords, lattice: Optional[Lattice] = None) -> ndarray:
        """Vectorized ``query_color`` over an ``(N, 3)`` array of axis coordinates."""
        state = self._state
        return sample_colors(coords, state.lattice if lattice is None else lattice, state.edits)

    def region(self, axis, lattice: Optional[Lattice] = None) -> Region:
        """Cell corners around ``axis``, as highlighted by the editor."""
        state = self._state
        return resolve_region(axis, state.lattice if lattice is None else lattice, state.edits)

    def fill_grid(self, fill_resolution: int = 1) -> Tuple[ndarray, ndarray]:
        """
        Evenly spaced fill points over the whole space and their colors.

        The step is ``domain.length / (fill_divisions * 2**(fill_resolution - 1))``.

        Returns:
            ``(coords, colors)``: ``(N, 3)`` axis coordinates (p outer, s inner)
            and ``(N, 3)`` uint8 colors.
        """
        domain = self._config.domain
        step = self._config.fill_step(fill_resolution)
        count = int(round(domain.length / step)) + 1
        values = domain.minimum + step * np.arange(count, dtype=np.float64)
        values[-1] = domain.maximum
        p, c, s = np.meshgrid(values, values, values, indexing="ij")
        coords = np.stack([p, c, s], axis=-1).reshape(-1, 3) + 0.0
        return coords, self.query_colors(coords)

    def is_visible(self, axis, level: Optional[int] = None) -> bool:
        """Whether ``axis`` is a lattice sample at ``level`` (default: current resolution)."""
        level = self._state.resolution if level is None else resolve_level(level)
        coord = axis_coord(*axis)
        return self._config.domain.contains(coord) and self._config.domain.is_aligned(coord, level)

    # ------------------ MUTATIONS ------------------
    def set_resolution(self, level: int) -> Lattice:
        level = resolve_level(level, self._config.max_resolution)
        with self._lock:
            state = self._state
            levels = self._levels_for(level, state.edits, state.levels)
            self._publish(level, state.edits, levels)
            logger.info("Resolution set to %d (%d points)", level, len(levels[level]))
            return levels[level]

    def set_edit(self, axis, color: ColorLike) -> Lattice:
        """Add or replace the edit at ``axis`` and rebuild."""
        with self._lock:
            return self._replace_edits(self._state.edits.with_edit(axis, color))

    def remove_edit(self, axis) -> Lattice:
        """Remove the edit at ``axis`` and rebuild.

        Raises:
            LookupMiss: if there is no edit at ``axis``.
        """
        with self._lock:
            edits = self._state.edits
            if axis not in edits:
                raise LookupMiss(axis_coord(*axis), "edits")
            return self._replace_edits(edits.without_edit(axis))

    def replace_edits(self, edits) -> Lattice:
        """Swap the whole edit set (e.g. when loading a preset) and rebuild."""
        with self._lock:
            return self._replace_edits(as_edit_set(edits))

    def _replace_edits(self, edits: EditSet) -> Lattice:
        self._check_edits(edits)
        resolution = self._state.resolution
        levels = self._levels_for(resolution, edits, {})
        self._publish(resolution, edits, levels)
        logger.info("Rebuilt lattice with %d edit(s) at resolution %d", len(edits), resolution)
        return levels[resolution]

    # ------------------ HELPERS ------------------
    def _check_edits(self, edits: EditSet) -> None:
        domain = self._config.domain
        for edit in edits:
            if not domain.contains(edit.axis):
                raise ValueError(
                    f"Edit at {edit.axis!r} lies outside [{domain.minimum}, {domain.maximum}]"
                )

    def _levels_for(
        self,
        level: int,
        edits: EditSet,
        existing: Mapping[int, Lattice],
    ) -> Dict[int, Lattice]:
        """Existing levels plus whatever is missing up to ``level``."""
        levels = dict(existing)
        if level in levels:
            return levels
        below = [lv for lv in levels if lv < level]
        previous = levels[max(below)] if below else None
        for lattice in build_levels(level, edits, self._config.domain, previous=previous):
            levels[lattice.level] = lattice
        return levels

    def _publish(self, resolution: int, edits: EditSet, levels: Dict[int, Lattice]) -> None:
        self._state = EngineState(resolution, edits, MappingProxyType(levels))

    # ------------------ EXCHANGE FORMAT ------------------
    def to_records(self) -> Dict[str, Any]:
        """``{"colorSpace": [...], "editPoints": [...]}`` with ``{"pcs", "color"}`` entries."""
        state = self._state
        return {
            "colorSpace": state.lattice.to_records(),
            "editPoints": [edit.to_record() for edit in state.edits],
        }

    @classmethod
    def from_records(
        cls,
        records: Mapping[str, Any],
        resolution: int,
        config: LatticeConfig = DEFAULT_CONFIG,
    ) -> "ColorSpaceEngine":
        """
        Restore a session from exchanged records.

        ``colorSpace`` is taken as the lattice of ``resolution`` as-is. When it
        is missing or empty, the lattice is rebuilt from ``editPoints``.

        Raises:
            ValueError: if the lattice records do not form the full grid of
                ``resolution``.
        """
        resolution = resolve_level(resolution, config.max_resolution)
        edits = EditSet(EditPoint.from_record(r) for r in records.get("editPoints", ()))
        points = [EditPoint.from_record(r) for r in records.get("colorSpace", ())]
        if not points:
            logger.info("No lattice records, rebuilding from %d edit(s)", len(edits))
            return cls(config, resolution, edits)

        domain = config.domain
        lattice = Lattice.from_points(points, level=resolution, domain=domain)
        expected = grid_coords(resolution, domain)
        if len(lattice) != expected.shape[0] or any(
            tuple(row) not in lattice for row in expected.tolist()
        ):
            raise ValueError(
                f"Lattice records ({len(lattice)} points) do not cover the level {resolution} grid "
                f"({expected.shape[0]} points)"
            )
        logger.info("Restored level %d lattice with %d edit(s)", resolution, len(edits))
        return cls(config, resolution, edits, lattice=lattice)
