# chromalattice/lattice/edits.py
"""Immutable collection of edit points."""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, Optional

from ..colors.rgb import ColorLike
from ..config import DEFAULT_DOMAIN, Domain
from ..types.coord_types import AxisCoord, SpatialCoord, axis_coord
from .points import EditPoint


class EditSet:
    """
    Ordered set of EditPoints keyed by axis coordinate.

    At most one edit exists per coordinate; a later edit at the same
    coordinate replaces the earlier one in place. Instances never change:
    ``with_edit`` and ``without_edit`` return new sets, so a reader holding
    a reference always sees one consistent edit state.
    """

    __slots__ = ("_by_axis", "_by_spatial")

    def __init__(self, edits: Iterable[EditPoint] = ()) -> None:
        by_axis: Dict[AxisCoord, EditPoint] = {}
        for edit in edits:
            if not isinstance(edit, EditPoint):
                edit = EditPoint.at(*edit)
            by_axis[edit.axis] = edit
        self._by_axis = by_axis
        self._by_spatial: Dict[SpatialCoord, EditPoint] = {
            e.spatial: e for e in by_axis.values()
        }

    def __len__(self) -> int:
        return len(self._by_axis)

    def __iter__(self) -> Iterator[EditPoint]:
        return iter(self._by_axis.values())

    def __contains__(self, axis) -> bool:
        return axis_coord(*axis) in self._by_axis

    def __eq__(self, other) -> bool:
        if not isinstance(other, EditSet):
            return NotImplemented
        return self._by_axis == other._by_axis

    def __repr__(self) -> str:
        return f"EditSet({list(self._by_axis.values())!r})"

    def get(self, axis) -> Optional[EditPoint]:
        return self._by_axis.get(axis_coord(*axis))

    def get_spatial(self, spatial: SpatialCoord) -> Optional[EditPoint]:
        return self._by_spatial.get(spatial)

    def with_edit(self, axis, color: ColorLike) -> "EditSet":
        edit = EditPoint.at(axis, color)
        return EditSet([*self._by_axis.values(), edit])

    def without_edit(self, axis) -> "EditSet":
        axis = axis_coord(*axis)
        return EditSet(e for e in self._by_axis.values() if e.axis != axis)

    def visible_at(self, level: int, domain: Domain = DEFAULT_DOMAIN) -> "EditSet":
        """Edits whose every component lies on the sampling step of ``level``."""
        return EditSet(e for e in self._by_axis.values() if domain.is_aligned(e.axis, level))


def as_edit_set(edits) -> EditSet:
    """Accept an EditSet, an iterable of EditPoints, or None."""
    if edits is None:
        return EditSet()
    if isinstance(edits, EditSet):
        return edits
    return EditSet(edits)
