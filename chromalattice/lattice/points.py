# chromalattice/lattice/points.py
"""Point records: generated lattice samples and user-authored edits."""

from __future__ import annotations
from typing import Any, Dict, NamedTuple

from ..colors.rgb import ColorRGB, ColorLike
from ..coords import to_spatial
from ..types.coord_types import AxisCoord, SpatialCoord, axis_coord


class LatticePoint(NamedTuple):
    axis: AxisCoord
    spatial: SpatialCoord
    color: ColorRGB

    @classmethod
    def at(cls, axis: AxisCoord, color: ColorLike) -> "LatticePoint":
        axis = axis_coord(*axis)
        return cls(axis, to_spatial(axis), ColorRGB(color))

    def to_record(self) -> Dict[str, Any]:
        return {"pcs": list(self.axis), "color": list(self.color)}


class EditPoint(NamedTuple):
    """A color the user explicitly set at an exact axis coordinate."""
    axis: AxisCoord
    color: ColorRGB

    @classmethod
    def at(cls, axis, color: ColorLike) -> "EditPoint":
        return cls(axis_coord(*axis), ColorRGB(color))

    @property
    def spatial(self) -> SpatialCoord:
        return to_spatial(self.axis)

    def to_record(self) -> Dict[str, Any]:
        return {"pcs": list(self.axis), "color": list(self.color)}

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "EditPoint":
        try:
            pcs = record["pcs"]
            color = record["color"]
        except KeyError as e:
            raise KeyError(f"Point record {record!r} is missing field {e}") from e
        if len(pcs) != 3:
            raise ValueError(f"Point record {record!r} must have 3 coordinates")
        return cls.at(pcs, color)
