"""Exception types raised by the lattice engine."""

from __future__ import annotations
from typing import Any


class LatticeError(Exception):
    """Base class for lattice engine errors."""


class LookupMiss(LatticeError, LookupError):
    """A point expected in the lattice or edit set is absent.

    Raised when a cell corner or an explicitly addressed coordinate has no
    matching point. This points at an incomplete lattice, so it is never
    replaced by a default color.
    """

    def __init__(self, coord: Any, where: str = "lattice") -> None:
        self.coord = coord
        self.where = where
        super().__init__(f"No point at {coord!r} in {where}")


class InvalidLevel(LatticeError, ValueError):
    """A resolution level outside the accepted range was requested."""

    def __init__(self, level: Any, maximum: int | None = None) -> None:
        self.level = level
        self.maximum = maximum
        if maximum is None:
            msg = f"Resolution level must be an integer >= 1, got {level!r}"
        else:
            msg = f"Resolution level must be an integer in [1, {maximum}], got {level!r}"
        super().__init__(msg)
