"""Overlay edit points onto a generated lattice."""

from __future__ import annotations
import logging
from typing import Optional

from ..config import resolve_level
from .edits import as_edit_set
from .lattice import Lattice

logger = logging.getLogger(__name__)


def merge_edits(lattice: Lattice, edits, level: Optional[int] = None) -> Lattice:
    """
    Return ``lattice`` with the colors of visible edits written over matching points.

    An edit is visible at ``level`` when each of its components lies on the
    level's sampling step. Visible edits recolor the point with the same axis
    coordinate; edits without such a point are skipped. Points are never added
    or removed, and merging the same edits twice changes nothing further.

    Args:
        lattice: Source snapshot; left untouched.
        edits: EditSet or iterable of EditPoints.
        level: Resolution used for the visibility test. Defaults to ``lattice.level``.

    Returns:
        A new Lattice (or ``lattice`` itself when no edit applies).

    Raises:
        ValueError: if ``level`` is omitted and the lattice has no level.
        InvalidLevel: if ``level`` is not a valid resolution level.
    """
    if level is None:
        if lattice.level is None:
            raise ValueError(
                f"{lattice!r} has no resolution level; pass level to merge_edits"
            )
        level = lattice.level
    level = resolve_level(level)
    domain = lattice.domain

    updates = {}
    hidden = 0
    for edit in as_edit_set(edits):
        if not domain.is_aligned(edit.axis, level):
            hidden += 1
            continue
        if edit.axis in lattice:
            updates[edit.axis] = edit.color
    logger.debug(
        "Merged %d edit(s) into level %d lattice (%d not visible)", len(updates), level, hidden
    )
    return lattice.with_colors(updates)
