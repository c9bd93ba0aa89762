import numpy as np
import pytest

from chromalattice.errors import InvalidLevel
from chromalattice.lattice import EditPoint, EditSet, Lattice, build_lattice, merge_edits


def test_merge_overwrites_matching_points_only():
    lattice = build_lattice(2)
    edits = EditSet([EditPoint.at((50, 0, -50), (1, 2, 3))])
    merged = merge_edits(lattice, edits)
    assert merged.color_at((50, 0, -50)) == (1, 2, 3)
    assert len(merged) == len(lattice)
    changed = np.any(merged.colors != lattice.colors, axis=1)
    assert changed.sum() == 1


def test_source_lattice_is_untouched():
    lattice = build_lattice(1)
    merge_edits(lattice, [EditPoint.at((0, 0, 0), (9, 9, 9))])
    assert lattice.color_at((0, 0, 0)) == (0, 0, 0)


def test_hidden_edits_are_skipped():
    lattice = build_lattice(1)
    edits = EditSet([EditPoint.at((50, 0, 0), (255, 255, 255))])
    assert merge_edits(lattice, edits) is lattice


def test_visible_edit_without_point_is_skipped():
    # aligned at level 2 but the lattice only has level 1 points
    lattice = build_lattice(1)
    edits = EditSet([EditPoint.at((50, 0, 0), (255, 255, 255))])
    merged = merge_edits(lattice, edits, level=2)
    assert len(merged) == 27
    assert np.array_equal(merged.colors, lattice.colors)


def test_merge_is_idempotent():
    lattice = build_lattice(2)
    edits = EditSet([
        EditPoint.at((50, 50, 0), (10, 20, 30)),
        EditPoint.at((-100, 0, 100), (200, 100, 0)),
        EditPoint.at((25, 0, 0), (5, 5, 5)),
    ])
    once = merge_edits(lattice, edits)
    twice = merge_edits(once, edits)
    assert np.array_equal(once.colors, twice.colors)
    assert np.array_equal(once.axis_coords, twice.axis_coords)


def test_merge_validates_level():
    lattice = build_lattice(1)
    with pytest.raises(InvalidLevel):
        merge_edits(lattice, [], level=0)


def test_lattice_without_level_needs_explicit_level():
    lattice = Lattice.from_points(
        ((p, c, s), (0, 0, 0)) for p in (0, 100) for c in (0, 100) for s in (0, 100)
    )
    edits = [EditPoint.at((0, 0, 0), (7, 8, 9))]
    with pytest.raises(ValueError, match="no resolution level"):
        merge_edits(lattice, edits)
    merged = merge_edits(lattice, edits, level=1)
    assert merged.color_at((0, 0, 0)) == (7, 8, 9)
