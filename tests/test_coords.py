import math
import itertools
import numpy as np

from chromalattice.coords import to_spatial, to_axis, np_to_spatial, np_to_axis
from chromalattice.types.coord_types import AxisCoord, SpatialCoord, axis_coord, spatial_coord
from chromalattice.config import DEFAULT_DOMAIN


def _is_positive_zero(value):
    return value == 0 and math.copysign(1.0, value) == 1.0


def test_axis_to_spatial_convention():
    assert to_spatial(AxisCoord(10.0, 20.0, 30.0)) == SpatialCoord(20.0, 10.0, -30.0)
    assert to_axis(SpatialCoord(20.0, 10.0, -30.0)) == AxisCoord(10.0, 20.0, 30.0)


def test_zero_maps_to_positive_zero():
    spatial = to_spatial(axis_coord(5, 5, 0))
    assert _is_positive_zero(spatial.z)

    axis = to_axis(SpatialCoord(0.0, -0.0, -0.0))
    assert all(_is_positive_zero(v) for v in axis)


def test_constructors_drop_negative_zero():
    assert _is_positive_zero(axis_coord(-0.0, 1, 2).p)
    assert _is_positive_zero(spatial_coord(1, 2, -0.0).z)
    assert isinstance(axis_coord(1, 2, 3).p, float)


def test_round_trip_is_exact_on_grid():
    samples = DEFAULT_DOMAIN.samples(3).tolist()
    for p, c, s in itertools.product(samples, repeat=3):
        coord = axis_coord(p, c, s)
        back = to_axis(to_spatial(coord))
        assert back == coord
        assert all(not math.copysign(1.0, v) < 0 for v in back if v == 0)
        spatial = to_spatial(coord)
        assert to_spatial(to_axis(spatial)) == spatial


def test_round_trip_off_grid_values():
    coord = axis_coord(-33.125, 0.1, 99.999)
    assert to_axis(to_spatial(coord)) == coord


def test_np_mapping_matches_scalar():
    rng = np.random.default_rng(7)
    coords = rng.uniform(-100, 100, size=(40, 3))
    coords[0] = (0.0, 0.0, 0.0)
    spatial = np_to_spatial(coords)
    for row, expected in zip(coords, spatial):
        assert tuple(expected) == tuple(to_spatial(AxisCoord(*row)))
    assert np.array_equal(np_to_axis(spatial), coords)


def test_np_mapping_has_no_negative_zero():
    spatial = np_to_spatial(np.zeros((2, 3)))
    assert not np.signbit(spatial).any()
    axis = np_to_axis(np.zeros((2, 3)))
    assert not np.signbit(axis).any()
