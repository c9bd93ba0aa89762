import numpy as np
import pytest

from chromalattice.lattice.bounds import find_bounds, np_find_bound_indices

SAMPLES = [-100.0, -50.0, 0.0, 50.0, 100.0]


@pytest.mark.parametrize(
    "query, expected",
    [
        (25.0, (0.0, 50.0)),
        (0.0, (0.0, 50.0)),
        (-100.0, (-100.0, -50.0)),
        (-99.0, (-100.0, -50.0)),
        (99.0, (50.0, 100.0)),
        # top edge keeps a distinct pair
        (100.0, (50.0, 100.0)),
        # outside the sampled range the pair collapses
        (-120.0, (-100.0, -100.0)),
        (130.0, (100.0, 100.0)),
    ],
)
def test_find_bounds(query, expected):
    assert find_bounds(query, SAMPLES) == expected


def test_find_bounds_single_sample():
    assert find_bounds(5.0, [5.0]) == (5.0, 5.0)
    assert find_bounds(-1.0, [5.0]) == (5.0, 5.0)


def test_find_bounds_two_samples_top_edge():
    assert find_bounds(1.0, [0.0, 1.0]) == (0.0, 1.0)


def test_find_bounds_empty_raises():
    with pytest.raises(ValueError):
        find_bounds(0.0, [])


def test_np_find_bound_indices_matches_scalar():
    samples = np.array(SAMPLES)
    queries = np.array([-130.0, -100.0, -75.0, -50.0, 0.0, 12.5, 49.9, 50.0, 100.0, 101.0])
    lower, upper = np_find_bound_indices(queries, samples)
    for q, lo, hi in zip(queries, lower, upper):
        assert (samples[lo], samples[hi]) == find_bounds(float(q), SAMPLES)


def test_np_find_bound_indices_single_sample():
    lower, upper = np_find_bound_indices(np.array([-1.0, 0.0, 3.0]), np.array([0.0]))
    assert lower.tolist() == [0, 0, 0]
    assert upper.tolist() == [0, 0, 0]
