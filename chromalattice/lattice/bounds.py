"""Per-axis enclosing sample pairs."""

from __future__ import annotations
from bisect import bisect_right
from typing import Sequence, Tuple

import numpy as np


def find_bounds(query: float, samples: Sequence[float]) -> Tuple[float, float]:
    """
    Find the tightest samples enclosing ``query`` on one axis.

    ``lower`` is the greatest sample <= query and ``upper`` the smallest
    sample > query. With nothing on a side, the extreme sample on that side
    is used. A query equal to the top sample returns the top two samples,
    so the pair is distinct at the upper edge.

    The pair is degenerate (``lower == upper``) only when the query lies
    outside the sampled range, or there is a single sample.

    Args:
        query: Coordinate along the axis.
        samples: Sorted distinct sample values, at least one.

    Returns:
        ``(lower, upper)``
    """
    if len(samples) == 0:
        raise ValueError("find_bounds needs at least one sample")
    lower, upper = samples[0], samples[-1]
    if len(samples) > 1 and query == upper:
        return samples[-2], upper

    i = bisect_right(samples, query)
    if i > 0:
        lower = samples[i - 1]
    if i < len(samples):
        upper = samples[i]
    return lower, upper


def np_find_bound_indices(queries: np.ndarray, samples: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Vectorized ``find_bounds`` returning sample indices instead of values.

    Args:
        queries: 1D array of coordinates along one axis.
        samples: 1D sorted distinct sample values.

    Returns:
        ``(lower_idx, upper_idx)`` integer arrays shaped like ``queries``.
    """
    n = samples.shape[0]
    if n == 0:
        raise ValueError("np_find_bound_indices needs at least one sample")
    i = np.searchsorted(samples, queries, side="right")
    lower = np.where(i > 0, i - 1, 0)
    upper = np.where(i < n, i, n - 1)
    if n > 1:
        at_top = queries == samples[-1]
        lower = np.where(at_top, n - 2, lower)
        upper = np.where(at_top, n - 1, upper)
    return lower, upper
