"""
Configuration
=============
Domain bounds and engine limits.

The color space is a cube spanning ``[minimum, maximum]`` on each of its three
axes. Level ``r`` samples each axis with step ``length / 2**r``.

Exports:
    Domain: bounds of the cube and the grid rules derived from them.
    LatticeConfig: engine-level settings (domain, resolution cap, fill grid).
    DEFAULT_DOMAIN, DEFAULT_CONFIG: the editor's defaults ([-100, 100], level <= 5).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Optional

import numpy as np

from .errors import InvalidLevel


@dataclass(frozen=True)
class Domain:
    minimum: float = -100.0
    maximum: float = 100.0

    def __post_init__(self) -> None:
        if not self.maximum > self.minimum:
            raise ValueError(
                f"Domain maximum must exceed minimum, got [{self.minimum}, {self.maximum}]"
            )

    @property
    def length(self) -> float:
        return self.maximum - self.minimum

    @property
    def midpoint(self) -> float:
        return (self.minimum + self.maximum) / 2

    def step(self, level: int) -> float:
        """Sample spacing along one axis at ``level``."""
        return self.length / 2 ** level

    def samples(self, level: int) -> np.ndarray:
        """Sample values along one axis, minimum to maximum inclusive.

        Sample ``k`` is ``minimum + k * step``, except that both ends and the
        midpoint are pinned to the exact domain values. Level ``r + 1``
        therefore repeats every sample of level ``r`` bit for bit.
        """
        count = 2 ** level
        values = self.minimum + self.step(level) * np.arange(count + 1, dtype=np.float64)
        values[0] = self.minimum
        values[count // 2] = self.midpoint
        values[count] = self.maximum
        return values

    def is_major(self, value: float) -> bool:
        """True for the three level-1 values: minimum, midpoint, maximum."""
        return value == self.minimum or value == self.midpoint or value == self.maximum

    def is_aligned(self, coord: Iterable[float], level: int) -> bool:
        """True if every component is exactly one of the level's samples."""
        samples = self.samples(level)
        step = self.step(level)
        for v in coord:
            k = int(round((v - self.minimum) / step))
            if not 0 <= k < samples.shape[0] or samples[k] != v:
                return False
        return True

    def contains(self, coord: Iterable[float]) -> bool:
        return all(self.minimum <= v <= self.maximum for v in coord)


@dataclass(frozen=True)
class LatticeConfig:
    domain: Domain = field(default_factory=Domain)
    max_resolution: int = 5
    # fill grid cells per axis at fill resolution 1
    fill_divisions: int = 10

    def __post_init__(self) -> None:
        resolve_level(self.max_resolution)
        if self.fill_divisions < 1:
            raise ValueError(f"fill_divisions must be >= 1, got {self.fill_divisions}")

    def fill_step(self, fill_resolution: int) -> float:
        resolve_level(fill_resolution)
        return self.domain.length / (self.fill_divisions * 2 ** (fill_resolution - 1))


def resolve_level(level, max_resolution: Optional[int] = None) -> int:
    """Validate a resolution level.

    Raises:
        InvalidLevel: if ``level`` is not an integer >= 1 (or exceeds ``max_resolution``).
    """
    if isinstance(level, bool) or not isinstance(level, (int, np.integer)):
        raise InvalidLevel(level, max_resolution)
    if level < 1 or (max_resolution is not None and level > max_resolution):
        raise InvalidLevel(level, max_resolution)
    return int(level)


DEFAULT_DOMAIN = Domain()
DEFAULT_CONFIG = LatticeConfig(domain=DEFAULT_DOMAIN)

