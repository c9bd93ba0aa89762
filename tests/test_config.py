import numpy as np
import pytest

from chromalattice.config import Domain, LatticeConfig, DEFAULT_DOMAIN, resolve_level
from chromalattice.errors import InvalidLevel


def test_default_domain():
    assert DEFAULT_DOMAIN.length == 200.0
    assert DEFAULT_DOMAIN.midpoint == 0.0
    assert DEFAULT_DOMAIN.step(1) == 100.0
    assert DEFAULT_DOMAIN.step(3) == 25.0


def test_samples_are_inclusive_arithmetic_sequence():
    assert DEFAULT_DOMAIN.samples(1).tolist() == [-100.0, 0.0, 100.0]
    assert DEFAULT_DOMAIN.samples(2).tolist() == [-100.0, -50.0, 0.0, 50.0, 100.0]
    samples = DEFAULT_DOMAIN.samples(5)
    assert samples.shape == (33,)
    assert np.allclose(np.diff(samples), 6.25)
    assert samples[0] == -100.0 and samples[-1] == 100.0


def test_is_aligned():
    assert DEFAULT_DOMAIN.is_aligned((50.0, 0.0, -50.0), 2)
    assert not DEFAULT_DOMAIN.is_aligned((25.0, 0.0, 0.0), 2)
    assert DEFAULT_DOMAIN.is_aligned((25.0, 0.0, 0.0), 3)
    assert not DEFAULT_DOMAIN.is_aligned((50.0, 0.0, 0.0), 1)


def test_is_major_and_contains():
    assert DEFAULT_DOMAIN.is_major(-100.0)
    assert DEFAULT_DOMAIN.is_major(0.0)
    assert not DEFAULT_DOMAIN.is_major(50.0)
    assert DEFAULT_DOMAIN.contains((100.0, -100.0, 0.0))
    assert not DEFAULT_DOMAIN.contains((100.5, 0.0, 0.0))


def test_offset_domain():
    domain = Domain(0.0, 8.0)
    assert domain.midpoint == 4.0
    assert domain.samples(2).tolist() == [0.0, 2.0, 4.0, 6.0, 8.0]
    assert domain.is_aligned((2.0, 6.0, 8.0), 2)


def test_invalid_domain():
    with pytest.raises(ValueError):
        Domain(1.0, 1.0)


@pytest.mark.parametrize("level", [0, -1, 1.0, True, "2", None])
def test_resolve_level_rejects(level):
    with pytest.raises(InvalidLevel):
        resolve_level(level)


def test_resolve_level_maximum():
    assert resolve_level(5, 5) == 5
    assert resolve_level(np.int64(2)) == 2
    with pytest.raises(InvalidLevel) as info:
        resolve_level(6, 5)
    assert info.value.level == 6
    assert isinstance(info.value, ValueError)


def test_fill_step():
    config = LatticeConfig()
    assert config.fill_step(1) == 20.0
    assert config.fill_step(2) == 10.0
    assert config.fill_step(3) == 5.0


def test_lattice_config_validation():
    with pytest.raises(InvalidLevel):
        LatticeConfig(max_resolution=0)
    with pytest.raises(ValueError):
        LatticeConfig(fill_divisions=0)


def test_inexact_domain_samples_hit_bounds():
    domain = Domain(-1.0, 0.3)
    samples = domain.samples(1).tolist()
    assert samples == [-1.0, domain.midpoint, 0.3]
    for level in range(2, 6):
        assert domain.samples(level)[::2].tolist() == domain.samples(level - 1).tolist()


def test_inexact_domain_alignment():
    domain = Domain(-1.0, 0.3)
    assert domain.is_aligned((0.3, domain.midpoint, -1.0), 1)
    quarter = domain.samples(2)[1]
    assert not domain.is_aligned((quarter, 0.3, 0.3), 1)
    assert domain.is_aligned((quarter, 0.3, 0.3), 2)
    assert not domain.is_aligned((0.95, 0.3, 0.3), 1)
