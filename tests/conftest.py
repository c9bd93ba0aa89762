import pytest

from chromalattice import ColorSpaceEngine

AXIS_END_EDITS = [
    ((100, 0, 0), (255, 0, 0)),
    ((-100, 0, 0), (0, 255, 255)),
    ((0, 100, 0), (0, 255, 0)),
    ((0, -100, 0), (255, 0, 255)),
    ((0, 0, 100), (0, 0, 255)),
    ((0, 0, -100), (255, 255, 0)),
]


@pytest.fixture
def axis_end_edits():
    return list(AXIS_END_EDITS)


@pytest.fixture
def engine(axis_end_edits):
    """Level 2 session with a color on every axis end."""
    return ColorSpaceEngine(resolution=2, edits=axis_end_edits)
