"""Planar slice rendering with Pillow."""

from __future__ import annotations

import numpy as np

from .engine import ColorSpaceEngine
from .types.coord_types import AXIS_NAMES


def slice_coords(engine: ColorSpaceEngine, axis: str = "s", value: float = 0.0, size: int = 256) -> np.ndarray:
    """``(size, size, 3)`` axis coordinates covering the plane ``axis == value``.

    Rows run from the maximum down to the minimum of the first free axis,
    columns from the minimum to the maximum of the second.
    """
    if axis not in AXIS_NAMES:
        raise ValueError(f"axis must be one of {AXIS_NAMES}, got {axis!r}")
    if size < 2:
        raise ValueError(f"size must be >= 2, got {size}")
    domain = engine.config.domain
    fixed = AXIS_NAMES.index(axis)
    free = [k for k in range(3) if k != fixed]

    values = np.linspace(domain.minimum, domain.maximum, size)
    rows, cols = np.meshgrid(values[::-1], values, indexing="ij")
    coords = np.empty((size, size, 3), dtype=np.float64)
    coords[..., fixed] = value
    coords[..., free[0]] = rows
    coords[..., free[1]] = cols
    return coords


def render_slice(engine: ColorSpaceEngine, axis: str = "s", value: float = 0.0, size: int = 256, output_path=None):
    """Render a planar slice of the color space to a Pillow image."""
    from PIL import Image

    coords = slice_coords(engine, axis, value, size)
    colors = engine.query_colors(coords.reshape(-1, 3)).reshape(size, size, 3)
    img = Image.fromarray(np.ascontiguousarray(colors, dtype=np.uint8))
    if output_path:
        img.save(output_path)
    return img


def example_axis_ends(output_path=None, resolution: int = 3):
    """Red/cyan on p, green/magenta on c, blue/yellow on s, sliced through the balance point."""
    engine = ColorSpaceEngine(resolution=resolution)
    engine.replace_edits([
        ((100, 0, 0), (255, 0, 0)),
        ((-100, 0, 0), (0, 255, 255)),
        ((0, 100, 0), (0, 255, 0)),
        ((0, -100, 0), (255, 0, 255)),
        ((0, 0, 100), (0, 0, 255)),
        ((0, 0, -100), (255, 255, 0)),
    ])
    return render_slice(engine, axis="s", value=0.0, output_path=output_path)
