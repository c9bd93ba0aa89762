"""Basic chromalattice usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

from chromalattice import ColorSpaceEngine, setup_logging
from chromalattice.examples import example_axis_ends


def demonstrate_edits() -> None:
    # Color the six axis ends and read back interpolated colors.
    engine = ColorSpaceEngine(resolution=2)
    engine.replace_edits([
        ((100, 0, 0), (255, 0, 0)),
        ((-100, 0, 0), (0, 255, 255)),
        ((0, 100, 0), (0, 255, 0)),
        ((0, -100, 0), (255, 0, 255)),
    ])
    print("Balance point:", engine.query_color((0, 0, 0)))
    print("Between p+ and c+:", engine.query_color((50, 50, 0)))

    region = engine.region((30, -20, 10))
    print("Cell corners:", [tuple(corner.axis) for corner in region.corners])


def demonstrate_resolution() -> None:
    # Finer levels reuse the coarser lattices already built.
    engine = ColorSpaceEngine(edits=[((25, 0, 0), (255, 255, 255))])
    for level in (1, 2, 3):
        engine.set_resolution(level)
        print(f"Level {level}: {len(engine.lattice)} points,"
              f" (25, 0, 0) visible: {engine.is_visible((25, 0, 0))}")

    coords, colors = engine.fill_grid(1)
    print("Fill grid:", coords.shape, colors.shape)


def demonstrate_records() -> None:
    engine = ColorSpaceEngine(resolution=2, edits=[((0, 0, 100), (0, 0, 255))])
    records = engine.to_records()
    restored = ColorSpaceEngine.from_records(records, resolution=2)
    print("Restored edits:", list(restored.edits))


if __name__ == "__main__":
    setup_logging(logging.INFO)
    demonstrate_edits()
    demonstrate_resolution()
    demonstrate_records()
    example_axis_ends("axis_ends.png")
    print("Wrote axis_ends.png")
