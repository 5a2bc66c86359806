# src/pcgmap/mapgen/noise.py
# Random seeding for the automaton: every cell an independent fair coin.

from ..grid import GridMap
from ..rng import MapRandom


def initialize_random_map(width: int, height: int, rng: MapRandom) -> GridMap:
    """Return a width×height grid filled row-major with independent 0/1 draws."""
    grid = GridMap(width, height)
    for row in grid.rows:
        for j in range(width):
            row[j] = rng.bit()
    return grid
