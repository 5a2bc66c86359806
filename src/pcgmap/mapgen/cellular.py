# src/pcgmap/mapgen/cellular.py
# Neighbor-count threshold automaton, double-buffered and in-place.
#
# A cell becomes 1 when the sum over its (2R+1)×(2R+1) window, itself included,
# is strictly greater than the threshold. Samples that fall off the grid count
# as 0: edges are not wrapped, so border cells see fewer live neighbors.

import logging
from typing import Iterator, List

from ..config import CellularParams
from ..grid import GridMap

log = logging.getLogger(__name__)


def _check_radius(radius: int) -> None:
    if radius < 0:
        raise ValueError(f"radius must be >= 0, got {radius}")


def _window_sum(rows: List[List[int]], h: int, w: int, i: int, j: int, radius: int) -> int:
    # clip the window instead of testing every sample
    r0, r1 = max(0, i - radius), min(h - 1, i + radius)
    c0, c1 = max(0, j - radius), min(w - 1, j + radius)
    return sum(sum(rows[r][c0:c1 + 1]) for r in range(r0, r1 + 1))


def neighbor_sum(grid: GridMap, row: int, col: int, radius: int) -> int:
    """Sum of the window centred on (row, col); the centre must be on the grid."""
    _check_radius(radius)
    if not grid.in_bounds(row, col):
        raise IndexError(f"cell ({row}, {col}) outside {grid.height}x{grid.width} grid")
    return _window_sum(grid.rows, grid.height, grid.width, row, col, radius)


def step(grid: GridMap, radius: int, threshold: float) -> GridMap:
    """
    Double-buffered pass. Every count reads the state from before the pass;
    results go to a new grid and the input is left untouched.
    """
    _check_radius(radius)
    h, w = grid.height, grid.width
    src = grid.rows
    out = GridMap(w, h)
    for i in range(h):
        dst = out.rows[i]
        for j in range(w):
            dst[j] = 1 if _window_sum(src, h, w, i, j, radius) > threshold else 0
    return out


def step_in_place(grid: GridMap, radius: int, threshold: float) -> GridMap:
    """
    In-place pass in row-major order. Cells later in the pass read neighbors
    already rewritten earlier in the same pass, so the result generally differs
    from step(). Mutates and returns `grid`.
    """
    _check_radius(radius)
    h, w = grid.height, grid.width
    rows = grid.rows
    for i in range(h):
        for j in range(w):
            rows[i][j] = 1 if _window_sum(rows, h, w, i, j, radius) > threshold else 0
    return grid


def iterate(grid: GridMap, params: CellularParams, iterations: int) -> Iterator[GridMap]:
    """
    Yield the grid after each of `iterations` passes. The caller's grid is
    never modified; the in-place variant works on one private copy that it
    keeps rewriting, so consecutive yields are the same object.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")
    log.debug("cellular: R=%d U=%.3f iterations=%d in_place=%s",
              params.radius, params.threshold, iterations, params.in_place)
    cur = grid.copy() if params.in_place else grid
    for n in range(iterations):
        if params.in_place:
            cur = step_in_place(cur, params.radius, params.threshold)
        else:
            cur = step(cur, params.radius, params.threshold)
        log.debug("cellular: pass %d -> %d filled", n + 1, cur.count_filled())
        yield cur
