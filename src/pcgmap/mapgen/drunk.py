# src/pcgmap/mapgen/drunk.py
# Drunk-agent carver: a random walker that marks every cell it stands on and,
# between excursions, may stamp a room or change heading with probabilities
# that climb after every miss.

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..config import DrunkParams
from ..grid import FILLED, GridMap
from ..rng import MapRandom

log = logging.getLogger(__name__)

# Heading codes, in the order a uniform draw picks them.
EAST, NORTH, WEST, SOUTH = 0, 1, 2, 3
DIRECTION_NAMES = ("east", "north", "west", "south")

# (drow, dcol) per heading
_DELTAS = (
    (0, 1),
    (-1, 0),
    (0, -1),
    (1, 0),
)


@dataclass(frozen=True)
class AgentState:
    row: int
    col: int
    # None -> draw a heading at the start of the next walk
    direction: Optional[int] = None

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def without_heading(self) -> "AgentState":
        return replace(self, direction=None)


def place_room(grid: GridMap, row: int, col: int, size_x: int, size_y: int) -> Tuple[int, int, int, int]:
    """
    Fill the rectangle centred on (row, col): columns col ± size_x//2, rows
    row ± size_y//2, clipped to the grid. Even sizes come out one cell wider
    than asked. Returns the clipped (row0, row1, col0, col1), inclusive.
    """
    r0 = max(0, row - size_y // 2)
    r1 = min(grid.height - 1, row + size_y // 2)
    c0 = max(0, col - size_x // 2)
    c1 = min(grid.width - 1, col + size_x // 2)
    for i in range(r0, r1 + 1):
        line = grid.rows[i]
        for j in range(c0, c1 + 1):
            line[j] = FILLED
    return (r0, r1, c0, c1)


def drunk_walk(
    grid: GridMap,
    params: DrunkParams,
    rng: MapRandom,
    agent: AgentState,
) -> Tuple[GridMap, AgentState]:
    """
    Run `params.excursions` excursions of `params.steps` steps on a copy of
    `grid` and return (new grid, final agent state).

    Each step marks the agent's cell, then tries to move one cell along the
    heading. A move that would leave the grid draws a new heading instead and
    the step is spent standing still. After each excursion come two draws in
    [0, 1): a room when the draw is <= the room probability, then a new heading
    when the draw is <= the turn probability. A hit resets that probability to
    its base value, a miss adds the increment (no upper cap).

    The cell the agent ends on is marked too, and the returned state carries
    the final heading so a follow-up walk continues in the same direction.
    """
    if not grid.in_bounds(agent.row, agent.col):
        raise ValueError(f"agent start {agent.pos} outside {grid.height}x{grid.width} grid")
    if agent.direction is not None and agent.direction not in (EAST, NORTH, WEST, SOUTH):
        raise ValueError(f"unknown heading {agent.direction!r}")

    out = grid.copy()
    h, w = out.height, out.width
    row, col = agent.row, agent.col
    heading = agent.direction if agent.direction is not None else rng.direction()
    p_room = params.prob_room
    p_turn = params.prob_turn

    log.debug("drunk: start=(%d, %d) heading=%s %s", row, col, DIRECTION_NAMES[heading], params)

    for n in range(params.excursions):
        for _ in range(params.steps):
            out.rows[row][col] = FILLED
            drow, dcol = _DELTAS[heading]
            nrow, ncol = row + drow, col + dcol
            if not (0 <= nrow < h and 0 <= ncol < w):
                heading = rng.direction()
                continue
            row, col = nrow, ncol

        if rng.uniform() <= p_room:
            box = place_room(out, row, col, params.room_size_x, params.room_size_y)
            log.debug("drunk: excursion %d room at (%d, %d) -> %s", n, row, col, box)
            p_room = params.prob_room
        else:
            p_room += params.prob_room_increase

        if rng.uniform() <= p_turn:
            heading = rng.direction()
            p_turn = params.prob_turn
        else:
            p_turn += params.prob_turn_increase

    out.rows[row][col] = FILLED
    log.debug("drunk: end=(%d, %d) filled=%d", row, col, out.count_filled())
    return out, AgentState(row, col, heading)
