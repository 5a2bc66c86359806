# src/pcgmap/simulation.py
# End-to-end driver pipeline: sample parameters, seed a random map, smooth it
# with both automaton variants, then carve a fresh map with the drunk agent.
# Every intermediate grid is kept so callers can print or draw each stage.

import logging
from dataclasses import dataclass
from typing import List

from .config import DEFAULT_RANGES, CellularParams, DrunkParams, ParamRanges, sample_cellular, sample_drunk
from .grid import FILLED, GridMap
from .mapgen.cellular import iterate
from .mapgen.drunk import AgentState, drunk_walk
from .mapgen.noise import initialize_random_map
from .rng import MapRandom

log = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    initial: GridMap
    cellular: CellularParams
    iterations: int
    buffered_frames: List[GridMap]
    in_place_frames: List[GridMap]
    drunk: DrunkParams
    agent_start: AgentState
    agent_end: AgentState
    drunk_start_map: GridMap
    drunk_map: GridMap


def run_simulation(rng: MapRandom, ranges: ParamRanges = DEFAULT_RANGES) -> SimulationResult:
    """
    Draw order, all from `rng`: initial map, automaton params, agent start
    (row then col), walk params, then the walk itself. Same seed, same result.
    """
    rows, cols = ranges.rows, ranges.cols
    initial = initialize_random_map(cols, rows, rng)
    ca, iterations = sample_cellular(rng, ranges)
    log.info("cellular: R=%d U=%.3f iterations=%d", ca.radius, ca.threshold, iterations)

    buffered = list(iterate(initial, ca, iterations))
    in_place = CellularParams(ca.radius, ca.threshold, in_place=True)
    # in-place passes keep rewriting one grid; snapshot each
    in_place_frames = [g.copy() for g in iterate(initial, in_place, iterations)]

    start = AgentState(rng.bounded(0, rows - 1), rng.bounded(0, cols - 1))
    canvas = GridMap(cols, rows)
    canvas.set(start.row, start.col, FILLED)
    params = sample_drunk(rng, ranges)
    log.info("drunk: start=%s %s", start.pos, params)
    carved, end = drunk_walk(canvas, params, rng, start)

    return SimulationResult(
        initial=initial,
        cellular=ca,
        iterations=iterations,
        buffered_frames=buffered,
        in_place_frames=in_place_frames,
        drunk=params,
        agent_start=start,
        agent_end=end,
        drunk_start_map=canvas,
        drunk_map=carved,
    )
