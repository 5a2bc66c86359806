#!/usr/bin/env python3
# Console driver: runs the full pipeline and prints every stage as text.

import argparse
import logging

from pcgmap.config import DEFAULT_RANGES, ParamRanges
from pcgmap.render.ascii import format_map
from pcgmap.rng import MapRandom
from pcgmap.simulation import run_simulation


def print_map(grid):
    print(format_map(grid))


def main():
    ap = argparse.ArgumentParser(description="Cellular automata and drunk agent simulation")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed (omit for a fresh run)")
    ap.add_argument("--rows", type=int, default=DEFAULT_RANGES.rows)
    ap.add_argument("--cols", type=int, default=DEFAULT_RANGES.cols)
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)-5s:%(name)s: %(message)s",
    )
    try:
        ranges = ParamRanges(rows=args.rows, cols=args.cols)
    except ValueError as e:
        raise SystemExit(str(e))

    rng = MapRandom(args.seed)
    res = run_simulation(rng, ranges)
    ca = res.cellular

    print("--- CELLULAR AUTOMATA AND DRUNK AGENT SIMULATION ---")
    if args.seed is not None:
        print(f"Seed: {args.seed}")

    print("\nCellular Automata Simulation (With Second Grid):")
    print("Initial random map state:")
    print_map(res.initial)
    print(f"Parameters: R={ca.radius}, U={ca.threshold:.4g}, Iterations={res.iterations}")
    for n, grid in enumerate(res.buffered_frames, 1):
        print(f"\nCellular Automata (Second Grid) Iteration {n}:")
        print_map(grid)

    print("\nCellular Automata Simulation (In-Place):")
    print("Initial random map state (same as above):")
    print_map(res.initial)
    print(f"Parameters: R={ca.radius}, U={ca.threshold:.4g}, Iterations={res.iterations}")
    for n, grid in enumerate(res.in_place_frames, 1):
        print(f"\nCellular Automata (In-Place) Iteration {n}:")
        print_map(grid)

    d = res.drunk
    print("\nDrunk Agent Simulation:")
    print(f"Initial empty map with agent at ({res.agent_start.row}, {res.agent_start.col}):")
    print_map(res.drunk_start_map)
    print(
        f"Parameters: J={d.excursions}, I={d.steps}, RoomSizeX={d.room_size_x}, "
        f"RoomSizeY={d.room_size_y}, ProbGenerateRoom={d.prob_room:.4g}, "
        f"ProbIncreaseRoom={d.prob_room_increase:.4g}, ProbChangeDirection={d.prob_turn:.4g}, "
        f"ProbIncreaseChange={d.prob_turn_increase:.4g}"
    )
    print("\nFinal Drunk Agent map:")
    print_map(res.drunk_map)
    print(f"Agent finished at ({res.agent_end.row}, {res.agent_end.col})")
    print("\n--- Simulation Completed ---")


if __name__ == "__main__":
    main()
