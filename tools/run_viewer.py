#!/usr/bin/env python3
# Minimal pygame viewer for pipeline runs (view only, no editing).
# - LEFT/RIGHT: previous/next stage of the current run
# - UP/DOWN: seed +1 / -1 (reruns the pipeline)
# - W: walk the agent again from where it stopped, on top of the last carved map
# - ESC: quit
# 60 Hz fixed loop

import argparse
import logging

import pygame

from pcgmap.config import DEFAULT_RANGES, ParamRanges, sample_drunk
from pcgmap.mapgen.drunk import drunk_walk
from pcgmap.rng import MapRandom
from pcgmap.simulation import run_simulation

EMPTY_COLOR = (220, 220, 220)
FILLED_COLOR = (80, 80, 80)


def stages_for(res):
    out = [("initial", res.initial)]
    out += [(f"buffered {n}", g) for n, g in enumerate(res.buffered_frames, 1)]
    out += [(f"in-place {n}", g) for n, g in enumerate(res.in_place_frames, 1)]
    out += [("agent start", res.drunk_start_map), ("drunk agent", res.drunk_map)]
    return out


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--rows", type=int, default=DEFAULT_RANGES.rows)
    ap.add_argument("--cols", type=int, default=DEFAULT_RANGES.cols)
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("--verbose", "-v", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        ranges = ParamRanges(rows=args.rows, cols=args.cols)
    except ValueError as e:
        raise SystemExit(str(e))

    pygame.init()
    clock = pygame.time.Clock()
    W, H = ranges.cols * args.tile, ranges.rows * args.tile
    screen = pygame.display.set_mode((W, H))

    seed = args.seed

    def load():
        rng = MapRandom(seed)
        res = run_simulation(rng, ranges)
        return rng, res, stages_for(res)

    rng, res, stages = load()
    agent = res.agent_end
    walks = 0
    idx = 0
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RIGHT:
                    idx = min(len(stages) - 1, idx + 1)
                elif ev.key == pygame.K_LEFT:
                    idx = max(0, idx - 1)
                elif ev.key in (pygame.K_UP, pygame.K_DOWN):
                    seed += 1 if ev.key == pygame.K_UP else -1
                    rng, res, stages = load()
                    agent = res.agent_end
                    walks = 0
                    idx = 0
                elif ev.key == pygame.K_w:
                    carved, agent = drunk_walk(stages[-1][1], sample_drunk(rng, ranges), rng, agent)
                    walks += 1
                    stages.append((f"walk {walks}", carved))
                    idx = len(stages) - 1

        label, grid = stages[idx]
        screen.fill((0, 0, 0))
        for i, j, v in grid.cells():
            rect = pygame.Rect(j * args.tile, i * args.tile, args.tile, args.tile)
            pygame.draw.rect(screen, FILLED_COLOR if v else EMPTY_COLOR, rect)

        pygame.display.set_caption(
            f"pcgmap viewer - seed {seed}  [{idx + 1}/{len(stages)}] {label}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    main()
