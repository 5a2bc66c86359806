#!/usr/bin/env python3
# Render the stages of one seeded pipeline run to PNGs using Pillow.

import argparse
import logging
import os

from pcgmap.config import DEFAULT_RANGES, ParamRanges
from pcgmap.render.image import grid_to_image
from pcgmap.rng import MapRandom
from pcgmap.simulation import run_simulation


def save(grid, path, tile_size, margin):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    grid_to_image(grid, tile_size=tile_size, margin=margin).save(path)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, required=True, help="RNG seed")
    ap.add_argument("--rows", type=int, default=DEFAULT_RANGES.rows)
    ap.add_argument("--cols", type=int, default=DEFAULT_RANGES.cols)
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("--margin", type=int, default=0)
    ap.add_argument("--verbose", "-v", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        ranges = ParamRanges(rows=args.rows, cols=args.cols)
    except ValueError as e:
        raise SystemExit(str(e))

    res = run_simulation(MapRandom(args.seed), ranges)
    base = os.path.join(args.outdir, str(args.seed))
    save(res.initial, os.path.join(base, "initial.png"), args.tile, args.margin)
    for n, grid in enumerate(res.buffered_frames, 1):
        save(grid, os.path.join(base, f"buffered_{n:02d}.png"), args.tile, args.margin)
    for n, grid in enumerate(res.in_place_frames, 1):
        save(grid, os.path.join(base, f"in_place_{n:02d}.png"), args.tile, args.margin)
    save(res.drunk_map, os.path.join(base, "drunk.png"), args.tile, args.margin)
    print(f"Wrote PNGs to {base}")


if __name__ == "__main__":
    main()
