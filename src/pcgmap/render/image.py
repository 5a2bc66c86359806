# src/pcgmap/render/image.py
# Pillow rendering of a grid: one solid square per cell.

from typing import Tuple

from PIL import Image, ImageDraw

from ..grid import GridMap

RGBA = Tuple[int, int, int, int]

EMPTY_COLOR: RGBA = (220, 220, 220, 255)
FILLED_COLOR: RGBA = (80, 80, 80, 255)


def grid_to_image(
    grid: GridMap,
    tile_size: int = 16,
    margin: int = 0,
    empty: RGBA = EMPTY_COLOR,
    filled: RGBA = FILLED_COLOR,
) -> Image.Image:
    if tile_size < 1:
        raise ValueError(f"tile_size must be >= 1, got {tile_size}")
    w = grid.width * tile_size + 2 * margin
    h = grid.height * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    for i, j, v in grid.cells():
        x0 = margin + j * tile_size
        y0 = margin + i * tile_size
        # rectangle() is inclusive of the far corner
        draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=filled if v else empty)
    return canvas
