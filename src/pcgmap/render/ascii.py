# src/pcgmap/render/ascii.py
# Console rendering: '.' for empty, '#' for filled, one space after each cell.

from ..grid import GridMap

HEADER = "--- Current Map ---"
FOOTER = "-------------------"


def format_rows(grid: GridMap, empty: str = ".", filled: str = "#") -> str:
    glyph = (empty, filled)
    return "\n".join("".join(glyph[v] + " " for v in row) for row in grid.rows)


def format_map(grid: GridMap, empty: str = ".", filled: str = "#") -> str:
    return f"{HEADER}\n{format_rows(grid, empty, filled)}\n{FOOTER}"
