# src/pcgmap/grid.py
# Binary tile grid shared by every generator. Cells are addressed (row, col)
# and hold 0 (empty) or 1 (filled). Out-of-range access is an error, never clamped.

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

EMPTY = 0
FILLED = 1
CELL_VALUES = (EMPTY, FILLED)


def _check_value(v: int) -> int:
    if v not in CELL_VALUES:
        raise ValueError(f"cell value must be 0 or 1, got {v!r}")
    return v


@dataclass(eq=False)
class GridMap:
    width: int
    height: int
    fill: int = EMPTY

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"grid dimensions must be >= 1, got {self.width}x{self.height}")
        _check_value(self.fill)
        self.rows: List[List[int]] = [[self.fill] * self.width for _ in range(self.height)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "GridMap":
        if not rows or not rows[0]:
            raise ValueError("rows must be a non-empty rectangle")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("every row must have the same number of columns")
        g = cls(width, len(rows))
        g.rows = [[_check_value(v) for v in r] for r in rows]
        return g

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def _check(self, row: int, col: int) -> None:
        # list indexing would silently wrap negatives
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.height}x{self.width} grid")

    def get(self, row: int, col: int) -> int:
        self._check(row, col)
        return self.rows[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        self._check(row, col)
        self.rows[row][col] = _check_value(value)

    def copy(self) -> "GridMap":
        g = GridMap(self.width, self.height)
        g.rows = [list(r) for r in self.rows]
        return g

    def as_matrix(self) -> List[List[int]]:
        return [list(r) for r in self.rows]

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        for i, r in enumerate(self.rows):
            for j, v in enumerate(r):
                yield i, j, v

    def count_filled(self) -> int:
        return sum(sum(r) for r in self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridMap):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and self.rows == other.rows

    def __repr__(self) -> str:
        return f"GridMap(width={self.width}, height={self.height}, filled={self.count_filled()})"
