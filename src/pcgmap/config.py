# src/pcgmap/config.py
# Parameter sets for the two generators, plus the ranges the driver samples
# them from. All frozen; validation happens at construction.

from dataclasses import dataclass
from typing import Tuple

from .rng import MapRandom


@dataclass(frozen=True)
class CellularParams:
    radius: int
    threshold: float
    in_place: bool = False

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"radius must be >= 0, got {self.radius}")


@dataclass(frozen=True)
class DrunkParams:
    excursions: int          # J
    steps: int               # I, steps per excursion
    room_size_x: int
    room_size_y: int
    prob_room: float
    prob_room_increase: float
    prob_turn: float
    prob_turn_increase: float

    def __post_init__(self) -> None:
        if self.excursions < 0 or self.steps < 0:
            raise ValueError(
                f"excursions and steps must be >= 0, got {self.excursions}, {self.steps}"
            )
        if self.room_size_x < 1 or self.room_size_y < 1:
            raise ValueError(
                f"room sizes must be >= 1, got {self.room_size_x}x{self.room_size_y}"
            )


IntRange = Tuple[int, int]          # inclusive
FloatRange = Tuple[float, float]    # half-open


@dataclass(frozen=True)
class ParamRanges:
    rows: int = 20
    cols: int = 40
    radius: IntRange = (1, 2)
    threshold_r1: FloatRange = (2.0, 5.0)
    threshold_wide: FloatRange = (4.0, 8.0)   # any radius other than 1
    iterations: IntRange = (2, 5)
    excursions: IntRange = (10, 30)
    steps: IntRange = (3, 7)
    room_size_x: IntRange = (3, 7)
    room_size_y: IntRange = (2, 5)
    base_prob: FloatRange = (0.2, 0.6)
    prob_increase: FloatRange = (0.05, 0.2)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"map size must be >= 1, got {self.rows}x{self.cols}")
        for name in ("radius", "iterations", "excursions", "steps", "room_size_x", "room_size_y"):
            lo, hi = getattr(self, name)
            if lo > hi:
                raise ValueError(f"{name}: empty range ({lo}, {hi})")


DEFAULT_RANGES = ParamRanges()


def sample_cellular(rng: MapRandom, ranges: ParamRanges = DEFAULT_RANGES) -> Tuple[CellularParams, int]:
    """Draw (params, iterations) for the automaton. Draw order is radius, threshold, iterations."""
    radius = rng.bounded(*ranges.radius)
    lo, hi = ranges.threshold_r1 if radius == 1 else ranges.threshold_wide
    threshold = rng.uniform(lo, hi)
    iterations = rng.bounded(*ranges.iterations)
    return CellularParams(radius=radius, threshold=threshold), iterations


def sample_drunk(rng: MapRandom, ranges: ParamRanges = DEFAULT_RANGES) -> DrunkParams:
    return DrunkParams(
        excursions=rng.bounded(*ranges.excursions),
        steps=rng.bounded(*ranges.steps),
        room_size_x=rng.bounded(*ranges.room_size_x),
        room_size_y=rng.bounded(*ranges.room_size_y),
        prob_room=rng.uniform(*ranges.base_prob),
        prob_room_increase=rng.uniform(*ranges.prob_increase),
        prob_turn=rng.uniform(*ranges.base_prob),
        prob_turn_increase=rng.uniform(*ranges.prob_increase),
    )
