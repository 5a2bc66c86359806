# src/pcgmap/rng.py
# Explicit, caller-owned random source. Every generator that needs randomness
# takes one of these; nothing in the package touches the global `random` state.

import random
from dataclasses import dataclass, field
from typing import Optional

DIRECTION_COUNT = 4


@dataclass
class MapRandom:
    seed: Optional[int] = None
    _gen: random.Random = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # seed=None pulls from OS entropy; pass an int for reproducible maps
        self._gen = random.Random(self.seed)

    def bit(self) -> int:
        """Uniform 0/1."""
        return self._gen.randint(0, 1)

    def uniform(self, lo: float = 0.0, hi: float = 1.0) -> float:
        """Uniform real in [lo, hi)."""
        return lo + (hi - lo) * self._gen.random()

    def bounded(self, lo: int, hi: int) -> int:
        """Uniform int in [lo, hi], both ends inclusive."""
        assert lo <= hi
        return self._gen.randint(lo, hi)

    def direction(self) -> int:
        return self._gen.randrange(DIRECTION_COUNT)

