from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LCG:
    """Linear congruential generator threaded through the game state.

    Every call returns the produced value together with the advanced
    generator; the instance itself never changes.
    """

    seed: int

    A = 1103515245
    C = 12345
    M = 0x80000000  # 2**31

    def hash(self) -> Tuple[int, "LCG"]:
        new_seed = (self.A * self.seed + self.C) % self.M
        return new_seed, LCG(new_seed)

    def scale(self) -> Tuple[float, "LCG"]:
        """Return a value in [-1, 1) and the advanced generator."""
        h, nxt = self.hash()
        return 2.0 * h / self.M - 1.0, nxt
