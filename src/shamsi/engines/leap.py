from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CycleLeapRule:
    """
    Leap years recur on fixed residues of a year cycle:
        leap  <=>  (year - epoch_year) mod cycle  in  residues
    Works for any integer year, including non-positive ones.
    """
    cycle: int
    residues: Tuple[int, ...]
    epoch_year: int = 0

    def __post_init__(self) -> None:
        if self.cycle <= 0:
            raise ValueError("cycle must be positive")
        if any(not (0 <= r < self.cycle) for r in self.residues):
            raise ValueError("residues must lie in 0..cycle-1")

    def is_leap(self, year: int) -> bool:
        return (year - self.epoch_year) % self.cycle in self.residues

    def leaps_before(self, year: int) -> int:
        """Number of leap years in [epoch_year, year)."""
        k = year - self.epoch_year
        q, r = divmod(k, self.cycle)
        return q * len(self.residues) + sum(1 for x in self.residues if x < r)


# 33-year cycle: multiples of 33 plus 4, 8, ..., 28 after them.
CYCLE33_RESIDUES: Tuple[int, ...] = (0, 4, 8, 12, 16, 20, 24, 28)
