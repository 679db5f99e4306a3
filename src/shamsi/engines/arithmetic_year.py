"""
shamsi.engines.arithmetic_year
------------------------------
Exact year layer of the 33-year arithmetic calendar.

Every year has 365 days plus one for each leap year; the year start is the
running total of those lengths since the epoch year, so forward and inverse
lookups agree for every integer day count.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .leap import CycleLeapRule


@dataclass(frozen=True)
class ArithmeticYearParams:
    leap_rule: CycleLeapRule
    epoch_year: int  # Persian year whose first day carries day count 0

    def __post_init__(self) -> None:
        if self.leap_rule.epoch_year != self.epoch_year:
            raise ValueError("leap_rule.epoch_year must match epoch_year")

    @property
    def cycle_days(self) -> int:
        return 365 * self.leap_rule.cycle + len(self.leap_rule.residues)


class ArithmeticYearEngine:
    def __init__(self, params: ArithmeticYearParams):
        self.p = params

    @property
    def leap_rule(self) -> CycleLeapRule:
        return self.p.leap_rule

    def days_before_year(self, year: int) -> int:
        return 365 * (year - self.p.epoch_year) + self.p.leap_rule.leaps_before(year)

    def year_from_days(self, days: int) -> Tuple[int, int]:
        cycle = self.p.leap_rule.cycle
        # Mean-year estimate, then settle on the year whose span covers `days`.
        year = self.p.epoch_year + (cycle * days) // self.p.cycle_days
        while self.days_before_year(year + 1) <= days:
            year += 1
        while self.days_before_year(year) > days:
            year -= 1
        return year, days - self.days_before_year(year)
