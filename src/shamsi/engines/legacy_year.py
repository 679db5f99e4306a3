"""
shamsi.engines.legacy_year
--------------------------
Year layer of the legacy converter.

Forward (Persian -> days):   (Y - 1) * 365 + floor((Y - 1) / 33)
Inverse (days -> Persian):   Y = year_base + floor(days / mean_year),
                             doy = days mod 365

The two directions are independent approximations and do not invert each
other; labels near year edges (and in general the year number itself) drift.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .leap import CycleLeapRule


@dataclass(frozen=True)
class LegacyYearParams:
    leap_rule: CycleLeapRule
    mean_year: float = 365.2422
    year_base: int = 621
    leap_day_cycle: int = 33


class LegacyYearEngine:
    def __init__(self, params: LegacyYearParams):
        self.p = params

    @property
    def leap_rule(self) -> CycleLeapRule:
        return self.p.leap_rule

    def days_before_year(self, year: int) -> int:
        return (year - 1) * 365 + (year - 1) // self.p.leap_day_cycle

    def year_from_days(self, days: int) -> Tuple[int, int]:
        year = self.p.year_base + math.floor(days / self.p.mean_year)
        return year, days % 365
