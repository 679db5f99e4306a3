"""
shamsi.engines.month_table
--------------------------
Month lengths and the day-of-year walk shared by every engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.errors import InvalidDayError, InvalidMonthError


def check_month(month: int) -> None:
    if not (1 <= month <= 12):
        raise InvalidMonthError(f"month must be in 1..12, got {month}")


@dataclass(frozen=True)
class MonthTable:
    common: Tuple[int, ...]
    leap: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.common) != 12 or len(self.leap) != 12:
            raise ValueError("month tables must have 12 entries")
        if any(n <= 0 for n in self.common + self.leap):
            raise ValueError("month lengths must be positive")

    def lengths(self, leap: bool) -> Tuple[int, ...]:
        return self.leap if leap else self.common

    def year_length(self, leap: bool) -> int:
        return sum(self.lengths(leap))

    def month_length(self, month: int, leap: bool) -> int:
        check_month(month)
        return self.lengths(leap)[month - 1]

    def day_of_year(self, month: int, day: int, leap: bool, *, wrap: bool = False) -> int:
        """
        Zero-based day-of-year. With wrap=True an out-of-range day rolls into
        the neighbouring months instead of raising.
        """
        table = self.lengths(leap)
        check_month(month)
        if not wrap and not (1 <= day <= table[month - 1]):
            raise InvalidDayError(f"day must be in 1..{table[month - 1]} for month {month}, got {day}")
        return sum(table[: month - 1]) + day - 1

    def label_from_day_of_year(self, doy: int, leap: bool) -> Tuple[int, int]:
        rem = doy
        for i, n in enumerate(self.lengths(leap)):
            if rem < n:
                return i + 1, rem + 1
            rem -= n
        raise ValueError(f"day-of-year {doy} exceeds the {self.year_length(leap)}-day year")


# Month lengths as tabulated by the legacy converter: the final month is
# shorter in leap years.
LEGACY_TABLE = MonthTable(
    common=(31, 31, 31, 30, 31, 30, 31, 31, 30, 31, 30, 30),
    leap=(31, 31, 31, 30, 31, 30, 31, 31, 30, 31, 30, 29),
)

# Civil table: six 31-day months, five 30-day months, Esfand 29/30.
STANDARD_TABLE = MonthTable(
    common=(31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29),
    leap=(31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 30),
)
