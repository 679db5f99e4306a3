"""
shamsi.engines.interfaces
-------------------------
Boundaries between the year layer (epoch day counts), the month layer
(day-of-year <-> month/day labels) and the orchestrator (CalendarEngine).

Standard Reference Frame:
All day counts are whole days since the engine's epoch anchor, i.e. the
Gregorian date that carries the engine's zero day count.
"""

from __future__ import annotations

from typing import Protocol, Tuple


class LeapRuleProtocol(Protocol):
    def is_leap(self, year: int) -> bool:
        """True if the Persian year has its leap month table."""
        ...


class YearEngineProtocol(Protocol):
    """
    Maps Persian years to epoch day counts and back.
    """
    @property
    def leap_rule(self) -> LeapRuleProtocol:
        ...

    def days_before_year(self, year: int) -> int:
        """Day count (since the epoch anchor) of the first day of `year`."""
        ...

    def year_from_days(self, days: int) -> Tuple[int, int]:
        """
        Inverse lookup: returns (year, zero-based day-of-year) for a day count.
        Exact engines satisfy days_before_year(year) + doy == days.
        """
        ...


class MonthTableProtocol(Protocol):
    """
    Discrete month layer: fixed month lengths selected by leap status.
    """
    def lengths(self, leap: bool) -> Tuple[int, ...]:
        ...

    def day_of_year(self, month: int, day: int, leap: bool) -> int:
        """Zero-based day-of-year of (month, day)."""
        ...

    def label_from_day_of_year(self, doy: int, leap: bool) -> Tuple[int, int]:
        """(month, day) for a zero-based day-of-year."""
        ...
