"""
shamsi.engines.calendar
-----------------------
The Orchestrator. Binds a year layer and a month table to an epoch anchor and
translates between Persian labels and Gregorian dates via Julian Day Numbers.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Tuple

from shamsi.core.time import from_jdn, to_jdn
from shamsi.core.types import DayInfo, EngineId, PersianDate
from shamsi.engines.interfaces import MonthTableProtocol, YearEngineProtocol

log = logging.getLogger(__name__)


def persian_weekday(d: date) -> int:
    """Weekday counted from Saturday: 0=Saturday .. 6=Friday."""
    return (d.weekday() + 2) % 7


class CalendarEngine:
    """
    Translates Persian labels to Gregorian dates and back. Stateless apart
    from its immutable parameters, so one instance may be shared freely.
    """
    def __init__(
        self,
        id: EngineId,
        year: YearEngineProtocol,
        months: MonthTableProtocol,
        epoch: date,
    ):
        self.id = id
        self.year = year
        self.months = months
        self.epoch = epoch
        self.epoch_jdn = to_jdn(epoch)

    @property
    def name(self) -> str:
        return self.id.name

    # ---------------------------------------------------------
    # Queries
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return self.year.leap_rule.is_leap(year)

    def month_length(self, year: int, month: int) -> int:
        return self.months.month_length(month, self.is_leap_year(year))

    def year_length(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    # ---------------------------------------------------------
    # Forward: Persian label to JDN
    # ---------------------------------------------------------

    def to_jdn(self, year: int, month: int, day: int, *, wrap: bool = False) -> int:
        doy = self.months.day_of_year(month, day, self.is_leap_year(year), wrap=wrap)
        if wrap and not (1 <= day <= self.month_length(year, month)):
            log.debug("%s: day %d rolls over month %d/%d", self.name, day, year, month)
        return self.epoch_jdn + self.year.days_before_year(year) + doy

    def to_gregorian(self, p: PersianDate, *, wrap: bool = False) -> date:
        return from_jdn(self.to_jdn(p.year, p.month, p.day, wrap=wrap))

    # ---------------------------------------------------------
    # Inverse: JDN to Persian label
    # ---------------------------------------------------------

    def label_from_jdn(self, jdn: int) -> Tuple[int, int, int]:
        days = jdn - self.epoch_jdn
        year, doy = self.year.year_from_days(days)
        month, day = self.months.label_from_day_of_year(doy, self.is_leap_year(year))
        return year, month, day

    def from_jdn(self, jdn: int) -> PersianDate:
        y, m, d = self.label_from_jdn(jdn)
        return PersianDate(y, m, d, engine=self.name)

    def to_persian(self, d: date) -> PersianDate:
        return self.from_jdn(to_jdn(d))

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------
    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "epoch": self.epoch.isoformat(),
            "year_layer": type(self.year).__name__,
            "month_lengths": {
                "common": list(self.months.lengths(False)),
                "leap": list(self.months.lengths(True)),
            },
        }

    def day_info(self, d: date, *, debug: bool = False) -> DayInfo:
        jdn = to_jdn(d)
        p = self.from_jdn(jdn)
        dbg = None
        if debug:
            days = jdn - self.epoch_jdn
            year, doy = self.year.year_from_days(days)
            dbg = {"jdn": jdn, "epoch_days": days, "year": year, "day_of_year": doy,
                   "leap": self.is_leap_year(year)}
        return DayInfo(
            civil_date=d,
            engine=self.id,
            persian=p,
            weekday=persian_weekday(d),
            debug=dbg,
        )

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d, debug=True).__dict__
