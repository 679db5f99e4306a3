from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Literal, Optional, Tuple

from .errors import InvalidDayError, InvalidMonthError

@dataclass(frozen=True)
class EngineId:
    family: Literal["legacy", "arithmetic", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class PersianDate:
    """
    A Persian (Shamsi) calendar label.

    `engine` names the rule set the label belongs to. Only the structural
    bounds are checked here; the exact month length is engine-specific and is
    enforced on conversion.
    """
    year: int
    month: int
    day: int
    engine: str = "legacy"

    def __post_init__(self) -> None:
        if not (1 <= self.month <= 12):
            raise InvalidMonthError(f"month must be in 1..12, got {self.month}")
        if not (1 <= self.day <= 31):
            raise InvalidDayError(f"day must be in 1..31, got {self.day}")

    @property
    def ymd(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def isoformat(self, sep: str = "/") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def with_engine(self, engine: str) -> "PersianDate":
        return replace(self, engine=engine)

    def __str__(self) -> str:
        return self.isoformat()

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    engine: EngineId
    persian: PersianDate
    weekday: int  # 0=Saturday..6=Friday
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
