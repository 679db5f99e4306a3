from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Protocol

from .types import DayInfo, PersianDate

log = logging.getLogger(__name__)

class CalendarEngine(Protocol):
    name: str

    def info(self) -> Dict[str, Any]: ...
    def is_leap_year(self, year: int) -> bool: ...
    def month_length(self, year: int, month: int) -> int: ...
    def to_persian(self, d: date) -> PersianDate: ...
    def to_gregorian(self, p: PersianDate, *, wrap: bool = False) -> date: ...
    def day_info(self, d: date, *, debug: bool = False) -> DayInfo: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]
    default: str = "legacy"

    def get(self, name: Optional[str] = None) -> CalendarEngine:
        if name is None:
            name = self.default
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
        log.debug("registered engine %r (%s)", name, type(engine).__name__)

    def set_default(self, name: str) -> None:
        self.get(name)
        self.default = name
        log.debug("default engine set to %r", name)
