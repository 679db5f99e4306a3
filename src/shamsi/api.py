from __future__ import annotations

import math
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .attributes.registry import compute_attributes
from .clock import Clock, resolve_now
from .core.engine import CalendarEngine, EngineRegistry
from .core.errors import InvalidDayError, InvalidMonthError
from .core.time import as_date, from_jdn, shift_days
from .core.types import DayInfo, PersianDate
from .engines.calendar import persian_weekday as _gregorian_weekday
from .engines.factory import make_engine as _make_engine
from .engines.specs import EngineSpec

_registry: Optional[EngineRegistry] = None

GregorianLike = Union[date, datetime, Tuple[int, int, int]]
PersianLike = Union[PersianDate, Tuple[int, int, int]]

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def _engine(engine: Optional[str]) -> CalendarEngine:
    return _reg().get(engine)

# ============================================================
# Registry
# ============================================================

def list_engines() -> List[str]:
    return _reg().list()

def get_engine(engine: Optional[str] = None) -> CalendarEngine:
    """Registered engine by name; None resolves to the current default."""
    return _engine(engine)

def engine_info(engine: Optional[str] = None) -> Dict[str, Any]:
    return _engine(engine).info()

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    """
    Register an engine under `name`. Dates produced by the engine are tagged
    with its own id name, so the two should agree.
    """
    if getattr(engine, "name", name) != name:
        raise ValueError(f"Engine is named {engine.name!r}, cannot register it as {name!r}")
    _reg().register(name, engine, overwrite=overwrite)

def set_default_engine(name: str) -> None:
    _reg().set_default(name)

def get_default_engine() -> str:
    return _reg().default

# ============================================================
# Leap years and month lengths
# ============================================================

def is_leap_year(year: int, *, engine: Optional[str] = None) -> bool:
    return _engine(engine).is_leap_year(year)

def days_in_year(year: int, *, engine: Optional[str] = None) -> int:
    return _engine(engine).year_length(year)

def days_in_month(month: int, year: int, *, engine: Optional[str] = None) -> Optional[int]:
    """Number of days in `month` of `year`, or None when month is not in 1..12."""
    if not (1 <= month <= 12):
        return None
    return _engine(engine).month_length(year, month)

# ============================================================
# Conversion
# ============================================================

def _coerce_gregorian(value: GregorianLike) -> date:
    if isinstance(value, (date, datetime)):
        return as_date(value)
    y, m, d = value
    if not (1 <= m <= 12):
        raise InvalidMonthError(f"month must be in 1..12, got {m}")
    try:
        return date(y, m, d)
    except ValueError as e:
        raise InvalidDayError(str(e)) from e

def _coerce_persian(value: PersianLike, engine: Optional[str]) -> PersianDate:
    if isinstance(value, PersianDate):
        return value if engine is None else value.with_engine(engine)
    y, m, d = value
    return PersianDate(y, m, d, engine=_engine(engine).name)

def to_persian(value: GregorianLike, *, engine: Optional[str] = None) -> PersianDate:
    return _engine(engine).to_persian(_coerce_gregorian(value))

def gregorian_to_persian(year: int, month: int, day: int, *, engine: Optional[str] = None) -> PersianDate:
    return to_persian((year, month, day), engine=engine)

def to_gregorian(value: PersianLike, *, engine: Optional[str] = None, wrap: bool = False) -> date:
    """
    Persian -> Gregorian. A PersianDate is interpreted by the engine it carries
    unless `engine` overrides it.
    """
    p = _coerce_persian(value, engine)
    return _engine(p.engine).to_gregorian(p, wrap=wrap)

def persian_to_gregorian(
    year: int, month: int, day: int, *, engine: Optional[str] = None, wrap: bool = False
) -> date:
    """
    Integer-argument form. With wrap=True any day number is accepted and
    rolls over into neighbouring months; the month must still be in 1..12.
    """
    eng = _engine(engine)
    if wrap:
        return from_jdn(eng.to_jdn(year, month, day, wrap=True))
    return eng.to_gregorian(PersianDate(year, month, day, engine=eng.name))

def persian_weekday(year: int, month: int, day: int, *, engine: Optional[str] = None) -> int:
    """0=Saturday .. 6=Friday."""
    return _gregorian_weekday(persian_to_gregorian(year, month, day, engine=engine))

# ============================================================
# Day arithmetic
# ============================================================

def add_days(value: PersianLike, n: int, *, engine: Optional[str] = None) -> PersianDate:
    p = _coerce_persian(value, engine)
    eng = _engine(p.engine)
    return eng.to_persian(shift_days(eng.to_gregorian(p), n))

def subtract_days(value: PersianLike, n: int, *, engine: Optional[str] = None) -> PersianDate:
    return add_days(value, -n, engine=engine)

# ============================================================
# Weeks and "now"
# ============================================================

def nowruz(gregorian_year: int) -> date:
    """Fixed approximation of the Persian New Year: March 21st."""
    return date(gregorian_year, 3, 21)

def week_number(d: Union[date, datetime], year_start: Optional[date] = None) -> int:
    """
    ceil(days since year start / 7). Without `year_start` the March 21st
    approximation is used, falling back to the previous year's for dates
    before it. Nowruz itself is week 0.
    """
    d = as_date(d)
    if year_start is None:
        year_start = nowruz(d.year)
        if d < year_start:
            year_start = nowruz(d.year - 1)
    elif d < year_start:
        raise ValueError(f"{d.isoformat()} precedes year start {year_start.isoformat()}")
    return math.ceil((d - year_start).days / 7)

def today(
    now: Optional[Union[date, datetime]] = None,
    *,
    engine: Optional[str] = None,
    clock: Optional[Clock] = None,
) -> PersianDate:
    return to_persian(as_date(resolve_now(now, clock)), engine=engine)

# ============================================================
# Day info
# ============================================================

def day_info(
    d: GregorianLike,
    *,
    engine: Optional[str] = None,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    info = _engine(engine).day_info(_coerce_gregorian(d), debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def explain(d: GregorianLike, *, engine: Optional[str] = None) -> Dict[str, Any]:
    return _engine(engine).explain(_coerce_gregorian(d))

def month_days(year: int, month: int, *, engine: Optional[str] = None) -> List[Dict[str, Any]]:
    """One row per day of a Persian month: label, Gregorian date, weekday."""
    eng = _engine(engine)
    rows = []
    for day in range(1, eng.month_length(year, month) + 1):
        g = eng.to_gregorian(PersianDate(year, month, day, engine=eng.name))
        rows.append({
            "persian": PersianDate(year, month, day, engine=eng.name),
            "date": g,
            "weekday": _gregorian_weekday(g),
        })
    return rows
