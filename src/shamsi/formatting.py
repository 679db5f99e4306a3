"""
shamsi.formatting
-----------------
Pattern formatting of Persian dates and the preset formats built on it.

Tokens are replaced in the order YYYY, MM, DD, Month, Weekday, HH, mm, ss,
each at most once (first occurrence), exactly like chained str.replace(t, v, 1).
A pattern that repeats a token keeps the later copies verbatim.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence, Tuple

from . import api
from .clock import Clock, resolve_now
from .core.time import as_date
from .core.types import PersianDate
from .digits import to_latin_digits
from .engines.month_table import check_month
from .parsing import gregorian_us, split_persian

MONTH_NAMES: Tuple[str, ...] = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)

# Saturday first, matching shamsi.engines.calendar.persian_weekday.
WEEKDAY_NAMES: Tuple[str, ...] = (
    "شنبه",
    "یکشنبه",
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنجشنبه",
    "جمعه",
)

TOKENS: Sequence[str] = ("YYYY", "MM", "DD", "Month", "Weekday", "HH", "mm", "ss")

# Preset patterns
YMD = "YYYY/MM/DD"
YMD_HYPHEN = "YYYY-MM-DD"
DMY = "DD/MM/YYYY"
DMY_HYPHEN = "DD-MM-YYYY"
SHORT = "DD Month YYYY"
MONTH_YEAR = "Month YYYY"
FULL = "Weekday, DD Month YYYY"
DATE_TIME = "YYYY/MM/DD HH:mm:ss"


def month_name(month: int) -> str:
    check_month(month)
    return MONTH_NAMES[month - 1]


def weekday_name(year: int, month: int, day: int, *, engine: Optional[str] = None) -> str:
    """Weekday of a Persian date, read from its Gregorian equivalent."""
    return WEEKDAY_NAMES[api.persian_weekday(year, month, day, engine=engine)]


def format_persian_date(
    pattern: str,
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    *,
    engine: Optional[str] = None,
) -> str:
    """
    Substitute YYYY, MM, DD, Month, Weekday, HH, mm, ss in `pattern`.

    Numeric fields are zero-padded to two digits (the year is printed as is).
    The weekday is only computed when the pattern asks for it.
    """
    values = {
        "YYYY": str(year),
        "MM": f"{month:02d}",
        "DD": f"{day:02d}",
        "Month": month_name(month),
        "HH": f"{hour:02d}",
        "mm": f"{minute:02d}",
        "ss": f"{second:02d}",
    }
    out = pattern
    for token in TOKENS:
        if token not in out:
            continue
        if token == "Weekday":
            value = weekday_name(year, month, day, engine=engine)
        else:
            value = values[token]
        out = out.replace(token, value, 1)
    return to_latin_digits(out)


def format_date(
    pattern: str,
    now: Optional[datetime] = None,
    *,
    engine: Optional[str] = None,
    clock: Optional[Clock] = None,
) -> str:
    """Format a Gregorian datetime (default: the clock's current reading)."""
    now = resolve_now(now, clock)
    p = api.to_persian(as_date(now), engine=engine)
    hour, minute, second = (now.hour, now.minute, now.second) if isinstance(now, datetime) else (0, 0, 0)
    return format_persian_date(pattern, p.year, p.month, p.day, hour, minute, second, engine=p.engine)


def persian_string(p: PersianDate) -> str:
    return format_persian_date(YMD, p.year, p.month, p.day, engine=p.engine)


# ============================================================
# Presets over an injected "now"
# ============================================================

def date_ymd(
    now: Optional[datetime] = None, *, engine: Optional[str] = None, clock: Optional[Clock] = None
) -> str:
    return format_date(YMD, now, engine=engine, clock=clock)

def date_ymd_hyphen(
    now: Optional[datetime] = None, *, engine: Optional[str] = None, clock: Optional[Clock] = None
) -> str:
    return format_date(YMD_HYPHEN, now, engine=engine, clock=clock)

def date_dmy(
    now: Optional[datetime] = None, *, engine: Optional[str] = None, clock: Optional[Clock] = None
) -> str:
    return format_date(DMY, now, engine=engine, clock=clock)

def date_dmy_hyphen(
    now: Optional[datetime] = None, *, engine: Optional[str] = None, clock: Optional[Clock] = None
) -> str:
    return format_date(DMY_HYPHEN, now, engine=engine, clock=clock)

def date_short(
    now: Optional[datetime] = None, *, engine: Optional[str] = None, clock: Optional[Clock] = None
) -> str:
    return format_date(SHORT, now, engine=engine, clock=clock)

def month_year(
    now: Optional[datetime] = None, *, engine: Optional[str] = None, clock: Optional[Clock] = None
) -> str:
    return format_date(MONTH_YEAR, now, engine=engine, clock=clock)

def full_date(
    now: Optional[datetime] = None, *, engine: Optional[str] = None, clock: Optional[Clock] = None
) -> str:
    return format_date(FULL, now, engine=engine, clock=clock)

def date_time(
    now: Optional[datetime] = None, *, engine: Optional[str] = None, clock: Optional[Clock] = None
) -> str:
    return format_date(DATE_TIME, now, engine=engine, clock=clock)

def current_year(
    now: Optional[datetime] = None, *, engine: Optional[str] = None, clock: Optional[Clock] = None
) -> int:
    return api.today(now, engine=engine, clock=clock).year

def current_month_name(
    now: Optional[datetime] = None, *, engine: Optional[str] = None, clock: Optional[Clock] = None
) -> str:
    return month_name(api.today(now, engine=engine, clock=clock).month)

def current_weekday_name(
    now: Optional[datetime] = None, *, engine: Optional[str] = None, clock: Optional[Clock] = None
) -> str:
    p = api.today(now, engine=engine, clock=clock)
    return weekday_name(p.year, p.month, p.day, engine=p.engine)

def current_week(now: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> int:
    """Week of the Persian year for `now`, counted from the March 21st approximation."""
    return api.week_number(as_date(resolve_now(now, clock)))


# ============================================================
# Gregorian string forms
# ============================================================

def convert_to_gregorian_date(persian: str, *, engine: Optional[str] = None) -> str:
    """'YYYY/MM/DD' (Persian) -> 'MM/DD/YYYY' (legacy Gregorian slash form)."""
    y, m, d = split_persian(persian)
    return gregorian_us(api.persian_to_gregorian(y, m, d, engine=engine))
