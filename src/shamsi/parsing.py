"""String entry points: split, check and convert date strings."""
from __future__ import annotations

import re
from datetime import date
from typing import Optional, Tuple

from . import api
from .core.errors import ParseError
from .core.types import PersianDate
from .digits import to_latin_digits

_PERSIAN_RE = re.compile(r"^\s*(?P<y>-?\d{1,4})(?P<sep>[/-])(?P<m>\d{1,2})(?P=sep)(?P<d>\d{1,2})\s*$")
_ISO_RE = re.compile(r"^\s*(\d{1,4})-(\d{1,2})-(\d{1,2})\s*$")
_US_RE = re.compile(r"^\s*(\d{1,2})/(\d{1,2})/(\d{1,4})\s*$")


def _match(rx: re.Pattern, s: str, form: str) -> Tuple[int, ...]:
    if not isinstance(s, str):
        raise ParseError(f"expected a string in {form} form, got {type(s).__name__}")
    m = rx.match(to_latin_digits(s))
    if m is None:
        raise ParseError(f"not a {form} date: {s!r}")
    if "sep" in rx.groupindex:
        return tuple(int(m.group(k)) for k in ("y", "m", "d"))
    return tuple(int(g) for g in m.groups())


def split_persian(s: str) -> Tuple[int, int, int]:
    """'1403/01/01' (or '1403-01-01', Persian digits allowed) -> (1403, 1, 1)."""
    y, m, d = _match(_PERSIAN_RE, s, "YYYY/MM/DD")
    return y, m, d


def parse_persian(s: str, *, engine: Optional[str] = None) -> PersianDate:
    """Parse and tag with `engine` (default: the registry default engine)."""
    y, m, d = split_persian(s)
    return PersianDate(y, m, d, engine=api.get_engine(engine).name)


def _gregorian(y: int, m: int, d: int, s: str) -> date:
    try:
        return date(y, m, d)
    except ValueError as e:
        raise ParseError(f"invalid Gregorian date {s!r}: {e}") from e


def parse_gregorian(s: str) -> date:
    """Canonical 'YYYY-MM-DD'."""
    y, m, d = _match(_ISO_RE, s, "YYYY-MM-DD")
    return _gregorian(y, m, d, s)


def parse_gregorian_us(s: str) -> date:
    """Legacy slash form 'MM/DD/YYYY'."""
    m, d, y = _match(_US_RE, s, "MM/DD/YYYY")
    return _gregorian(y, m, d, s)


def gregorian_iso(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def gregorian_us(d: date) -> str:
    return f"{d.month:02d}/{d.day:02d}/{d.year:04d}"


__all__ = [
    "split_persian",
    "parse_persian",
    "parse_gregorian",
    "parse_gregorian_us",
    "gregorian_iso",
    "gregorian_us",
]
