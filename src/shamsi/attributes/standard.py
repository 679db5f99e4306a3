from __future__ import annotations
from typing import Any, Dict

from .. import api
from ..formatting import MONTH_NAMES, WEEKDAY_NAMES
from .registry import register_attribute

def weekday(info) -> Dict[str, Any]:
    # Convention: 0=Sat..6=Fri.
    return {"weekday": info.weekday}

def names(info) -> Dict[str, Any]:
    return {
        "month_name": MONTH_NAMES[info.persian.month - 1],
        "weekday_name": WEEKDAY_NAMES[info.weekday],
    }

def day_of_year(info) -> Dict[str, Any]:
    p = info.persian
    lengths = api.engine_info(p.engine)["month_lengths"]
    table = lengths["leap"] if api.is_leap_year(p.year, engine=p.engine) else lengths["common"]
    return {"day_of_year": sum(table[: p.month - 1]) + p.day}

def week(info) -> Dict[str, Any]:
    return {"week": api.week_number(info.civil_date)}

def leap(info) -> Dict[str, Any]:
    y = info.persian.year
    return {
        "is_leap_year": api.is_leap_year(y, engine=info.persian.engine),
        "days_in_year": api.days_in_year(y, engine=info.persian.engine),
    }

register_attribute("weekday", weekday)
register_attribute("names", names)
register_attribute("day_of_year", day_of_year)
register_attribute("week", week)
register_attribute("leap", leap)
