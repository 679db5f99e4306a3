"""shamsi public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

import logging

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401
from .attributes import standard as _standard_attributes  # noqa: F401

from .api import (
    is_leap_year,
    days_in_year,
    days_in_month,
    to_persian,
    to_gregorian,
    gregorian_to_persian,
    persian_to_gregorian,
    persian_weekday,
    add_days,
    subtract_days,
    nowruz,
    week_number,
    today,
    day_info,
    explain,
    month_days,
    list_engines,
    get_engine,
    engine_info,
    make_engine,
    register_engine,
    set_default_engine,
    get_default_engine,
)
from .attributes.registry import register_attribute, list_attributes
from .clock import FixedClock, system_clock
from .core.errors import (
    ShamsiError,
    InvalidMonthError,
    InvalidDayError,
    ParseError,
    EngineUnavailableError,
)
from .core.types import PersianDate, DayInfo
from .digits import to_latin_digits
from .engines.specs import EngineSpec
from .formatting import (
    format_persian_date,
    format_date,
    month_name,
    weekday_name,
    persian_string,
    convert_to_gregorian_date,
)
from .parsing import (
    parse_persian,
    parse_gregorian,
    parse_gregorian_us,
    gregorian_iso,
    gregorian_us,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "to_persian",
    "to_gregorian",
    "gregorian_to_persian",
    "persian_to_gregorian",
    "persian_weekday",
    "add_days",
    "subtract_days",
    "nowruz",
    "week_number",
    "today",
    "day_info",
    "explain",
    "month_days",
    "list_engines",
    "get_engine",
    "engine_info",
    "make_engine",
    "register_engine",
    "set_default_engine",
    "get_default_engine",
    "register_attribute",
    "list_attributes",
    "FixedClock",
    "system_clock",
    "ShamsiError",
    "InvalidMonthError",
    "InvalidDayError",
    "ParseError",
    "EngineUnavailableError",
    "PersianDate",
    "DayInfo",
    "EngineSpec",
    "to_latin_digits",
    "format_persian_date",
    "format_date",
    "month_name",
    "weekday_name",
    "persian_string",
    "convert_to_gregorian_date",
    "parse_persian",
    "parse_gregorian",
    "parse_gregorian_us",
    "gregorian_iso",
    "gregorian_us",
]
