# tests/test_registry.py

from datetime import date

import pytest

import shamsi
from shamsi import EngineSpec, PersianDate
from shamsi._bootstrap import DEFAULT_ENGINE_ENV, build_registry
from shamsi.engines.month_table import MonthTable


def test_list_engines():
    assert shamsi.list_engines() == ["arithmetic", "legacy"]


def test_engine_info():
    info = shamsi.engine_info("arithmetic")
    assert info["id"]["name"] == "arithmetic"
    assert info["epoch"] == "1600-03-20"
    assert sum(info["month_lengths"]["leap"]) == 366
    assert shamsi.engine_info()["id"]["name"] == "legacy"


def test_unknown_engine():
    with pytest.raises(KeyError):
        shamsi.is_leap_year(1403, engine="nope")
    with pytest.raises(KeyError):
        shamsi.set_default_engine("nope")


def test_set_default_engine(restore_default_engine):
    shamsi.set_default_engine("arithmetic")
    assert shamsi.get_default_engine() == "arithmetic"
    assert shamsi.persian_to_gregorian(1403, 1, 1) == date(2024, 3, 20)
    assert shamsi.parse_persian("1403/01/01").engine == "arithmetic"
    assert shamsi.to_gregorian(shamsi.parse_persian("1403/01/01")) == date(2024, 3, 20)
    assert shamsi.parse_persian("1403/01/01", engine="legacy").engine == "legacy"
    assert shamsi.to_gregorian((1403, 1, 1)) == date(2024, 3, 20)


def test_env_default(monkeypatch):
    monkeypatch.setenv(DEFAULT_ENGINE_ENV, "arithmetic")
    assert build_registry().default == "arithmetic"
    monkeypatch.setenv(DEFAULT_ENGINE_ENV, "nope")
    with pytest.raises(KeyError):
        build_registry()


def test_custom_engine():
    # Arithmetic rules with a civil table whose last month is always 30 days.
    spec = EngineSpec.like("arithmetic").renamed("arith-flat").tweak(
        months=MonthTable(common=(31,) * 6 + (30,) * 6, leap=(31,) * 6 + (30,) * 6)
    )
    eng = shamsi.make_engine(spec)
    assert eng.name == "arith-flat"
    assert eng.id.family == "custom"
    shamsi.register_engine("arith-flat", eng, overwrite=True)

    assert shamsi.days_in_month(12, 1404, engine="arith-flat") == 30
    assert shamsi.persian_to_gregorian(1403, 1, 1, engine="arith-flat") == date(2024, 3, 20)
    assert shamsi.gregorian_to_persian(2024, 3, 20, engine="arith-flat") == PersianDate(1403, 1, 1, engine="arith-flat")

    with pytest.raises(KeyError):
        shamsi.register_engine("arith-flat", eng)
    with pytest.raises(ValueError):
        shamsi.register_engine("other-name", eng)


def test_like_unknown():
    with pytest.raises(KeyError):
        EngineSpec.like("julian")


def test_pinned_engine_overrides_carried_one():
    p = PersianDate(1403, 1, 1, engine="arithmetic")
    assert shamsi.to_gregorian(p) == date(2024, 3, 20)
    assert shamsi.to_gregorian(p, engine="legacy") == date(2022, 5, 27)


def test_day_info_attributes():
    info = shamsi.day_info(
        date(2024, 3, 20),
        engine="arithmetic",
        attributes=("weekday", "names", "day_of_year", "leap", "week"),
    )
    assert info.persian.ymd == (1403, 1, 1)
    assert info.weekday == 4
    assert info.engine.name == "arithmetic"
    assert info.attributes == {
        "weekday": 4,
        "month_name": "فروردین",
        "weekday_name": "چهارشنبه",
        "day_of_year": 1,
        "is_leap_year": True,
        "days_in_year": 366,
        "week": 53,
    }
    assert info.debug is None


def test_day_of_year_end():
    info = shamsi.day_info(date(2025, 3, 20), engine="arithmetic", attributes=("day_of_year",))
    assert info.attributes["day_of_year"] == 366


def test_unknown_attribute():
    with pytest.raises(KeyError):
        shamsi.day_info(date(2024, 3, 20), attributes=("nope",))


def test_register_attribute():
    shamsi.register_attribute("gregorian_year", lambda info: {"gregorian_year": info.civil_date.year})
    assert "gregorian_year" in shamsi.list_attributes()
    info = shamsi.day_info((2024, 3, 20), attributes=("gregorian_year",))
    assert info.attributes == {"gregorian_year": 2024}
