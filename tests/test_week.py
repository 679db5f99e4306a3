# tests/test_week.py

from datetime import date, datetime
from unittest.mock import patch

import pytest

import shamsi
from shamsi.clock import resolve_now


def test_nowruz():
    assert shamsi.nowruz(2024) == date(2024, 3, 21)


@pytest.mark.parametrize(
    "d, expected",
    [
        (date(2024, 3, 21), 0),
        (date(2024, 3, 22), 1),
        (date(2024, 3, 28), 1),
        (date(2024, 3, 29), 2),
        (date(2024, 3, 20), 53),  # counts from 2023-03-21
        (datetime(2024, 3, 22, 23, 59), 1),
    ],
)
def test_week_number(d, expected):
    assert shamsi.week_number(d) == expected


def test_week_number_explicit_start():
    assert shamsi.week_number(date(2024, 3, 27), date(2024, 3, 20)) == 1
    with pytest.raises(ValueError):
        shamsi.week_number(date(2024, 3, 20), year_start=date(2024, 3, 21))


def test_today_with_clock():
    clock = shamsi.FixedClock(datetime(2024, 3, 20, 10, 0))
    assert shamsi.today(clock=clock, engine="arithmetic").ymd == (1403, 1, 1)
    assert shamsi.today(date(2024, 3, 21), engine="arithmetic").ymd == (1403, 1, 2)


def test_resolve_now_prefers_explicit_value():
    at = datetime(2020, 1, 1)
    assert resolve_now(at, shamsi.FixedClock(datetime(2030, 1, 1))) == at
    assert resolve_now(None, shamsi.FixedClock(at)) == at


def test_resolve_now_falls_back_to_system_clock():
    at = datetime(2025, 3, 21, 6, 0)
    with patch("shamsi.clock.system_clock", return_value=at):
        assert resolve_now() == at
