# tests/test_legacy_engine.py

import logging
from datetime import date

import pytest

import shamsi
from shamsi import PersianDate


def test_default_engine_is_legacy():
    assert shamsi.get_default_engine() == "legacy"


def test_forward_reference_values():
    assert shamsi.persian_to_gregorian(1, 1, 1) == date(621, 3, 21)
    assert shamsi.persian_to_gregorian(1403, 1, 1) == date(2022, 5, 27)
    assert shamsi.persian_to_gregorian(1403, 12, 29) == date(2023, 5, 27)


def test_inverse_reference_values():
    assert shamsi.gregorian_to_persian(621, 3, 21).ymd == (621, 1, 1)
    assert shamsi.gregorian_to_persian(2026, 10, 18).ymd == (2026, 7, 4)
    assert shamsi.gregorian_to_persian(2000, 6, 15).ymd == (2000, 2, 26)
    assert shamsi.gregorian_to_persian(1990, 1, 1).ymd == (1989, 9, 8)


def test_not_invertible():
    g = shamsi.persian_to_gregorian(1403, 1, 1)
    assert shamsi.to_persian(g).ymd == (2022, 2, 12)
    assert shamsi.add_days((1403, 1, 1), 0).ymd == (2022, 2, 12)


def test_labels_are_tagged():
    p = shamsi.gregorian_to_persian(2026, 10, 18)
    assert p.engine == "legacy"
    assert p != PersianDate(2026, 7, 4, engine="arithmetic")


def test_gregorian_input_validation():
    with pytest.raises(shamsi.InvalidMonthError):
        shamsi.gregorian_to_persian(2024, 13, 1)
    with pytest.raises(shamsi.InvalidDayError):
        shamsi.gregorian_to_persian(2023, 2, 29)


def test_strict_day():
    with pytest.raises(shamsi.InvalidDayError):
        shamsi.persian_to_gregorian(1403, 4, 31)
    with pytest.raises(shamsi.InvalidDayError):
        shamsi.persian_to_gregorian(1390, 12, 30)


def test_wrap_logs_rollover(caplog):
    with caplog.at_level(logging.DEBUG, logger="shamsi"):
        g = shamsi.persian_to_gregorian(1403, 4, 31, wrap=True)
    assert g == shamsi.persian_to_gregorian(1403, 5, 1)
    assert any("rolls over" in r.getMessage() for r in caplog.records)


def test_weekday_friday():
    # 2022-05-27 was a Friday.
    assert shamsi.persian_weekday(1403, 1, 1) == 6
    assert shamsi.weekday_name(1403, 1, 1) == "جمعه"


def test_explain_has_debug_fields():
    out = shamsi.explain(date(2026, 10, 18))
    assert out["persian"].ymd == (2026, 7, 4)
    assert set(out["debug"]) == {"jdn", "epoch_days", "year", "day_of_year", "leap"}
