# tests/test_parsing.py

import random
from datetime import date

import pytest

import shamsi
from shamsi import PersianDate
from shamsi.digits import has_persian_digits, to_latin_digits
from shamsi.parsing import split_persian


def test_to_latin_digits():
    assert to_latin_digits("۱۴۰۳/۰۱/۰۱") == "1403/01/01"
    assert to_latin_digits("سال ۱۴۰۳") == "سال 1403"
    assert to_latin_digits("") == ""
    assert has_persian_digits("۱۲") and not has_persian_digits("12")


def test_to_latin_digits_idempotent():
    random.seed(3)
    alphabet = "0123456789۰۱۲۳۴۵۶۷۸۹/-abc فروردین"
    for _ in range(500):
        s = "".join(random.choice(alphabet) for _ in range(random.randint(0, 20)))
        once = to_latin_digits(s)
        assert to_latin_digits(once) == once
        assert not has_persian_digits(once)
        assert len(once) == len(s)


def test_parse_persian():
    assert shamsi.parse_persian("1403/01/01") == PersianDate(1403, 1, 1)
    assert shamsi.parse_persian("1403-1-9").ymd == (1403, 1, 9)
    assert shamsi.parse_persian("۱۴۰۳/۰۷/۲۶", engine="arithmetic") == PersianDate(1403, 7, 26, engine="arithmetic")
    assert split_persian(" 1403/12/30 ") == (1403, 12, 30)


@pytest.mark.parametrize("s", ["1403/01-01", "1403/aa/01", "14030101", "", "1403/01/01/01", "1403.01.01"])
def test_parse_persian_rejects(s):
    with pytest.raises(shamsi.ParseError):
        shamsi.parse_persian(s)


def test_parse_persian_bounds():
    with pytest.raises(shamsi.InvalidMonthError):
        shamsi.parse_persian("1403/13/01")
    with pytest.raises(shamsi.InvalidDayError):
        shamsi.parse_persian("1403/01/32")


def test_parse_non_string():
    with pytest.raises(shamsi.ParseError):
        shamsi.parse_persian(14030101)
    with pytest.raises(shamsi.ParseError):
        shamsi.parse_gregorian(None)


def test_parse_gregorian():
    assert shamsi.parse_gregorian("2024-03-20") == date(2024, 3, 20)
    assert shamsi.parse_gregorian_us("03/20/2024") == date(2024, 3, 20)
    for bad in ("2024/03/20", "2024-02-30", "20-03-2024"):
        with pytest.raises(shamsi.ParseError):
            shamsi.parse_gregorian(bad)
    with pytest.raises(shamsi.ParseError):
        shamsi.parse_gregorian_us("13/01/2024")


def test_gregorian_strings():
    assert shamsi.gregorian_iso(date(621, 3, 21)) == "0621-03-21"
    assert shamsi.gregorian_us(date(2024, 3, 20)) == "03/20/2024"


def test_errors_are_value_errors():
    for exc in (shamsi.ParseError, shamsi.InvalidMonthError, shamsi.InvalidDayError):
        assert issubclass(exc, shamsi.ShamsiError)
        assert issubclass(exc, ValueError)


def test_persian_date_value():
    p = PersianDate(1403, 1, 1)
    assert str(p) == "1403/01/01"
    assert p.isoformat("-") == "1403-01-01"
    assert p.with_engine("arithmetic").engine == "arithmetic"
    with pytest.raises(shamsi.InvalidMonthError):
        PersianDate(1403, 0, 1)
    with pytest.raises(shamsi.InvalidDayError):
        PersianDate(1403, 1, 0)


def test_parse_persian_follows_default_engine(restore_default_engine):
    assert shamsi.parse_persian("1403/01/01").engine == "legacy"
    shamsi.set_default_engine("arithmetic")
    p = shamsi.parse_persian("1403/01/01")
    assert p == PersianDate(1403, 1, 1, engine="arithmetic")
    assert shamsi.to_gregorian(p) == shamsi.to_gregorian((1403, 1, 1)) == date(2024, 3, 20)


def test_parse_persian_unknown_engine():
    with pytest.raises(KeyError):
        shamsi.parse_persian("1403/01/01", engine="nope")
