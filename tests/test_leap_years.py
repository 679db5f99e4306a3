# tests/test_leap_years.py

import pytest

import shamsi


LEGACY_LEAPS = {0, 4, 8, 12, 16, 20, 24, 28}


@pytest.mark.parametrize("engine", ["legacy", "arithmetic"])
def test_33_year_periodicity(engine):
    for year in range(-200, 3000):
        assert shamsi.is_leap_year(year, engine=engine) == shamsi.is_leap_year(year + 33, engine=engine)


def test_legacy_rule_matches_residues():
    for year in range(-100, 2000):
        assert shamsi.is_leap_year(year, engine="legacy") == (year % 33 in LEGACY_LEAPS)


def test_legacy_concrete_years():
    # 1403 mod 33 == 17: not a leap year under the residue rule.
    assert shamsi.is_leap_year(1403) is False
    assert shamsi.is_leap_year(1386) is True   # 33 * 42
    assert shamsi.is_leap_year(1390) is True   # 1386 + 4
    assert shamsi.is_leap_year(1404) is False
    assert shamsi.is_leap_year(0) is True
    assert shamsi.is_leap_year(-29) is True    # -29 mod 33 == 4


def test_arithmetic_concrete_years():
    leaps = [1387, 1391, 1395, 1399, 1403, 1408]
    commons = [1400, 1401, 1402, 1404, 1405, 1406, 1407]
    for y in leaps:
        assert shamsi.is_leap_year(y, engine="arithmetic"), y
    for y in commons:
        assert not shamsi.is_leap_year(y, engine="arithmetic"), y


def test_eight_leaps_per_cycle():
    for engine in ("legacy", "arithmetic"):
        n = sum(shamsi.is_leap_year(y, engine=engine) for y in range(1300, 1333))
        assert n == 8


def test_days_in_year():
    assert shamsi.days_in_year(1390) == 366
    assert shamsi.days_in_year(1403) == 365
    assert shamsi.days_in_year(1403, engine="arithmetic") == 366
    assert shamsi.days_in_year(1404, engine="arithmetic") == 365
