# tests/test_calendar.py

import random
from datetime import date

import pytest

from flextime.core import time as cal
from flextime.core.errors import InvalidUnitError


def test_leap_years():
    assert cal.is_leap_year(2020)
    assert cal.is_leap_year(2000)
    assert not cal.is_leap_year(1900)
    assert not cal.is_leap_year(2021)


def test_days_in_month():
    assert cal.days_in_month(2020, 2) == 29
    assert cal.days_in_month(2021, 2) == 28
    assert cal.days_in_month(2021, 4) == 30
    assert cal.days_in_month(2021, 12) == 31
    assert cal.days_in_year(2024) == 366


@pytest.mark.parametrize("month", [0, 13, -1])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(InvalidUnitError):
        cal.days_in_month(2021, month)
    with pytest.raises(InvalidUnitError):
        cal.seconds_at_start_of_month(2021, month)


def test_jdn_matches_stdlib_ordinal():
    random.seed(42)
    # date.toordinal() is 1 on 0001-01-01, the same day as EPOCH_JDN
    for _ in range(2000):
        d = date.fromordinal(random.randint(1, date(9999, 12, 31).toordinal()))
        jdn = cal.to_jdn(d.year, d.month, d.day)
        assert jdn - cal.EPOCH_JDN == d.toordinal() - 1
        assert cal.from_jdn(jdn) == (d.year, d.month, d.day)


def test_known_jdn():
    assert cal.to_jdn(2000, 1, 1) == 2451545
    assert cal.to_jdn(1, 1, 1) == cal.EPOCH_JDN


def test_weekday_sunday_is_zero():
    assert cal.weekday_of(2024, 1, 7) == 0   # Sunday
    assert cal.weekday_of(2024, 1, 3) == 3   # Wednesday
    assert cal.weekday_of(2023, 12, 31) == 0


def test_year_lengths_in_seconds():
    assert cal.seconds_at_start_of(2021) - cal.seconds_at_start_of(2020) == 366 * 86400
    assert cal.seconds_at_start_of(2022) - cal.seconds_at_start_of(2021) == 365 * 86400
    assert cal.seconds_at_start_of(1) == 0


def test_month_start_offsets():
    y0 = cal.seconds_at_start_of(2024)
    assert cal.seconds_at_start_of_month(2024, 1) == y0
    assert cal.seconds_at_start_of_month(2024, 3) - y0 == (31 + 29) * 86400


def test_date_tuple_overflow_rolls_over():
    assert cal.normalize_date_tuple(2024, 1, 32) == (2024, 2, 1, 0, 0, 0)
    assert cal.normalize_date_tuple(2024, 13, 1) == (2025, 1, 1, 0, 0, 0)
    assert cal.normalize_date_tuple(2024, 12, 31, 24) == (2025, 1, 1, 0, 0, 0)
    assert cal.normalize_date_tuple(2024, 2, 28, 23, 59, 60) == (2024, 2, 29, 0, 0, 0)


def test_seconds_date_tuple_roundtrip():
    random.seed(7)
    for _ in range(2000):
        s = random.randint(0, cal.seconds_at_start_of(3000))
        assert cal.date_tuple_to_seconds(*cal.seconds_to_date_tuple(s)) == s
