"""
flextime.core.time
------------------
Gregorian calendar arithmetic on plain integer tuples.

Absolute positions are counted in seconds from the epoch 0001-01-01 00:00:00
(proleptic Gregorian). The epoch is an internal reference only: callers see
differences between positions, never the epoch itself.
"""

from __future__ import annotations

from typing import Tuple

from .errors import InvalidUnitError

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 24 * 60 * 60

# JDN of 0001-01-01
EPOCH_JDN = 1721426

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

DateTuple = Tuple[int, int, int, int, int, int]


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _check_month(month: int) -> None:
    if month < 1 or month > 12:
        raise InvalidUnitError(f"Invalid month {month}. Month must be between 1 and 12.")


def days_in_month(year: int, month: int) -> int:
    _check_month(month)
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return _DAYS_IN_MONTH[month - 1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def to_jdn(year: int, month: int, day: int) -> int:
    """Gregorian (year, month, day) -> Julian Day Number. Days past month end carry over."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def weekday(jdn: int) -> int:
    """Day of week with 0=Sunday..6=Saturday."""
    return (jdn + 1) % 7


def seconds_at_start_of(year: int) -> int:
    return (to_jdn(year, 1, 1) - EPOCH_JDN) * SECONDS_PER_DAY


def seconds_at_start_of_month(year: int, month: int) -> int:
    _check_month(month)
    return (to_jdn(year, month, 1) - EPOCH_JDN) * SECONDS_PER_DAY


def date_tuple_to_seconds(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """
    Absolute seconds for a civil date-time.

    Out-of-range fields roll over into the next coarser field (month 13 is
    January of the next year, day 32 of January is February 1st, hour 24 is
    midnight of the next day), matching a UTC date constructor.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    days = to_jdn(year, month, 1) - EPOCH_JDN + (day - 1)
    return days * SECONDS_PER_DAY + hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second


def seconds_to_date_tuple(seconds: int) -> DateTuple:
    days, rem = divmod(int(seconds), SECONDS_PER_DAY)
    year, month, day = from_jdn(EPOCH_JDN + days)
    hour, rem = divmod(rem, SECONDS_PER_HOUR)
    minute, second = divmod(rem, SECONDS_PER_MINUTE)
    return year, month, day, hour, minute, second


def normalize_date_tuple(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> DateTuple:
    return seconds_to_date_tuple(date_tuple_to_seconds(year, month, day, hour, minute, second))


def weekday_of(year: int, month: int, day: int) -> int:
    return weekday(to_jdn(year, month, day))
