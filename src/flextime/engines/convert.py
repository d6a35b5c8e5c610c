"""
flextime.engines.convert
------------------------
Resolution of TimeInterval chains to seconds and back to civil date tuples.

Bare (non-year) roots carry no calendar anchor: they resolve as
`value * unit_seconds`, i.e. as offsets from the internal epoch, which is
also how they come back out of `to_date`.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Optional, Union

from ..core.errors import InvalidIncrementError, InvalidIntervalError, InvalidUnitError
from ..core.time import (
    SECONDS_PER_DAY,
    DateTuple,
    normalize_date_tuple,
    seconds_at_start_of,
    seconds_at_start_of_month,
    seconds_to_date_tuple,
    is_leap_year,
    weekday_of,
)
from ..core.types import Number, TimeInterval, Unit, check_unit

_UNIT_SECONDS = {
    "Y": 365 * SECONDS_PER_DAY,
    "M": 30 * SECONDS_PER_DAY,
    "Q": 3 * 30 * SECONDS_PER_DAY,
    "W": 7 * SECONDS_PER_DAY,
    "D": SECONDS_PER_DAY,
    "H": 60 * 60,
    "m": 60,
    "s": 1,
}

_ZERO_INDEX = {"Y": 0, "M": 1, "Q": 1, "W": 1, "D": 1, "H": 0, "m": 0, "s": 0}

# Decimal resolution kept by `round_to_unit`, as 1/factor of the unit.
_ROUNDING_FACTOR = {"s": 1, "m": 60, "H": 4, "D": 4, "W": 4, "M": 4, "Y": 4, "Q": 4}

_QUARTER_FIRST_MONTH = {1: 1, 2: 4, 3: 7, 4: 10}


def unit_seconds(unit: str, year: Optional[int] = None) -> int:
    """Approximate duration of one `unit`. A year is 366 days when `year` is a leap year."""
    check_unit(unit)
    if unit == "Y" and year is not None and is_leap_year(year):
        return 366 * SECONDS_PER_DAY
    return _UNIT_SECONDS[unit]


def zero_index(unit: str) -> int:
    """First valid value of `unit` (months, quarters, weeks and days count from 1)."""
    return _ZERO_INDEX[check_unit(unit)]


def round_to_unit(value: float, unit: str) -> Number:
    """Round a unit count to the unit's resolution, half away from minus infinity."""
    factor = _ROUNDING_FACTOR[check_unit(unit)]
    r = math.floor(value * factor + 0.5) / factor
    return int(r) if r == int(r) else r


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _own_seconds(t: TimeInterval, is_delta: bool, year: Optional[int]) -> Number:
    if t.unit == "Y":
        return seconds_at_start_of(int(t.value))

    if t.unit == "M" and year is not None:
        return seconds_at_start_of_month(year, int(t.value)) - seconds_at_start_of(year)

    if t.unit == "Q" and year is not None:
        if t.value not in _QUARTER_FIRST_MONTH:
            raise InvalidUnitError(f"Invalid quarter {t.value}. Quarter must be between 1 and 4.")
        return seconds_at_start_of_month(year, _QUARTER_FIRST_MONTH[t.value]) - seconds_at_start_of(year)

    offset = zero_index(t.unit) if is_delta else 0
    return (t.value - offset) * unit_seconds(t.unit, year)


def to_seconds(t: TimeInterval, is_delta: bool = False, year: Optional[int] = None) -> Number:
    """
    Resolve `t` and its increment chain to a second count.

    Increments are resolved as deltas inside their parent (day 15 is 14 days
    past the first of the month). A year root provides the context that
    anchors months and quarters beneath it to real calendar positions.
    A week link directly below a day is a snapping marker and adds nothing.
    """
    if not isinstance(t, TimeInterval) or not _is_number(t.value) or t.value < 0:
        raise InvalidIntervalError(f"Invalid time interval: {t!r}")

    if t.unit == "Y" and year is None:
        year = int(t.value)

    seconds = _own_seconds(t, is_delta, year)
    inc = t.increment
    if inc is None:
        return seconds

    if t.unit == "D" and inc.unit == "W":
        return seconds

    if unit_seconds(inc.unit, year) >= unit_seconds(t.unit, year):
        raise InvalidIncrementError(
            f"Invalid increment: '{inc.unit}' is not finer than '{t.unit}'"
        )
    return seconds + to_seconds(inc, True, year)


# ============================================================
# Civil date tuples
# ============================================================

def from_date(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    precision: Unit = "D",
) -> TimeInterval:
    """
    Build a chain down to `precision`, rounding to the nearest bucket:
    July or later rounds the year up, day > 15 the month, hour >= 12 the
    day, minute >= 30 the hour, second >= 30 the minute.
    """
    check_unit(precision)
    y, mo, d, h, mi, s = normalize_date_tuple(year, month, day, hour, minute, second)

    if precision == "Y":
        return TimeInterval("Y", y + (1 if mo >= 7 else 0))

    if precision == "Q":
        return TimeInterval("Y", y, TimeInterval("Q", (mo - 1) // 3 + 1))

    if precision == "M":
        if d > 15:
            y, mo = (y + 1, 1) if mo == 12 else (y, mo + 1)
        return TimeInterval("Y", y, TimeInterval("M", mo))

    if precision == "W":
        # Snap back to the Sunday opening the week.
        y, mo, d, _, _, _ = normalize_date_tuple(y, mo, d - weekday_of(y, mo, d))
        return _chain(y, mo, d, marker=TimeInterval("W", 1))

    if precision == "D" and h >= 12:
        y, mo, d, h, mi, s = normalize_date_tuple(y, mo, d + 1)
    elif precision == "H" and mi >= 30:
        y, mo, d, h, mi, s = normalize_date_tuple(y, mo, d, h + 1)
    elif precision == "m" and s >= 30:
        y, mo, d, h, mi, s = normalize_date_tuple(y, mo, d, h, mi + 1)

    fields = {"D": (), "H": (h,), "m": (h, mi), "s": (h, mi, s)}[precision]
    return _chain(y, mo, d, *fields)


def _chain(y: int, mo: int, d: int, *clock: int, marker: Optional[TimeInterval] = None) -> TimeInterval:
    tail = marker
    for unit, value in reversed(list(zip(("H", "m", "s"), clock))):
        tail = TimeInterval(unit, value, tail)
    return TimeInterval("Y", y, TimeInterval("M", mo, TimeInterval("D", d, tail)))


def from_datetime(dt: Union[datetime, date], precision: Unit = "D") -> TimeInterval:
    if isinstance(dt, datetime):
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        return from_date(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, precision)
    return from_date(dt.year, dt.month, dt.day, precision=precision)


def to_date(t: TimeInterval, precision: Unit = "s") -> DateTuple:
    """
    Civil (year, month, day, hour, minute, second) of `t`, truncated at
    `precision`. Missing finer fields take their first valid value; a
    quarter maps to the first month of that quarter, a week to its day.
    """
    check_unit(precision)
    y, mo, d, h, mi, s = seconds_to_date_tuple(to_seconds(t))
    if precision == "Y":
        return y, 1, 1, 0, 0, 0
    if precision == "Q":
        return y, ((mo - 1) // 3) * 3 + 1, 1, 0, 0, 0
    if precision == "M":
        return y, mo, 1, 0, 0, 0
    if precision in ("W", "D"):
        return y, mo, d, 0, 0, 0
    if precision == "H":
        return y, mo, d, h, 0, 0
    if precision == "m":
        return y, mo, d, h, mi, 0
    return y, mo, d, h, mi, s


def to_datetime(t: TimeInterval, precision: Unit = "s") -> datetime:
    """`to_date` as a UTC datetime. Years before 1 are not representable."""
    return datetime(*to_date(t, precision), tzinfo=timezone.utc)


def from_seconds(seconds: Number, unit: Unit) -> TimeInterval:
    """Bare interval holding `seconds` expressed as a (rounded) count of `unit`."""
    return TimeInterval(unit, round_to_unit(seconds / unit_seconds(unit), unit))
