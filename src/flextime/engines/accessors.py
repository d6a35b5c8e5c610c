"""
flextime.engines.accessors
--------------------------
Read a quarter/month/week/day position out of whatever precision an
interval chain carries. Used by the year-denominated split paths; each
accessor falls back to `default` when the chain says nothing about it.
"""

from __future__ import annotations

import math

from ..core.time import to_jdn
from ..core.types import TimeInterval


def _year_child(t: TimeInterval, unit: str):
    if t.unit == "Y" and t.increment is not None and t.increment.unit == unit:
        return t.increment
    return None


def day_number(t: TimeInterval, default: int = 1) -> int:
    month = _year_child(t, "M")
    if month is not None and month.increment is not None and month.increment.unit == "D":
        return int(month.increment.value)
    return default


def month_number(t: TimeInterval, default: int = 1) -> int:
    month = _year_child(t, "M")
    if month is not None:
        return int(month.value)
    quarter = _year_child(t, "Q")
    if quarter is not None:
        return (int(quarter.value) - 1) * 3 + 1

    if t.unit == "M":
        return int(t.value)
    if t.unit == "Q":
        return (int(t.value) - 1) * 3 + 1
    if t.unit == "W":
        return math.ceil(t.value / 4)
    if t.unit == "D":
        return math.ceil(t.value / 30)
    return default


def last_month_number(t: TimeInterval, default: int = 12) -> int:
    """Like month_number, but a quarter counts as its last month (end of a range)."""
    quarter = _year_child(t, "Q")
    if quarter is not None:
        return int(quarter.value) * 3
    if t.unit == "Q":
        return int(t.value) * 3
    return month_number(t, default=default)


def week_number(t: TimeInterval, default: int = 1) -> int:
    week = _year_child(t, "W")
    if week is not None:
        return int(week.value)

    if t.unit == "W":
        return int(t.value)
    if t.unit == "D":
        return math.ceil(t.value / 7)

    if t.unit == "Y" and t.increment is not None and t.increment.unit == "M":
        # Week of the year counted from January 1st, capped at 52.
        year = int(t.value)
        doy = to_jdn(year, int(t.increment.value), day_number(t)) - to_jdn(year, 1, 1) + 1
        return min((doy - 1) // 7 + 1, 52)
    return default


def quarter_number(t: TimeInterval, default: int = 1) -> int:
    quarter = _year_child(t, "Q")
    if quarter is not None:
        return int(quarter.value)
    month = _year_child(t, "M")
    if month is not None:
        return (int(month.value) - 1) // 3 + 1

    if t.unit == "Q":
        return int(t.value)
    if t.unit == "W":
        if t.value < 13:
            return 1
        if t.value < 26:
            return 2
        if t.value < 39:
            return 3
        return 4
    if t.unit == "D":
        return min((math.ceil(t.value / 30) - 1) // 3 + 1, 4) if t.value > 0 else 1
    return default
