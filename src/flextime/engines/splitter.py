"""
flextime.engines.splitter
-------------------------
Enumerate a span into consecutive intervals of one unit (axis ticks).

Three strategies, tried in order:

1. both ends already carry `unit` at their root: every integer in between;
2. both ends are year-rooted and `unit` is Q, M, W or D: walk the calendar
   year by year, taking the first/last sub-position from the span ends;
3. otherwise: step a cursor by the unit's approximate length from the start
   date (truncated to `unit`) until it passes the end. Fixed 30/90 day steps
   drift against the calendar, so a step landing in the bucket already
   emitted is skipped.

Strategies 1 and 2 return an empty list for a reversed span; strategy 3
returns `[span.start]` for any span shorter than one step, reversed spans
included.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from ..core.config import get_settings
from ..core.errors import RangeTooLargeError
from ..core.time import date_tuple_to_seconds, days_in_month, seconds_to_date_tuple
from ..core.types import TimeInterval, TimeSpan, Unit, check_unit
from .accessors import day_number, last_month_number, month_number, quarter_number, week_number
from .algebra import difference_in_seconds, difference_in_unit
from .convert import from_date, to_date, unit_seconds

logger = logging.getLogger(__name__)


def _check_count(count: int, span: TimeSpan, unit: str, max_steps: int) -> None:
    if count > max_steps:
        raise RangeTooLargeError(
            f"Splitting {span} by '{unit}' needs about {count} steps (limit {max_steps})"
        )


def _same_unit(span: TimeSpan, unit: Unit) -> List[TimeInterval]:
    return [TimeInterval(unit, v) for v in range(int(span.start.value), int(span.end.value) + 1)]


def _year_sweep(
    span: TimeSpan,
    unit: Unit,
    accessor: Callable[..., int],
    last: int,
    end_accessor: Optional[Callable[..., int]] = None,
) -> List[TimeInterval]:
    y0, y1 = int(span.start.value), int(span.end.value)
    out: List[TimeInterval] = []
    for year in range(y0, y1 + 1):
        first = accessor(span.start, default=1) if year == y0 else 1
        final = (end_accessor or accessor)(span.end, default=last) if year == y1 else last
        for j in range(first, final + 1):
            out.append(TimeInterval("Y", year, TimeInterval(unit, j)))
    return out


def _year_days(span: TimeSpan) -> List[TimeInterval]:
    y0, y1 = int(span.start.value), int(span.end.value)
    out: List[TimeInterval] = []
    for year in range(y0, y1 + 1):
        m_first = month_number(span.start, default=1) if year == y0 else 1
        m_last = last_month_number(span.end, default=12) if year == y1 else 12
        for month in range(m_first, m_last + 1):
            dim = days_in_month(year, month)
            d_first = day_number(span.start, default=1) if (year == y0 and month == m_first) else 1
            d_last = day_number(span.end, default=dim) if (year == y1 and month == m_last) else dim
            for day in range(d_first, d_last + 1):
                out.append(TimeInterval("Y", year, TimeInterval("M", month, TimeInterval("D", day))))
    return out


_YEAR_SWEEPS: Dict[str, tuple] = {
    "Q": (quarter_number, 4, None),
    "M": (month_number, 12, last_month_number),
    "W": (week_number, 52, None),
}


def _walk(span: TimeSpan, unit: Unit, max_steps: int) -> List[TimeInterval]:
    step = unit_seconds(unit)
    total = difference_in_seconds(span.start, span.end)
    if total < step:
        return [span.start]
    _check_count(int(total // step) + 2, span, unit, max_steps)

    cursor = date_tuple_to_seconds(*to_date(span.start, unit))
    logger.debug(
        "Splitting %s .. %s by %s from %s", span.start, span.end, unit, seconds_to_date_tuple(cursor)
    )

    out: List[TimeInterval] = []
    while True:
        t = from_date(*seconds_to_date_tuple(cursor), precision=unit)
        if not out or t != out[-1]:
            out.append(t)
        cursor += step
        nxt = from_date(*seconds_to_date_tuple(cursor), precision=unit)
        if difference_in_unit(nxt, span.end, unit) < 0:
            break
        _check_count(len(out) + 1, span, unit, max_steps)
    return out


def split(span: TimeSpan, unit: Unit, *, max_steps: Optional[int] = None) -> List[TimeInterval]:
    """Every regular `unit` interval covering `span`, eagerly materialized."""
    check_unit(unit)
    if max_steps is None:
        max_steps = get_settings().max_split_steps
    start, end = span.start, span.end

    if start.unit == unit and end.unit == unit:
        _check_count(int(end.value) - int(start.value) + 1, span, unit, max_steps)
        return _same_unit(span, unit)

    if start.unit == "Y" and end.unit == "Y" and unit in ("Q", "M", "W", "D"):
        per_year = 366 if unit == "D" else _YEAR_SWEEPS[unit][1]
        _check_count((int(end.value) - int(start.value) + 1) * per_year, span, unit, max_steps)
        if unit == "D":
            return _year_days(span)
        accessor, last, end_accessor = _YEAR_SWEEPS[unit]
        return _year_sweep(span, unit, accessor, last, end_accessor)

    return _walk(span, unit, max_steps)


def flatten(intervals: Sequence[TimeInterval], unit: Unit) -> List[TimeInterval]:
    """Replace each chain by its `unit` link, keeping chains that have none."""
    out: List[TimeInterval] = []
    for t in intervals:
        sub = t.find(unit)
        out.append(sub if sub is not None else t)
    return out
