from __future__ import annotations

from ..core.types import Number, Ordering, TimeInterval, TimeSpan, Unit
from .convert import round_to_unit, to_seconds, unit_seconds


def difference_in_seconds(start: TimeInterval, end: TimeInterval) -> Number:
    """Signed seconds from `start` to `end`; positive when `start` comes first."""
    return to_seconds(end) - to_seconds(start)


def difference_in_unit(start: TimeInterval, end: TimeInterval, unit: Unit) -> Number:
    """
    Signed difference expressed in `unit`, using the fixed approximate unit
    lengths (Y=365d, Q=90d, M=30d, W=7d), rounded to quarter units (whole
    seconds, 1/60 minutes).
    """
    return round_to_unit(difference_in_seconds(start, end) / unit_seconds(unit), unit)


def compare(a: TimeInterval, b: TimeInterval) -> Ordering:
    diff = difference_in_seconds(a, b)
    if diff > 0:
        return Ordering.BEFORE
    if diff < 0:
        return Ordering.AFTER
    return Ordering.EQUAL


def is_before(a: TimeInterval, b: TimeInterval) -> bool:
    return compare(a, b) is Ordering.BEFORE

def is_after(a: TimeInterval, b: TimeInterval) -> bool:
    return compare(a, b) is Ordering.AFTER

def is_same(a: TimeInterval, b: TimeInterval) -> bool:
    return compare(a, b) is Ordering.EQUAL


def is_in_range(point: TimeInterval, span: TimeSpan) -> bool:
    """Inclusive on both ends. A reversed span contains nothing."""
    t = to_seconds(point)
    return to_seconds(span.start) <= t <= to_seconds(span.end)


def slot_position(span: TimeSpan, point: TimeInterval) -> float:
    """
    Fractional position of `point` in `span`: 0 at the start, 1 at the end,
    outside [0, 1] for points outside the span. A zero-length span yields -1.
    """
    start = to_seconds(span.start)
    total = to_seconds(span.end) - start
    if total == 0:
        return -1.0
    return (to_seconds(point) - start) / total


def span_duration(span: TimeSpan, unit: Unit = "s") -> Number:
    if unit == "s":
        return difference_in_seconds(span.start, span.end)
    return difference_in_unit(span.start, span.end, unit)
