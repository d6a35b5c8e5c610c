"""
flextime.timeline
-----------------
Turn labelled bars (start/end strings) into chart rows with relative
positions inside a visible range. Bars sharing an id form one row.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from .api import parse
from .core.time import date_tuple_to_seconds
from .core.types import ParserKernel, TimeInterval, TimeSpan
from .engines.convert import to_date, to_seconds

Key = Union[str, int]
KernelArg = Union[None, str, ParserKernel, Sequence[str]]


@dataclass(frozen=True)
class BarData:
    start: str
    end: str
    label: str
    id: Optional[Key] = None
    color: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    class_name: Optional[str] = None


@dataclass(frozen=True)
class TimeSlot:
    id: Key
    start: str
    end: str
    label: str
    relative_start: float  # 0..1 inside the visible range
    relative_end: float
    relative_width: float
    color: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    class_name: Optional[str] = None


@dataclass(frozen=True)
class TimelineRow:
    row_id: Key
    label: str
    full_time_range: Tuple[str, str]
    slots: Tuple[TimeSlot, ...] = field(default_factory=tuple)
    class_name: Optional[str] = None


def slot_positions(span: TimeSpan, points: Sequence[TimeInterval]) -> np.ndarray:
    """Vectorized slot_position: one float per point, -1 everywhere for a zero-length span."""
    start = float(to_seconds(span.start))
    total = float(to_seconds(span.end)) - start
    secs = np.array([float(to_seconds(p)) for p in points], dtype=float)
    if total == 0:
        return np.full(secs.shape, -1.0)
    return (secs - start) / total


def _day_seconds(t: TimeInterval) -> int:
    # Day-resolution sort key.
    return date_tuple_to_seconds(*to_date(t, "D"))


def _format_day(t: TimeInterval) -> str:
    y, m, d, _, _, _ = to_date(t, "D")
    return f"{m:02d}/{d:02d}/{y}"


def process_timeline_data(
    bars: Sequence[BarData],
    start: Optional[str],
    end: Optional[str],
    kernel: KernelArg = None,
) -> List[TimelineRow]:
    if not bars:
        return []
    if not start or not end:
        raise ValueError("Range start and end must be provided")

    span = TimeSpan(parse(start, kernel), parse(end, kernel))

    groups: Dict[Key, List[BarData]] = {}
    for index, bar in enumerate(bars):
        key = bar.id if bar.id is not None else f"auto-{index}"
        groups.setdefault(key, []).append(bar)

    rows: List[Tuple[int, TimelineRow]] = []
    for group_id, group in groups.items():
        parsed = [(bar, parse(bar.start, kernel), parse(bar.end, kernel)) for bar in group]
        parsed.sort(key=lambda item: _day_seconds(item[1]))

        starts = [p[1] for p in parsed]
        ends = [p[2] for p in parsed]
        rel_start = slot_positions(span, starts)
        rel_end = slot_positions(span, ends)

        first = min(starts, key=_day_seconds)
        last = max(ends, key=_day_seconds)

        slots = tuple(
            TimeSlot(
                id=bar.id if bar.id is not None else f"{group_id}-slot-{i}",
                start=bar.start,
                end=bar.end,
                label=bar.label,
                relative_start=float(rs),
                relative_end=float(re_),
                relative_width=float(re_ - rs),
                color=bar.color,
                background_color=bar.background_color,
                text_color=bar.text_color,
                class_name=bar.class_name,
            )
            for i, ((bar, _, _), rs, re_) in enumerate(zip(parsed, rel_start, rel_end))
        )
        row = TimelineRow(
            row_id=group_id,
            label=parsed[0][0].label,
            full_time_range=(_format_day(first), _format_day(last)),
            slots=slots,
            class_name=parsed[0][0].class_name,
        )
        rows.append((_day_seconds(first), row))

    rows.sort(key=lambda item: item[0])
    return [row for _, row in rows]


def validate_time_slots(slots: Sequence[TimeSlot]) -> List[str]:
    """Human-readable message for every overlapping pair of slots."""
    errors: List[str] = []
    for i, a in enumerate(slots):
        for b in slots[i + 1:]:
            if not (a.relative_end <= b.relative_start or b.relative_end <= a.relative_start):
                errors.append(
                    f'Time slots "{a.label}" ({a.start}-{a.end}) and '
                    f'"{b.label}" ({b.start}-{b.end}) overlap'
                )
    return errors


def flatten_timeline_rows(rows: Sequence[TimelineRow]) -> List[BarData]:
    return [
        BarData(
            start=slot.start,
            end=slot.end,
            label=slot.label,
            id=slot.id,
            color=slot.color,
            background_color=slot.background_color,
            text_color=slot.text_color,
            class_name=slot.class_name,
        )
        for row in rows
        for slot in row.slots
    ]
