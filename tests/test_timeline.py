# tests/test_timeline.py

import numpy as np
import pytest

import flextime
from flextime import TimeSpan
from flextime.timeline import (
    BarData,
    flatten_timeline_rows,
    process_timeline_data,
    slot_positions,
    validate_time_slots,
)

P = flextime.parse


@pytest.fixture
def bars():
    return [
        BarData(start="2024-03-01", end="2024-04-01", label="Design", id="team-a", color="#f00"),
        BarData(start="2024-01-01", end="2024-02-01", label="Research", id="team-a"),
        BarData(start="2024-02-01", end="2024-06-01", label="Build", id="team-b"),
        BarData(start="2024-05-01", end="2024-07-01", label="Launch"),
    ]


def test_slot_positions_vectorized():
    span = TimeSpan(P("2024-01-01"), P("2024-01-05"))
    pos = slot_positions(span, [P("2024-01-01"), P("2024-01-02"), P("2024-01-05")])
    assert isinstance(pos, np.ndarray)
    assert pos.tolist() == pytest.approx([0.0, 0.25, 1.0])


def test_slot_positions_degenerate_span():
    span = TimeSpan(P("2024-01-01"), P("2024-01-01"))
    assert slot_positions(span, [P("2024-01-01"), P("2025")]).tolist() == [-1.0, -1.0]


def test_rows_grouped_and_sorted(bars):
    rows = process_timeline_data(bars, "2024-01-01", "2024-12-31")
    assert [r.row_id for r in rows] == ["team-a", "team-b", "auto-3"]

    a = rows[0]
    assert [s.label for s in a.slots] == ["Research", "Design"]
    assert a.label == "Research"
    assert a.full_time_range == ("01/01/2024", "04/01/2024")
    assert a.slots[1].color == "#f00"


def test_relative_positions(bars):
    rows = process_timeline_data(bars, "2024-01-01", "2025-01-01")
    research = rows[0].slots[0]
    assert research.relative_start == 0.0
    assert research.relative_end == pytest.approx(31 / 366)
    assert research.relative_width == pytest.approx(research.relative_end - research.relative_start)


def test_slot_ids(bars):
    rows = process_timeline_data(bars, "2024-01-01", "2024-12-31")
    assert rows[0].slots[0].id == "team-a"
    assert rows[2].slots[0].id == "auto-3-slot-0"


def test_empty_and_missing_range(bars):
    assert process_timeline_data([], "2024-01-01", "2024-12-31") == []
    with pytest.raises(ValueError):
        process_timeline_data(bars, None, "2024-12-31")


def test_unparseable_bar(bars):
    with pytest.raises(flextime.ParseError):
        process_timeline_data(bars + [BarData(start="soon", end="later", label="?")], "2024-01-01", "2024-12-31")


def test_validate_time_slots(bars):
    rows = process_timeline_data(bars, "2024-01-01", "2024-12-31")
    assert validate_time_slots(rows[0].slots) == []

    overlapping = process_timeline_data(
        [
            BarData(start="2024-01-01", end="2024-03-01", label="A", id="r"),
            BarData(start="2024-02-01", end="2024-04-01", label="B", id="r"),
        ],
        "2024-01-01",
        "2024-12-31",
    )
    errors = validate_time_slots(overlapping[0].slots)
    assert len(errors) == 1
    assert '"A"' in errors[0] and '"B"' in errors[0]


def test_flatten_rows(bars):
    rows = process_timeline_data(bars, "2024-01-01", "2024-12-31")
    flat = flatten_timeline_rows(rows)
    assert [b.label for b in flat] == ["Research", "Design", "Build", "Launch"]
    assert flat[1].color == "#f00"
