# tests/test_parser.py

import logging
import random

import pytest

import flextime
from flextime.core.errors import (
    LiteralMismatchError,
    NoIntervalsFoundError,
    NoPatternMatchedError,
    NotADigitError,
    ParseError,
)
from flextime.core.types import ParserKernel, TimeInterval
from flextime.engines import pattern as pt


def Y(v, inc=None):
    return TimeInterval("Y", v, inc)


def M(v, inc=None):
    return TimeInterval("M", v, inc)


def D(v, inc=None):
    return TimeInterval("D", v, inc)


def test_single_pattern():
    assert pt.parse_pattern("2024-03-15", "YYYY-MM-DD") == Y(2024, M(3, D(15)))
    assert pt.parse_pattern("14:05", "HH:mm") == TimeInterval("H", 14, TimeInterval("m", 5))


def test_scan_tokens_in_pattern_order():
    assert pt.scan("15/03/2024", "DD/MM/YYYY") == [("D", 15), ("M", 3), ("Y", 2024)]


def test_tokens_are_sorted_by_precision():
    assert pt.parse_pattern("15.03.2024", "DD.MM.YYYY") == Y(2024, M(3, D(15)))


def test_quoted_literals():
    assert pt.parse_pattern("Q2/2025", "'Q'Q/YYYY") == Y(2025, TimeInterval("Q", 2))
    assert pt.parse_pattern("2025Q3", "YYYY'Q'Q") == Y(2025, TimeInterval("Q", 3))


def test_surrounding_whitespace_is_ignored():
    assert pt.parse_pattern("  2024-03 ", " YYYY-MM ") == Y(2024, M(3))


def test_trailing_input_is_tolerated():
    assert pt.parse_pattern("2024-03-15T10:00", "YYYY-MM-DD") == Y(2024, M(3, D(15)))


def test_duplicate_unit_is_dropped():
    # the second run of Y is a separate token, and not finer than the first
    assert pt.parse_pattern("2024-05", "YYYY-YY") == Y(2024)


def test_link_keeps_only_strictly_finer_tokens():
    assert pt.link([("D", 3), ("Y", 2024), ("D", 9), ("M", 1)]) == Y(2024, M(1, D(3)))
    assert pt.link([("D", 3), ("H", 4)]) == D(3, TimeInterval("H", 4))


def test_literal_mismatch():
    with pytest.raises(LiteralMismatchError) as ei:
        pt.parse_pattern("2024/03", "YYYY-MM")
    assert ei.value.pattern == "YYYY-MM"
    assert ei.value.text == "2024/03"


def test_not_a_digit():
    with pytest.raises(NotADigitError):
        pt.parse_pattern("20a4", "YYYY")
    # input runs out inside a unit run
    with pytest.raises(NotADigitError):
        pt.parse_pattern("202", "YYYY")


def test_no_intervals_found():
    with pytest.raises(NoIntervalsFoundError):
        pt.parse_pattern("today", "'today'")
    with pytest.raises(NoIntervalsFoundError):
        pt.link([])


def test_parse_errors_are_value_errors():
    with pytest.raises(ValueError):
        pt.parse_pattern("x", "Y")
    assert issubclass(NoPatternMatchedError, ParseError)


def test_kernel_first_success_wins():
    k = ParserKernel("k", ("YYYY-MM-DD", "YYYY"))
    assert pt.parse_with_kernel("2024", k) == Y(2024)
    assert pt.parse_with_kernel("2024-02-03", k) == Y(2024, M(2, D(3)))


def test_kernel_fallback_independent_of_order():
    patterns = ["YYYY-MM-DD", "MM/DD/YYYY", "DD.MM.YYYY", "HH:mm"]
    inputs = {
        "2024-02-03": Y(2024, M(2, D(3))),
        "02/03/2024": Y(2024, M(2, D(3))),
        "03.02.2024": Y(2024, M(2, D(3))),
        "08:15": TimeInterval("H", 8, TimeInterval("m", 15)),
    }
    random.seed(3)
    for _ in range(10):
        random.shuffle(patterns)
        for text, expected in inputs.items():
            assert pt.parse(text, patterns) == expected


def test_kernel_exhaustion_collects_failures():
    k = ParserKernel("k", ("YYYY-MM-DD", "HH:mm"))
    with pytest.raises(NoPatternMatchedError) as ei:
        pt.parse_with_kernel("nope", k)
    assert [p for p, _ in ei.value.failures] == ["YYYY-MM-DD", "HH:mm"]
    assert all(isinstance(e, NotADigitError) for _, e in ei.value.failures)


def test_rejected_patterns_are_logged(caplog):
    k = ParserKernel("k", ("HH:mm", "YYYY"))
    with caplog.at_level(logging.DEBUG, logger="flextime.engines.pattern"):
        pt.parse_with_kernel("2024", k)
    assert any("HH:mm" in r.getMessage() for r in caplog.records)


def test_parse_dispatch():
    assert pt.parse("2024", "YYYY") == Y(2024)
    assert pt.parse("2024", ParserKernel("k", ("YYYY",))) == Y(2024)
    assert pt.parse("2024", ["YYYY-MM", "YYYY"]) == Y(2024)
    # the first pattern that scans wins, even when it leaves input unread
    assert pt.parse("2024", ("MM", "YYYY")) == M(20)


def test_public_parse_defaults_to_default_kernel():
    assert flextime.parse("2024-03-15") == Y(2024, M(3, D(15)))


def test_invalid_string():
    with pytest.raises(NoPatternMatchedError):
        flextime.parse("invalid-date")
