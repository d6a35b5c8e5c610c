"""
flextime.engines.pattern
------------------------
Format-string interpreter.

A pattern mixes unit letters (Y M Q W D H m s) with literal text. Each unit
letter consumes one input digit; a run of the same letter accumulates a
multi-digit number (`YYYY` reads four digits). Text between single quotes,
and any character that is not a unit letter, must match the input exactly.

After the scan the collected numbers are ordered by precision and linked
into a chain. Tokens that do not make the chain strictly finer (a repeated
unit, or a unit ranked below the current tail) are dropped, so loosely
written patterns still parse. Input left over after the pattern is used up
is ignored.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Union

from ..core.errors import (
    LiteralMismatchError,
    NoIntervalsFoundError,
    NoPatternMatchedError,
    NotADigitError,
    ParseError,
)
from ..core.types import UNITS, ParserKernel, TimeInterval

logger = logging.getLogger(__name__)

PatternOrKernel = Union[str, ParserKernel, Sequence[str]]


def _char_at(text: str, pos: int) -> str:
    return text[pos] if pos < len(text) else ""


def _expect(expected: str, text: str, pos: int, source: str, pattern: str) -> None:
    found = _char_at(text, pos)
    if found != expected:
        raise LiteralMismatchError(
            f"Invalid time string: {source!r}. Expected {expected!r} at position {pos}, "
            f"but found {found!r}",
            text=source,
            pattern=pattern,
        )


def scan(text: str, pattern: str) -> List[Tuple[str, int]]:
    """Run the two-cursor scan and return the (unit, value) tokens in pattern order."""
    value_str = text.strip()
    fmt = pattern.strip()

    tokens: List[List] = []
    last_unit: Optional[str] = None
    i = 0
    pos = 0
    n = len(fmt)

    while i < n:
        ch = fmt[i]
        i += 1

        if ch == "'":
            while i < n and fmt[i] != "'":
                _expect(fmt[i], value_str, pos, text, pattern)
                pos += 1
                i += 1
            i += 1  # closing quote
            last_unit = None
            continue

        if ch not in UNITS:
            _expect(ch, value_str, pos, text, pattern)
            pos += 1
            last_unit = None
            continue

        c = _char_at(value_str, pos)
        if len(c) != 1 or not ("0" <= c <= "9"):
            raise NotADigitError(
                f"Invalid time string: {text!r}. Expected a digit for '{ch}' at position {pos}, "
                f"but found {c!r}",
                text=text,
                pattern=pattern,
            )
        digit = ord(c) - ord("0")
        pos += 1

        if ch == last_unit:
            tokens[-1][1] = tokens[-1][1] * 10 + digit
        else:
            tokens.append([ch, digit])
            last_unit = ch

    return [(unit, value) for unit, value in tokens]


def link(tokens: Sequence[Tuple[str, int]]) -> TimeInterval:
    """Order tokens by precision and chain every strictly finer one below the coarsest."""
    if not tokens:
        raise NoIntervalsFoundError("No valid time intervals found.")

    ordered = sorted(tokens, key=lambda tok: UNITS.index(tok[0]))
    kept = [ordered[0]]
    for tok in ordered[1:]:
        if UNITS.index(tok[0]) > UNITS.index(kept[-1][0]):
            kept.append(tok)

    node: Optional[TimeInterval] = None
    for unit, value in reversed(kept):
        node = TimeInterval(unit, value, node)  # type: ignore[arg-type]
    return node  # type: ignore[return-value]


def parse_pattern(text: str, pattern: str) -> TimeInterval:
    tokens = scan(text, pattern)
    if not tokens:
        raise NoIntervalsFoundError(
            f"Invalid time string: {text!r}. No valid time intervals found in pattern {pattern!r}.",
            text=text,
            pattern=pattern,
        )
    return link(tokens)


def parse_with_kernel(text: str, kernel: ParserKernel) -> TimeInterval:
    """Try each pattern of `kernel` in order; the first one that parses wins."""
    failures: List[Tuple[str, ParseError]] = []
    for pattern in kernel.patterns:
        try:
            return parse_pattern(text, pattern)
        except ParseError as e:
            logger.debug("kernel %s: pattern %r rejected %r: %s", kernel.name, pattern, text, e)
            failures.append((pattern, e))
    raise NoPatternMatchedError(
        f"Invalid time string: {text!r}. No valid patterns found in kernel '{kernel.name}'.",
        text=text,
        failures=failures,
    )


def parse(text: str, fmt: PatternOrKernel) -> TimeInterval:
    """Parse with a single pattern string, a ParserKernel, or a sequence of patterns."""
    if isinstance(fmt, str):
        return parse_pattern(text, fmt)
    if isinstance(fmt, ParserKernel):
        return parse_with_kernel(text, fmt)
    return parse_with_kernel(text, ParserKernel("adhoc", tuple(fmt)))
