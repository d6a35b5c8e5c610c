from __future__ import annotations

from typing import Sequence, Tuple


class FlextimeError(Exception):
    """Base error."""

class InvalidUnitError(FlextimeError, ValueError):
    """Raised for an unknown unit letter or a month/day outside its valid range."""

class InvalidIntervalError(FlextimeError, ValueError):
    """Raised when a TimeInterval with a negative or non-numeric value is resolved."""

class InvalidIncrementError(FlextimeError, ValueError):
    """Raised when an increment is not strictly finer than its parent."""

class RangeTooLargeError(FlextimeError):
    """Raised when a general-path split would exceed the configured step limit."""


class ParseError(FlextimeError, ValueError):
    """Base for every parser failure."""

    def __init__(self, message: str, *, text: str = "", pattern: str = "") -> None:
        super().__init__(message)
        self.text = text
        self.pattern = pattern

class LiteralMismatchError(ParseError):
    pass

class NotADigitError(ParseError):
    pass

class NoIntervalsFoundError(ParseError):
    pass

class NoPatternMatchedError(ParseError):
    """Every pattern of a kernel failed. `failures` keeps (pattern, error) pairs."""

    def __init__(self, message: str, *, text: str = "", failures: Sequence[Tuple[str, ParseError]] = ()) -> None:
        super().__init__(message, text=text)
        self.failures = tuple(failures)
