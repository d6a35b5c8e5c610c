"""flextime public API.

Hierarchical time intervals: parse, convert, compare and split.
Most users only need the functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    parse,
    to_string,
    to_seconds,
    from_date,
    from_datetime,
    now,
    to_date,
    from_seconds,
    difference_in_seconds,
    difference_in_unit,
    compare,
    is_before,
    is_after,
    is_same,
    is_in_range,
    slot_position,
    split_range,
    flatten,
    list_kernels,
    get_kernel,
    register_kernel,
)
from .core.config import Settings, get_settings, set_settings
from .core.errors import (
    FlextimeError,
    InvalidIncrementError,
    InvalidIntervalError,
    InvalidUnitError,
    LiteralMismatchError,
    NoIntervalsFoundError,
    NoPatternMatchedError,
    NotADigitError,
    ParseError,
    RangeTooLargeError,
)
from .core.types import Ordering, ParserKernel, TimeInterval, TimeSpan
from .engines.kernels import DEFAULT_KERNEL

__all__ = [
    "parse",
    "to_string",
    "to_seconds",
    "from_date",
    "from_datetime",
    "now",
    "to_date",
    "from_seconds",
    "difference_in_seconds",
    "difference_in_unit",
    "compare",
    "is_before",
    "is_after",
    "is_same",
    "is_in_range",
    "slot_position",
    "split_range",
    "flatten",
    "list_kernels",
    "get_kernel",
    "register_kernel",
    "TimeInterval",
    "TimeSpan",
    "ParserKernel",
    "Ordering",
    "DEFAULT_KERNEL",
    "Settings",
    "get_settings",
    "set_settings",
    "FlextimeError",
    "InvalidUnitError",
    "InvalidIntervalError",
    "InvalidIncrementError",
    "RangeTooLargeError",
    "ParseError",
    "LiteralMismatchError",
    "NotADigitError",
    "NoIntervalsFoundError",
    "NoPatternMatchedError",
]
