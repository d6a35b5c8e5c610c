from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import List, Optional, Sequence, Union

from .core.config import get_settings
from .core.registry import KernelRegistry
from .core.time import DateTuple
from .core.types import Number, Ordering, ParserKernel, TimeInterval, TimeSpan, Unit
from .engines import algebra as _algebra
from .engines import convert as _convert
from .engines import pattern as _pattern
from .engines import splitter as _splitter
from .engines.formatting import to_string as _to_string

logger = logging.getLogger(__name__)

_registry: Optional[KernelRegistry] = None

def set_registry(reg: KernelRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> KernelRegistry:
    if _registry is None:
        raise RuntimeError("Kernel registry not initialized")
    return _registry

def list_kernels() -> List[str]:
    return _reg().list()

def get_kernel(name: Optional[str] = None) -> ParserKernel:
    return _reg().get(name if name is not None else get_settings().default_kernel)

def register_kernel(kernel: ParserKernel, *, overwrite: bool = False) -> None:
    _reg().register(kernel, overwrite=overwrite)
    logger.debug("registered kernel %s (%d patterns)", kernel.name, len(kernel.patterns))

# ============================================================
# Parsing and formatting
# ============================================================

def parse(
    text: str,
    pattern_or_kernel: Union[None, str, ParserKernel, Sequence[str]] = None,
) -> TimeInterval:
    """
    Parse `text` into a TimeInterval.

    `pattern_or_kernel` is a single pattern string ("YYYY-MM-DD"), a
    ParserKernel, or a sequence of pattern strings tried in order. When
    omitted, the configured default kernel is used.
    """
    fmt = pattern_or_kernel if pattern_or_kernel is not None else get_kernel()
    return _pattern.parse(text, fmt)

def to_string(t: TimeInterval) -> str:
    return _to_string(t)

# ============================================================
# Model conversions
# ============================================================

def to_seconds(t: TimeInterval, is_delta: bool = False, year: Optional[int] = None) -> Number:
    return _convert.to_seconds(t, is_delta, year)

def from_date(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    *,
    precision: Unit = "D",
) -> TimeInterval:
    return _convert.from_date(year, month, day, hour, minute, second, precision)

def from_datetime(dt: Union[datetime, date], precision: Unit = "D") -> TimeInterval:
    return _convert.from_datetime(dt, precision)

def now(precision: Unit = "Y") -> TimeInterval:
    return _convert.from_datetime(datetime.now(timezone.utc), precision)

def to_date(t: TimeInterval, precision: Unit = "s") -> DateTuple:
    return _convert.to_date(t, precision)

def from_seconds(seconds: Number, unit: Unit) -> TimeInterval:
    return _convert.from_seconds(seconds, unit)

# ============================================================
# Algebra
# ============================================================

def difference_in_seconds(a: TimeInterval, b: TimeInterval) -> Number:
    return _algebra.difference_in_seconds(a, b)

def difference_in_unit(a: TimeInterval, b: TimeInterval, unit: Unit) -> Number:
    return _algebra.difference_in_unit(a, b, unit)

def compare(a: TimeInterval, b: TimeInterval) -> Ordering:
    return _algebra.compare(a, b)

def is_before(a: TimeInterval, b: TimeInterval) -> bool:
    return _algebra.is_before(a, b)

def is_after(a: TimeInterval, b: TimeInterval) -> bool:
    return _algebra.is_after(a, b)

def is_same(a: TimeInterval, b: TimeInterval) -> bool:
    return _algebra.is_same(a, b)

def is_in_range(point: TimeInterval, span: TimeSpan) -> bool:
    return _algebra.is_in_range(point, span)

def slot_position(span: TimeSpan, point: TimeInterval) -> float:
    return _algebra.slot_position(span, point)

# ============================================================
# Range splitting
# ============================================================

def split_range(span: TimeSpan, unit: Unit) -> List[TimeInterval]:
    return _splitter.split(span, unit)

def flatten(intervals: Sequence[TimeInterval], unit: Unit) -> List[TimeInterval]:
    return _splitter.flatten(intervals, unit)
