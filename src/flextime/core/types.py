from __future__ import annotations
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any, Dict, Iterator, Literal, Optional, Sequence, Tuple, Union

from .errors import InvalidUnitError

Unit = Literal["Y", "M", "Q", "W", "D", "H", "m", "s"]

# Precision ranking, coarsest first. The parser sorts collected tokens by it.
UNITS: Tuple[Unit, ...] = ("Y", "M", "Q", "W", "D", "H", "m", "s")

UNIT_NAMES: Dict[str, str] = {
    "Y": "year",
    "M": "month",
    "Q": "quarter",
    "W": "week",
    "D": "day",
    "H": "hour",
    "m": "minute",
    "s": "second",
}

Number = Union[int, float]


def check_unit(unit: str) -> Unit:
    if unit not in UNITS:
        raise InvalidUnitError(f"Invalid time interval unit {unit!r}. Expected one of {''.join(UNITS)}")
    return unit  # type: ignore[return-value]


def unit_rank(unit: str) -> int:
    return UNITS.index(check_unit(unit))


class Ordering(IntEnum):
    BEFORE = -1
    EQUAL = 0
    AFTER = 1


@dataclass(frozen=True)
class TimeInterval:
    """
    A point or duration at a given precision.

    `increment` is the next finer link of the chain, e.g. 2024-03-15 is
    Y(2024) -> M(3) -> D(15). Instances are immutable; the `with_*` helpers
    return modified copies.
    """
    unit: Unit
    value: Number
    increment: Optional["TimeInterval"] = None

    def __post_init__(self) -> None:
        check_unit(self.unit)

    def with_value(self, value: Number) -> "TimeInterval":
        return replace(self, value=value)

    def with_unit(self, unit: Unit) -> "TimeInterval":
        return replace(self, unit=unit)

    def with_increment(self, increment: Optional["TimeInterval"]) -> "TimeInterval":
        return replace(self, increment=increment)

    def chain(self) -> Iterator["TimeInterval"]:
        node: Optional[TimeInterval] = self
        while node is not None:
            yield node
            node = node.increment

    @property
    def precision(self) -> Unit:
        """Unit of the finest link."""
        unit = self.unit
        for node in self.chain():
            unit = node.unit
        return unit

    def find(self, unit: Unit) -> Optional["TimeInterval"]:
        """First link of the chain carrying `unit`, if any."""
        for node in self.chain():
            if node.unit == unit:
                return node
        return None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.unit, "value": self.value}
        if self.increment is not None:
            out["increment"] = self.increment.to_dict()
        return out

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "TimeInterval":
        inc = data.get("increment")
        return TimeInterval(
            data["type"],
            data["value"],
            TimeInterval.from_dict(inc) if inc else None,
        )

    def __str__(self) -> str:
        from ..engines.formatting import to_string
        return to_string(self)


@dataclass(frozen=True)
class TimeSpan:
    """Ordered pair of intervals. `start <= end` is not enforced."""
    start: TimeInterval
    end: TimeInterval

    @staticmethod
    def parse(start: str, end: str, kernel: Any = None) -> "TimeSpan":
        from ..api import parse
        return TimeSpan(parse(start, kernel), parse(end, kernel))

    @property
    def duration_in_seconds(self) -> int:
        from ..engines.algebra import difference_in_seconds
        return difference_in_seconds(self.start, self.end)

    def duration_in_unit(self, unit: Unit) -> Number:
        from ..engines.algebra import difference_in_unit
        return difference_in_unit(self.start, self.end, unit)

    def split_into(self, unit: Unit) -> list:
        from ..engines.splitter import split
        return split(self, unit)

    def position_of(self, point: TimeInterval) -> float:
        from ..engines.algebra import slot_position
        return slot_position(self, point)

    def contains(self, point: TimeInterval) -> bool:
        from ..engines.algebra import is_in_range
        return is_in_range(point, self)

    def with_start(self, start: TimeInterval) -> "TimeSpan":
        return replace(self, start=start)

    def with_end(self, end: TimeInterval) -> "TimeSpan":
        return replace(self, end=end)

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"


@dataclass(frozen=True)
class ParserKernel:
    """Ordered list of patterns tried as alternatives."""
    name: str
    patterns: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "patterns", tuple(self.patterns))
        if not self.patterns:
            raise ValueError(f"Kernel '{self.name}' has no patterns")

    def tweak(self, **kwargs) -> "ParserKernel":
        return replace(self, **kwargs)

    def extend(self, patterns: Sequence[str], *, name: Optional[str] = None) -> "ParserKernel":
        return replace(self, name=name or self.name, patterns=self.patterns + tuple(patterns))
