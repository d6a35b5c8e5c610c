from __future__ import annotations

from typing import List

from ..core.types import UNIT_NAMES, TimeInterval


def _duration(t: TimeInterval) -> str:
    name = UNIT_NAMES[t.unit]
    return f"{t.value} {name}" + ("" if t.value == 1 else "s")


def _two(v) -> str:
    return f"{int(v):02d}"


def to_string(t: TimeInterval) -> str:
    """
    Render `t` at its own finest precision:

      Y           2023
      Y Q         2023/Q1
      Y W         2023/W07
      Y M         2023-03
      Y M D       2023-03-15
      Y M D H     2023-03-15 14
      Y M D H m   2023-03-15 14:30
      Y M D H m s 2023-03-15 14:30:45
      H m [s]     14:30[:45]

    Any other root (and a bare hour) renders as a duration phrase such as
    "3 days". Every form is accepted back by the default kernel.
    """
    if t.unit == "H" and t.increment is not None and t.increment.unit == "m":
        out = f"{_two(t.value)}:{_two(t.increment.value)}"
        sec = t.increment.increment
        if sec is not None and sec.unit == "s":
            out += f":{_two(sec.value)}"
        return out

    if t.unit != "Y":
        return _duration(t)

    out = f"{t.value}"
    inc = t.increment
    if inc is None:
        return out
    if inc.unit == "Q":
        return f"{out}/Q{inc.value}"
    if inc.unit == "W":
        return f"{out}/W{_two(inc.value)}"
    if inc.unit != "M":
        return out

    parts: List[str] = [out, _two(inc.value)]
    day = inc.increment
    if day is None or day.unit != "D":
        return "-".join(parts)
    parts.append(_two(day.value))
    date_part = "-".join(parts)

    hour = day.increment
    if hour is None or hour.unit != "H":
        return date_part
    clock = [_two(hour.value)]
    minute = hour.increment
    if minute is not None and minute.unit == "m":
        clock.append(_two(minute.value))
        sec = minute.increment
        if sec is not None and sec.unit == "s":
            clock.append(_two(sec.value))
    return f"{date_part} {':'.join(clock)}"
