"""
flextime.engines.kernels
------------------------
Bundled parser kernels.

Patterns are tried in order and the parser ignores input left over once a
pattern is used up, so longer patterns must come before their prefixes
(`YYYY-MM-DD HH:mm` before `YYYY-MM-DD`, `YYYY/MM` before `YYYY/M`, plural
duration words before singular ones). Duration phrases go ahead of the date
patterns, otherwise `YYYY` would read "1000 years" as the year 1000.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from ..core.types import UNIT_NAMES, ParserKernel


def duration_patterns(max_width: int = 4) -> Tuple[str, ...]:
    """`N units` / `N unit` phrases for every unit, 1..max_width digits."""
    out: List[str] = []
    for unit, name in UNIT_NAMES.items():
        for width in range(1, max_width + 1):
            out.append(f"{unit * width}' {name}s'")
            out.append(f"{unit * width}' {name}'")
    return tuple(out)


# ============================================================
# DATE AND TIME PATTERNS
# ============================================================

DATETIME_PATTERNS: Tuple[str, ...] = (
    "YYYY-MM-DDTHH:mm:ss",
    "YYYY-MM-DD HH:mm:ss",
    "YYYY-MM-DDTHH:mm",
    "YYYY-MM-DD HH:mm",
    "YYYY-MM-DD HH",
)

DATE_PATTERNS: Tuple[str, ...] = (
    # 2025-01-01
    "YYYY-MM-DD",
    # 2025/01/01
    "YYYY/MM/DD",
    # 01/01/2025
    "MM/DD/YYYY",
    # 01.01.2025
    "DD.MM.YYYY",
    # 01-01-2025
    "DD-MM-YYYY",
    # 2025-01
    "YYYY-MM",
    # 01/2025
    "MM/YYYY",
    # Q2/2025
    "'Q'Q/YYYY",
    # 2025/Q2
    "YYYY/'Q'Q",
    # 2025Q2
    "YYYY'Q'Q",
    # 2025/W07
    "YYYY/'W'WW",
    "YYYY/'W'W",
    # 2025/01
    "YYYY/MM",
    # 2025/1
    "YYYY/M",
    # 2025
    "YYYY",
    # 1/2025
    "M/YYYY",
)

CLOCK_PATTERNS: Tuple[str, ...] = (
    # 08:30:22
    "HH:mm:ss",
    # 08:30
    "HH:mm",
    # 8:30:22
    "H:mm:ss",
    # 8:30
    "H:mm",
)

# Years below 1000, as `to_string` renders them unpadded. Last resort only.
SHORT_YEAR_PATTERNS: Tuple[str, ...] = ("YYY", "YY", "Y")

DEFAULT_KERNEL = ParserKernel(
    name="default",
    patterns=DATETIME_PATTERNS + duration_patterns() + DATE_PATTERNS + CLOCK_PATTERNS + SHORT_YEAR_PATTERNS,
)

DATETIME_KERNEL = ParserKernel(
    name="datetime",
    patterns=DATETIME_PATTERNS + ("YYYY-MM-DD", "YYYY/MM/DD HH:mm:ss", "YYYY/MM/DD HH:mm", "YYYY/MM/DD"),
)

CLOCK_KERNEL = ParserKernel(
    name="clock",
    patterns=("HH:mm:ss", "HH.mm.ss", "HH-mm-ss", "HH:mm", "HH.mm", "HH-mm", "H:mm:ss", "H:mm"),
)

ALL_KERNELS: Dict[str, ParserKernel] = {
    k.name: k for k in (DEFAULT_KERNEL, DATETIME_KERNEL, CLOCK_KERNEL)
}
