#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import flextime
from flextime.core.types import UNIT_NAMES
from flextime.timeline import slot_positions


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "flextime[diagnostics]"') from e


def axis_ticks(start: str, end: str, unit: str, kernel: Optional[str] = None) -> Tuple[List[str], List[float]]:
    """Labels and relative positions (0..1) of every `unit` tick between start and end."""
    fmt = flextime.get_kernel(kernel) if kernel else None
    span = flextime.TimeSpan(flextime.parse(start, fmt), flextime.parse(end, fmt))
    ticks = flextime.split_range(span, unit)
    labels = [flextime.to_string(t) for t in ticks]
    return labels, [float(x) for x in slot_positions(span, ticks)]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Draw the ticks of a split time range on a 0..1 axis.")
    p.add_argument("start")
    p.add_argument("end")
    p.add_argument("--unit", required=True, choices=list("YMQWDHms"))
    p.add_argument("--kernel", default=None)
    p.add_argument("--max-labels", type=int, default=24, help="Label at most this many ticks.")
    p.add_argument("--outbase", default="axis_ticks", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    labels, pos = axis_ticks(args.start, args.end, args.unit, args.kernel)

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(9.2, 1.8), constrained_layout=True)
    ax.set_xlim(-0.02, 1.02)
    ax.set_ylim(-1, 1)
    ax.axhline(0, color="0.3", linewidth=0.8)
    ax.vlines(pos, -0.3, 0.3, color="tab:blue", linewidth=1.0)
    ax.set_yticks([])
    ax.set_xlabel("slot position")
    ax.set_title(f"{args.start} .. {args.end} by {UNIT_NAMES[args.unit]}")

    stride = max(1, -(-len(pos) // max(1, args.max_labels)))
    for x, lab in list(zip(pos, labels))[::stride]:
        ax.text(x, 0.4, lab, rotation=60, fontsize=7, ha="left", va="bottom")

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    print(f"Saved: {outbase}.png ({len(pos)} ticks)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
