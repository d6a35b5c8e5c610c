from __future__ import annotations

import argparse
import importlib
import inspect
import json
import sys

from .core.config import get_settings
from .core.errors import FlextimeError
from .logging_utils import setup_logger


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _kernel_arg(p: argparse.ArgumentParser) -> None:
    g = p.add_mutually_exclusive_group()
    g.add_argument("--pattern", help="single pattern, e.g. YYYY-MM-DD")
    g.add_argument("--kernel", help="registered kernel name (default: configured default kernel)")


def _pattern_or_kernel(args: argparse.Namespace):
    import flextime

    if args.pattern:
        return args.pattern
    if args.kernel:
        return flextime.get_kernel(args.kernel)
    return None


def cmd_parse(argv: list[str]) -> int:
    import flextime

    p = argparse.ArgumentParser(prog="flextime parse", description="Parse a time string")
    p.add_argument("text")
    _kernel_arg(p)
    p.add_argument("--json", action="store_true", help="print the interval chain as JSON")
    args = p.parse_args(argv)

    t = flextime.parse(args.text, _pattern_or_kernel(args))
    if args.json:
        print(json.dumps(t.to_dict()))
    else:
        print(f"{flextime.to_string(t)}  (precision {t.precision}, {flextime.to_seconds(t)} s)")
    return 0


def cmd_diff(argv: list[str]) -> int:
    import flextime

    p = argparse.ArgumentParser(prog="flextime diff", description="Signed difference between two times")
    p.add_argument("start")
    p.add_argument("end")
    p.add_argument("--unit", default="s", choices=list("YMQWDHms"))
    _kernel_arg(p)
    args = p.parse_args(argv)

    fmt = _pattern_or_kernel(args)
    a = flextime.parse(args.start, fmt)
    b = flextime.parse(args.end, fmt)
    if args.unit == "s":
        print(flextime.difference_in_seconds(a, b))
    else:
        print(flextime.difference_in_unit(a, b, args.unit))
    return 0


def cmd_split(argv: list[str]) -> int:
    import flextime

    p = argparse.ArgumentParser(prog="flextime split", description="Split a range into regular intervals")
    p.add_argument("start")
    p.add_argument("end")
    p.add_argument("--unit", required=True, choices=list("YMQWDHms"))
    p.add_argument("--flatten", action="store_true", help="print only the value of the split unit")
    _kernel_arg(p)
    args = p.parse_args(argv)

    fmt = _pattern_or_kernel(args)
    span = flextime.TimeSpan(flextime.parse(args.start, fmt), flextime.parse(args.end, fmt))
    parts = flextime.split_range(span, args.unit)
    if args.flatten:
        for t in flextime.flatten(parts, args.unit):
            print(t.value)
    else:
        for t in parts:
            print(flextime.to_string(t))
    return 0


def cmd_slot(argv: list[str]) -> int:
    import flextime

    p = argparse.ArgumentParser(prog="flextime slot", description="Relative position of a time within a range")
    p.add_argument("start")
    p.add_argument("end")
    p.add_argument("point")
    _kernel_arg(p)
    args = p.parse_args(argv)

    fmt = _pattern_or_kernel(args)
    span = flextime.TimeSpan(flextime.parse(args.start, fmt), flextime.parse(args.end, fmt))
    print(f"{flextime.slot_position(span, flextime.parse(args.point, fmt)):.6f}")
    return 0


def cmd_kernels(argv: list[str]) -> int:
    import flextime

    p = argparse.ArgumentParser(prog="flextime kernels", description="List parser kernels")
    p.add_argument("--show", metavar="NAME", help="print the patterns of one kernel")
    args = p.parse_args(argv)

    if args.show:
        for pattern in flextime.get_kernel(args.show).patterns:
            print(pattern)
        return 0
    default = get_settings().default_kernel
    for name in flextime.list_kernels():
        tag = " (default)" if name == default else ""
        print(f"{name}: {len(flextime.get_kernel(name).patterns)} patterns{tag}")
    return 0


_COMMANDS = {
    "parse": cmd_parse,
    "diff": cmd_diff,
    "split": cmd_split,
    "slot": cmd_slot,
    "kernels": cmd_kernels,
}


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="flextime", description="Hierarchical time-interval toolkit CLI.")
    p.add_argument("--log-level", default=get_settings().log_level)
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("parse", help="Parse a time string", add_help=False)
    sub.add_parser("diff", help="Difference between two times", add_help=False)
    sub.add_parser("split", help="Split a range into regular intervals", add_help=False)
    sub.add_parser("slot", help="Relative position of a time within a range", add_help=False)
    sub.add_parser("kernels", help="List parser kernels", add_help=False)
    sub.add_parser("axis-plot", help="Plot the ticks of a split range (diagnostics)", add_help=False)

    args, rest = p.parse_known_args(argv)
    setup_logger("flextime", args.log_level)

    try:
        if args.cmd == "axis-plot":
            return _run_module_main("flextime.diagnostics.axis_plot", rest)
        return _COMMANDS[args.cmd](rest)
    except FlextimeError as e:
        print(f"flextime: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
