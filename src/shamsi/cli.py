from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from datetime import datetime

from .logging_setup import setup_logging


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


def _now(s: str | None) -> datetime | None:
    if s is None:
        return None
    return datetime.fromisoformat(s)


def cmd_today(args: argparse.Namespace) -> int:
    from shamsi import formatting

    now = _now(args.at)
    print(formatting.format_date(args.pattern, now, engine=args.engine))
    return 0


def cmd_to_persian(args: argparse.Namespace) -> int:
    import shamsi

    p = shamsi.to_persian(shamsi.parse_gregorian(args.date), engine=args.engine)
    print(shamsi.persian_string(p))
    return 0


def cmd_to_gregorian(args: argparse.Namespace) -> int:
    import shamsi

    y, m, d = shamsi.parsing.split_persian(args.date)
    g = shamsi.persian_to_gregorian(y, m, d, engine=args.engine, wrap=args.wrap)
    print(shamsi.gregorian_us(g) if args.us else shamsi.gregorian_iso(g))
    return 0


def cmd_format(args: argparse.Namespace) -> int:
    import shamsi

    p = shamsi.parse_persian(args.date, engine=args.engine)
    print(shamsi.format_persian_date(
        args.pattern, p.year, p.month, p.day, args.hour, args.minute, args.second, engine=args.engine
    ))
    return 0


def cmd_leap(args: argparse.Namespace) -> int:
    import shamsi

    for y in range(args.year, args.year + args.count):
        tag = "leap" if shamsi.is_leap_year(y, engine=args.engine) else "common"
        print(f"{y}  {tag}  {shamsi.days_in_year(y, engine=args.engine)}")
    return 0


def cmd_month_days(args: argparse.Namespace) -> int:
    import shamsi

    n = shamsi.days_in_month(args.month, args.year, engine=args.engine)
    if n is None:
        print(f"invalid month: {args.month}", file=sys.stderr)
        return 2
    print(n)
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    import shamsi

    out = shamsi.add_days(shamsi.parsing.split_persian(args.date), args.days, engine=args.engine)
    print(shamsi.persian_string(out))
    return 0


def cmd_week(args: argparse.Namespace) -> int:
    import shamsi
    from shamsi.clock import resolve_now

    d = shamsi.parse_gregorian(args.date) if args.date else resolve_now(_now(args.at)).date()
    start = shamsi.parse_gregorian(args.year_start) if args.year_start else None
    print(shamsi.week_number(d, start))
    return 0


def cmd_engines(args: argparse.Namespace) -> int:
    import shamsi

    default = shamsi.get_default_engine()
    for name in shamsi.list_engines():
        mark = "*" if name == default else " "
        meta = shamsi.engine_info(name)
        print(f"{mark} {name:<12} epoch={meta['epoch']}")
    return 0


def cmd_day(args: argparse.Namespace) -> int:
    import shamsi

    info = shamsi.day_info(
        shamsi.parse_gregorian(args.date), engine=args.engine, attributes=tuple(args.attr), debug=args.debug
    )
    print(info)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="shamsi", description="Persian (Shamsi) calendar toolkit CLI.")
    p.add_argument("--engine", default=None, help="legacy|arithmetic (default: registry default)")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--log-file", default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    p_today = sub.add_parser("today", help="Current Persian date, formatted")
    p_today.add_argument("--pattern", default="YYYY/MM/DD")
    p_today.add_argument("--at", default=None, help="ISO datetime to use instead of the system clock")

    p_tp = sub.add_parser("to-persian", help="Gregorian YYYY-MM-DD -> Persian")
    p_tp.add_argument("date")

    p_tg = sub.add_parser("to-gregorian", help="Persian YYYY/MM/DD -> Gregorian")
    p_tg.add_argument("date")
    p_tg.add_argument("--us", action="store_true", help="print MM/DD/YYYY instead of YYYY-MM-DD")
    p_tg.add_argument("--wrap", action="store_true", help="let out-of-range days roll over")

    p_fmt = sub.add_parser("format", help="Format a Persian date with a pattern")
    p_fmt.add_argument("pattern")
    p_fmt.add_argument("date", help="YYYY/MM/DD")
    p_fmt.add_argument("--hour", type=int, default=0)
    p_fmt.add_argument("--minute", type=int, default=0)
    p_fmt.add_argument("--second", type=int, default=0)

    p_leap = sub.add_parser("leap", help="Leap status of Persian years")
    p_leap.add_argument("year", type=int)
    p_leap.add_argument("--count", type=int, default=1)

    p_md = sub.add_parser("month-days", help="Days in a Persian month")
    p_md.add_argument("month", type=int)
    p_md.add_argument("year", type=int)

    p_add = sub.add_parser("add", help="Add (or subtract, with a negative count) days")
    p_add.add_argument("date", help="YYYY/MM/DD")
    p_add.add_argument("days", type=int)

    p_week = sub.add_parser("week", help="Week of the Persian year")
    p_week.add_argument("date", nargs="?", default=None, help="YYYY-MM-DD (default: today)")
    p_week.add_argument("--year-start", default=None, help="YYYY-MM-DD")
    p_week.add_argument("--at", default=None, help="ISO datetime to use instead of the system clock")

    sub.add_parser("engines", help="List calendar engines")

    p_day = sub.add_parser("day", help="Gregorian -> Persian day record")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "pretty-month", "nowruz-table", "drift-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "shamsi.diagnostics.round_trip",
            "pretty-month": "shamsi.diagnostics.pretty_month",
            "nowruz-table": "shamsi.diagnostics.nowruz_table",
            "drift-scatter": "shamsi.diagnostics.drift_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    commands = {
        "today": cmd_today,
        "to-persian": cmd_to_persian,
        "to-gregorian": cmd_to_gregorian,
        "format": cmd_format,
        "leap": cmd_leap,
        "month-days": cmd_month_days,
        "add": cmd_add,
        "week": cmd_week,
        "engines": cmd_engines,
        "day": cmd_day,
    }

    from shamsi.core.errors import ShamsiError

    try:
        return commands[args.cmd](args)
    except (ShamsiError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except KeyError as e:
        # unknown engine or attribute name
        print(f"error: {e.args[0]}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
