from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import shamsi
from shamsi.engines.calendar import persian_weekday


def dow_header() -> str:
    return "Sa     Su     Mo     Tu     We     Th     Fr"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def layout(first: date, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(persian_weekday(first))]
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def persian_month_calendar(engine: str, Y: int, M: int) -> None:
    rows = shamsi.month_days(Y, M, engine=engine)
    days = [(f"{r['persian'].day:2d}", f"{r['date'].month:02d}-{r['date'].day:02d}") for r in rows]
    d0, d1 = rows[0]["date"], rows[-1]["date"]
    title = f"{engine} Persian month  {Y}/{M:02d} {shamsi.month_name(M)}   ({d0} .. {d1})"
    print_grid(title, layout(d0, days))


def gregorian_month_calendar(engine: str, gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    days = []
    d = first
    while d <= last:
        p = shamsi.to_persian(d, engine=engine)
        days.append((f"{d.day:2d}", f"{p.month:02d}-{p.day:02d}"))
        d += timedelta(days=1)

    title = f"{engine} Gregorian month  {gy}-{gm:02d}"
    print_grid(title, layout(first, days))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Persian-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--engine", default="arithmetic", help="legacy|arithmetic (default: arithmetic)")
    p.add_argument("--persian", nargs=2, type=int, metavar=("Y", "M"),
                   help="Persian month to print: Y M (e.g. 1405 1)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 3)")
    args = p.parse_args(argv)

    if not args.persian and not args.greg:
        persian_month_calendar(args.engine, Y=1405, M=1)
        gregorian_month_calendar(args.engine, gy=2026, gm=3)
        return 0

    if args.persian:
        Y, M = args.persian
        persian_month_calendar(args.engine, Y=Y, M=M)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.engine, gy=gy, gm=gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
