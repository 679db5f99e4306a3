from __future__ import annotations

from datetime import date
import argparse
from typing import List

import shamsi


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_engines(arg: str) -> List[str]:
    return [x.strip() for x in arg.split(",") if x.strip()]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of Persian New Year (1 Farvardin) per engine."
    )
    p.add_argument("--from-year", type=int, default=1395)
    p.add_argument("--to-year", type=int, default=1410)
    p.add_argument("--engines", type=str, default="legacy,arithmetic")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format in table columns (default: iso).",
    )
    args = p.parse_args(argv)

    engines = parse_engines(args.engines)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + engines + ["Mar 21"]
    colw = [5] + [max(10, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        for eng, w in zip(engines, colw[1:]):
            d = shamsi.persian_to_gregorian(Y, 1, 1, engine=eng)
            leap = "L" if shamsi.is_leap_year(Y, engine=eng) else " "
            row.append((fmt(d) + leap).ljust(w))
        # The fixed approximation is tied to the Gregorian year of the arithmetic start.
        gy = shamsi.persian_to_gregorian(Y, 1, 1, engine="arithmetic").year
        row.append(fmt(shamsi.nowruz(gy)).ljust(colw[-1]))
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
