from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import shamsi


def random_date(start: date, end: date) -> date:
    return start + timedelta(days=random.randint(0, (end - start).days))


def parse_engines(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


def _report(kind: str, engine: str, **fields) -> None:
    print(f"\nFAIL ({kind}) engine={engine}")
    for k, v in fields.items():
        print(f"  {k}: {v}")


def gregorian_trials(engine: str, N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """Gregorian -> Persian -> Gregorian on N random dates; returns the failure count."""
    rng_state = random.getstate()
    random.seed(seed)
    failures = 0
    try:
        for _ in range(N):
            d0 = random_date(start, end)
            p = shamsi.to_persian(d0, engine=engine)
            try:
                back = shamsi.to_gregorian(p)
            except shamsi.ShamsiError as e:
                back = e
            if back != d0:
                failures += 1
                _report("gregorian", engine, d0=d0, persian=p, back=back,
                        debug=shamsi.day_info(d0, engine=engine, debug=True).debug)
                if failures >= max_failures:
                    break
    finally:
        random.setstate(rng_state)
    return failures


def label_sweep(engine: str, from_year: int, to_year: int, *, max_failures: int) -> int:
    """
    Every valid label of every year in [from_year, to_year]: Persian -> Gregorian
    -> Persian, and consecutive labels must land on consecutive days.
    """
    failures = 0
    prev = None
    for y in range(from_year, to_year + 1):
        for m in range(1, 13):
            for d in range(1, shamsi.days_in_month(m, y, engine=engine) + 1):
                g = shamsi.persian_to_gregorian(y, m, d, engine=engine)
                back = shamsi.to_persian(g, engine=engine)
                gap = (g - prev).days if prev is not None else 1
                prev = g
                if back.ymd != (y, m, d) or gap != 1:
                    failures += 1
                    _report("label", engine, label=(y, m, d), gregorian=g, back=back, gap=gap)
                    if failures >= max_failures:
                        return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip checks between Persian labels and Gregorian dates.")
    p.add_argument("--engines", type=str, default="arithmetic", help="Comma-separated engine list.")
    p.add_argument("--N", type=int, default=2000, help="Random Gregorian trials per engine.")
    p.add_argument("--start", type=str, default="1900-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2100-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--from-year", type=int, default=1380, help="First Persian year of the label sweep.")
    p.add_argument("--to-year", type=int, default=1420, help="Last Persian year of the label sweep.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per check.")
    args = p.parse_args(argv)

    start = shamsi.parse_gregorian(args.start)
    end = shamsi.parse_gregorian(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")
    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    total_fail = 0
    for eng in parse_engines(args.engines):
        print(f"Testing {eng} ...")
        total_fail += gregorian_trials(eng, args.N, start, end, args.seed, max_failures=args.max_failures)
        total_fail += label_sweep(eng, args.from_year, args.to_year, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
