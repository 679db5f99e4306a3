#!/usr/bin/env python3
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

import shamsi
from shamsi.core.time import days_between


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "shamsi[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "shamsi[diagnostics]"') from e


def build_series(np, engine: str, reference: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """
    Day offset of 1 Farvardin under `engine` relative to `reference`,
    one point per Persian year.
    """
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        d_ref = shamsi.persian_to_gregorian(int(Y), 1, 1, engine=reference)
        d_eng = shamsi.persian_to_gregorian(int(Y), 1, 1, engine=engine)
        y[i] = float(days_between(d_ref, d_eng))

    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of New Year drift of one engine against another.")
    p.add_argument("--engine", default="legacy")
    p.add_argument("--reference", default="arithmetic")
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--outbase", default="nowruz_drift", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y = build_series(np, args.engine, args.reference, args.start_year, args.end_year)

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.scatter(x, y, s=12, c="tab:blue", linewidths=0.0, alpha=0.6, label=args.engine)
    ax.axhline(0.0, color="0.30", linewidth=1.0)

    ax.set_xlabel("Persian year")
    ax.set_ylabel(f"Days from {args.reference} 1 Farvardin")
    ax.set_title(f"New Year drift: {args.engine} vs {args.reference}")
    ax.legend(loc="best", frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    print(f"Offset range: {y.min():.0f} .. {y.max():.0f} days")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
