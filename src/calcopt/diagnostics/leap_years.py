#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import calcopt


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calcopt[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calcopt[diagnostics]"') from e


def build_points(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """
    For each Coptic year: the Gregorian year of its New Year, the day of
    September it falls on, and whether the Coptic year is leap.
    """
    gy, dom, leap = [], [], []
    for Y in range(start_year, end_year + 1):
        ny = calcopt.new_year_day(Y)
        d = ny["date"]
        gy.append(d.year)
        dom.append(d.day if d.month == 9 else d.day + 31)
        leap.append(ny["is_leap_year"])
    return np.array(gy, dtype=int), np.array(dom, dtype=int), np.array(leap, dtype=bool)


def print_table(start_year: int, end_year: int) -> None:
    print("Coptic  leap  New Year     M13 days")
    print("-" * 36)
    for Y in range(start_year, end_year + 1):
        ny = calcopt.new_year_day(Y)
        leap = "L" if ny["is_leap_year"] else ""
        print(f"{Y:<7} {leap:<5} {ny['date'].isoformat()}   {calcopt.month_lengths(Y)[12]}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Coptic New Year (Nayrouz) against the Gregorian calendar, leap years marked."
    )
    p.add_argument("--start-year", type=int, default=1600, help="First Coptic year (default: 1600).")
    p.add_argument("--end-year", type=int, default=1800, help="Last Coptic year (default: 1800).")
    p.add_argument("--out", default="coptic_leap_years.png")
    p.add_argument("--title", default="Coptic New Year in the Gregorian calendar")
    p.add_argument("--table", action="store_true", help="Print a text table instead of plotting.")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    if args.table:
        print_table(start_year, end_year)
        return 0

    np = _need_numpy()
    plt = _need_matplotlib()

    gy, dom, leap = build_points(np, start_year, end_year)

    fig, ax = plt.subplots(figsize=(16, 3.6))
    ax.scatter(gy[~leap], dom[~leap], s=22, marker="o", c="0.15", linewidths=0.0, label="common year")
    ax.scatter(
        gy[leap], dom[leap],
        s=95, marker="o", facecolors="none", edgecolors="0.15", linewidths=1.2,
        label="leap year (6 epagomenal days)",
    )

    ax.tick_params(axis="both", which="both", length=0)
    ax.set_xlabel("Gregorian year of the Coptic New Year")
    ax.set_ylabel("Day of September")
    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
