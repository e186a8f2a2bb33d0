from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import calcopt


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


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


def build_weeks(pad: int, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(pad)]
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


def coptic_month_calendar(Y: int, M: int) -> None:
    first = calcopt.CopticDate(Y, M, 1)
    days = []
    for k in range(first.length_of_month()):
        c = first.plus_days(k)
        d = c.to_iso()
        days.append((f"{c.day:2d}", f"{d.month:02d}-{d.day:02d}"))

    weeks = build_weeks(first.day_of_week - 1, days)
    b = calcopt.month_bounds(Y, M)
    title = f"Coptic month  Y={Y}  M={M}   ({b['first_date']} .. {b['last_date']})"
    print_grid(title, weeks)


def gregorian_month_calendar(gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last_day = pycal.monthrange(gy, gm)[1]

    days = []
    d = first
    for _ in range(last_day):
        c = calcopt.from_iso(d)
        days.append((f"{d.day:2d}", f"{c.month:02d}-{c.day:02d}"))
        d += timedelta(days=1)

    weeks = build_weeks(first.weekday(), days)  # Monday=0
    title = f"Gregorian month  {gy}-{gm:02d}"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Coptic-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--coptic", nargs=2, type=int, metavar=("Y", "M"),
                   help="Coptic month to print: Y M (e.g. 1743 13)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 9)")
    args = p.parse_args(argv)

    if not args.coptic and not args.greg:
        # sensible default demo: the epagomenal month and the Gregorian month around it
        coptic_month_calendar(Y=1742, M=13)
        gregorian_month_calendar(gy=2026, gm=9)
        return 0

    if args.coptic:
        Y, M = args.coptic
        coptic_month_calendar(Y=Y, M=M)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy=gy, gm=gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
