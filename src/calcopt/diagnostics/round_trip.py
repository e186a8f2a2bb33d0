from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import calcopt


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """Gregorian -> Coptic -> Gregorian, plus epoch-day and day-of-week agreement."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        c = calcopt.from_iso(d0)
        back = c.to_iso()
        epoch = (d0 - date(1970, 1, 1)).days

        ok = (
            back == d0
            and c.to_epoch_day() == epoch
            and calcopt.CopticDate.from_epoch_day(epoch) == c
            and c.day_of_week == d0.isoweekday()
        )
        if not ok:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("coptic:", repr(c))
            print("back:", back)
            print("epoch day:", epoch, "vs", c.to_epoch_day())
            print("day of week:", d0.isoweekday(), "vs", c.day_of_week)
            if failures >= max_failures:
                return failures

    return failures


def sweep_test(first_year: int, last_year: int, *, max_failures: int) -> int:
    """Every day of every year in [first_year, last_year] must survive the epoch-day round trip."""
    failures = 0
    expected = calcopt.CopticDate(first_year, 1, 1).to_epoch_day()
    for Y in range(first_year, last_year + 1):
        for M, length in enumerate(calcopt.month_lengths(Y), start=1):
            for D in range(1, length + 1):
                c = calcopt.CopticDate(Y, M, D)
                n = c.to_epoch_day()
                if n != expected or calcopt.CopticDate.from_epoch_day(n) != c:
                    failures += 1
                    print(f"\nFAIL sweep: {c!r} epoch={n} expected={expected}")
                    if failures >= max_failures:
                        return failures
                expected += 1
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> coptic -> gregorian.")
    p.add_argument("--N", type=int, default=20000, help="Random trials.")
    p.add_argument("--start", type=str, default="0001-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="9999-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--sweep", nargs=2, type=int, default=(-50, 50), metavar=("Y0", "Y1"),
                   help="Proleptic year span for the exhaustive day sweep.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    print("Testing random ISO dates ...")
    total_fail = roundtrip_test(args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)
    print(f"Sweeping years {args.sweep[0]}..{args.sweep[1]} ...")
    total_fail += sweep_test(args.sweep[0], args.sweep[1], max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
