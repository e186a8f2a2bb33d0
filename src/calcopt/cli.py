from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    from calcopt.core.errors import InvalidValueError

    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise InvalidValueError(f"invalid ISO date {s!r}: {e}") from e


def _check_field_names(names: list[str]) -> None:
    import calcopt

    unknown = [n for n in names if n not in calcopt.list_fields()]
    if unknown:
        raise calcopt.UnsupportedFieldError(
            f"unknown field(s) {', '.join(unknown)}; available: {', '.join(calcopt.list_fields())}"
        )


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


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_day(argv: list[str]) -> int:
    import calcopt

    p = argparse.ArgumentParser(prog="calcopt day", description="ISO (Gregorian) date -> Coptic date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--field", action="append", default=[], help="registered field name (repeatable)")
    args = p.parse_args(argv)

    logger.debug("day %s fields=%s", args.date, args.field)
    _check_field_names(args.field)
    info = calcopt.date_info(_parse_ymd(args.date), fields=tuple(args.field))
    c = info.coptic
    print(f"ISO date      : {info.iso_date.isoformat()}")
    print(f"Coptic date   : {c}")
    print(f"Proleptic     : {c.proleptic_year}-{c.month:02d}-{c.day:02d}")
    print(f"Epoch day     : {info.epoch_day}")
    print(f"Day of week   : {info.day_of_week}")
    print(f"Day of year   : {info.day_of_year}")
    print(f"Leap year     : {info.is_leap_year}")
    print(f"Month length  : {info.length_of_month}")
    for name, value in (info.attributes or {}).items():
        print(f"{name:<14}: {value}")
    return 0


def cmd_to_iso(argv: list[str]) -> int:
    import calcopt

    p = argparse.ArgumentParser(prog="calcopt to-iso", description="Coptic date -> ISO (Gregorian) date")
    p.add_argument("year", type=int, help="Year of era (or proleptic year with --proleptic)")
    p.add_argument("month", type=int, help="Month 1..13")
    p.add_argument("day", type=int, help="Day of month")
    p.add_argument("--era", choices=["AM", "BEFORE_AM"], default="AM")
    p.add_argument("--proleptic", action="store_true", help="Interpret year as a proleptic year")
    args = p.parse_args(argv)

    if args.proleptic:
        c = calcopt.CopticDate(args.year, args.month, args.day)
    else:
        c = calcopt.CopticDate.of(calcopt.Era[args.era], args.year, args.month, args.day)
    print(f"{c}  ->  {c.to_iso().isoformat()}  (epoch day {c.to_epoch_day()})")
    return 0


def cmd_year(argv: list[str]) -> int:
    import calcopt

    p = argparse.ArgumentParser(prog="calcopt year", description="Month table of a Coptic year")
    p.add_argument("year", type=int, help="Proleptic Coptic year")
    args = p.parse_args(argv)

    Y = args.year
    leap_tag = " (leap)" if calcopt.is_leap_year(Y) else ""
    print(f"Coptic year {Y}{leap_tag}")
    print("M   days  first       last")
    print("-" * 32)
    for b in calcopt.months_in_year(Y):
        print(f"{b['M']:<3} {b['length']:<5} {b['first_date'].isoformat()}  {b['last_date'].isoformat()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `calcopt YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return _guarded(cmd_day, argv)

    p = argparse.ArgumentParser(prog="calcopt", description="Coptic calendar toolkit CLI.")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_day = sub.add_parser("day", help="ISO date -> Coptic date")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--field", action="append", default=[], help="registered field name (repeatable)")

    sub.add_parser("to-iso", help="Coptic date -> ISO date")
    sub.add_parser("year", help="Month table of a Coptic year")

    # diagnostics
    sub.add_parser("pretty-month", help="Print Coptic/Gregorian month calendars (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-years"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)
    logger.debug("command %s, remaining args %s", args.cmd, rest)

    if args.cmd == "day":
        day_argv = [args.date]
        for f in args.field:
            day_argv += ["--field", f]
        day_argv += rest
        return _guarded(cmd_day, day_argv)

    if args.cmd == "to-iso":
        return _guarded(cmd_to_iso, rest)

    if args.cmd == "year":
        return _guarded(cmd_year, rest)

    if args.cmd == "pretty-month":
        return _run_module_main("calcopt.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calcopt.diagnostics.round_trip",
            "leap-years": "calcopt.diagnostics.leap_years",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def _guarded(cmd, argv: list[str]) -> int:
    from calcopt.core.errors import CalcoptError

    try:
        return cmd(argv)
    except CalcoptError as e:
        print(f"calcopt: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
