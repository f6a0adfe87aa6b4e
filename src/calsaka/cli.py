from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect

from calsaka.core.log import configure_logging


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


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


def cmd_day(argv: list[str]) -> int:
    import calsaka
    from calsaka.engines.saka import format_date

    p = argparse.ArgumentParser(prog="calsaka day", description="Gregorian -> Saka day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = calsaka.day_info(_parse_ymd(args.date), attributes=tuple(args.attr), debug=args.debug)
    print(format_date(*info.saka))
    for k, v in (info.attributes or {}).items():
        print(f"  {k} = {v}")
    if info.debug:
        for k, v in info.debug.items():
            print(f"  [{k}] {v}")
    return 0


def cmd_gregorian(argv: list[str]) -> int:
    import calsaka

    p = argparse.ArgumentParser(prog="calsaka gregorian", description="Saka -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    args = p.parse_args(argv)

    y, m, d = calsaka.to_gregorian(args.year, args.month, args.day)
    print(f"{y:04d}-{m:02d}-{d:02d}")
    return 0


def cmd_today(argv: list[str]) -> int:
    import calsaka

    p = argparse.ArgumentParser(prog="calsaka today", description="Today's Saka date")
    p.parse_args(argv)

    print(calsaka.SakaDate().as_string())
    return 0


def cmd_month(argv: list[str]) -> int:
    import calsaka

    p = argparse.ArgumentParser(prog="calsaka month", description="Print a Saka month calendar")
    p.add_argument("year", type=int, nargs="?")
    p.add_argument("month", type=int, nargs="?")
    args = p.parse_args(argv)

    if (args.year is None) != (args.month is None):
        p.error("give both YEAR and MONTH, or neither")

    s = calsaka.SakaDate(args.year, args.month, 1) if args.year is not None else calsaka.SakaDate()
    sys.stdout.write(s.render_month_grid())
    return 0


def _dispatch(argv: list[str]) -> int:
    # Backward compatibility: `calsaka YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="calsaka", description="Saka (Indian national) calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Gregorian -> Saka day label")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    sub.add_parser("gregorian", help="Saka -> Gregorian date")
    sub.add_parser("today", help="Today's Saka date")
    sub.add_parser("month", help="Print a Saka month calendar")

    # diagnostics
    sub.add_parser("pretty-month", help="Print paired Saka/Gregorian month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print Saka New Year table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        configure_logging(level=logging.DEBUG, force=True)

    if args.cmd == "day":
        day_argv = [args.date]
        if args.debug:
            day_argv += ["--debug"]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "gregorian":
        return cmd_gregorian(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "month":
        return cmd_month(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("calsaka.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("calsaka.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calsaka.diagnostics.round_trip",
            "new-year-scatter": "calsaka.diagnostics.new_year_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        return _dispatch(argv)
    except (ValueError, KeyError) as e:
        print(f"calsaka: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
