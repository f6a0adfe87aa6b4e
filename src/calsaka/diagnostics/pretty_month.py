from __future__ import annotations

import argparse
import calendar as pycal
from datetime import date, timedelta

from calsaka.core.time import from_jd
from calsaka.engines import saka


def render_month_grid(year: int, month: int) -> str:
    """
    Plain Saka month calendar, weeks starting on Sunday:

            Phalguna [1932]

        Sun  Mon  Tue  Wed  Thu  Fri  Sat
          1    2    3    4    5    6    7
        ...
    """
    start = saka.day_of_week(year, month, 1)
    days = saka.days_in_month(year, month)

    out = f"\n\t{saka.month_name(month)} [{year:04d}]\n"
    out += "\nSun  Mon  Tue  Wed  Thu  Fri  Sat\n"
    out += "     " * start
    for d in range(1, days + 1):
        out += f"{d:3d}  "
        if (start + d) % 7 == 0:
            out += "\n"
    return out + "\n\n"


# ============================================================
# Paired (Saka / Gregorian) grids
# ============================================================

def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def format_grid(title: str, pad: int, cells: list[tuple[str, str]]) -> str:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(pad)]
    for c in cells:
        wk.append(c)
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    lines = [title, dow_header(), "-" * len(dow_header())]
    for wk in weeks:
        lines.append(" ".join(c[0] for c in wk).rstrip())
        lines.append(" ".join(c[1] for c in wk).rstrip())
    return "\n".join(lines) + "\n"


def saka_month_grid(year: int, month: int) -> str:
    """Saka month with the Gregorian MM-DD under each day."""
    jd0 = saka.to_julian(year, month, 1)
    n = saka.days_in_month(year, month)
    d0 = from_jd(jd0)

    cells = []
    for i in range(n):
        g = d0 + timedelta(days=i)
        cells.append(cell(f"{i + 1:2d}", f"{g.month:02d}-{g.day:02d}"))

    title = f"Saka month  {saka.month_name(month)} {year}   ({d0} .. {d0 + timedelta(days=n - 1)})"
    return format_grid(title, saka.day_of_week(year, month, 1), cells)


def gregorian_month_grid(gy: int, gm: int) -> str:
    """Gregorian month with the Saka MM-DD under each day."""
    first = date(gy, gm, 1)
    last_day = pycal.monthrange(gy, gm)[1]

    cells = []
    for i in range(last_day):
        _, m, d = saka.from_gregorian(gy, gm, i + 1)
        cells.append(cell(f"{i + 1:2d}", f"{m:02d}-{d:02d}"))

    title = f"Gregorian month  {gy}-{gm:02d}"
    # date.weekday(): Monday=0; shift to Sunday=0
    return format_grid(title, (first.weekday() + 1) % 7, cells)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Saka month calendar and/or a Gregorian month calendar with paired labels."
    )
    p.add_argument("--saka", nargs=2, type=int, metavar=("Y", "M"),
                   help="Saka month to print: Y M (e.g. 1932 12)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2011 3)")
    p.add_argument("--plain", action="store_true",
                   help="Print the Saka month as a plain grid without Gregorian labels.")
    args = p.parse_args(argv)

    if not args.saka and not args.greg:
        # sensible default demo
        args.saka = [1932, 12]
        args.greg = [2011, 3]

    if args.saka:
        Y, M = args.saka
        print(render_month_grid(Y, M) if args.plain else saka_month_grid(Y, M))

    if args.greg:
        gy, gm = args.greg
        print(gregorian_month_grid(gy, gm))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
