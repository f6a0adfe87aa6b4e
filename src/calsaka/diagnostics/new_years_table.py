from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

from calsaka.engines import saka


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def new_year_rows(y0: int, y1: int) -> List[Tuple[int, date, int, int]]:
    """(saka_year, chaitra_1, chaitra_length, year_length) for each year in [y0, y1]."""
    rows = []
    for Y in range(y0, y1 + 1):
        rows.append((
            Y,
            saka.new_year_day(Y),
            saka.days_in_month(Y, 1),
            saka.days_in_year(Y),
        ))
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Saka New Year (Chaitra 1) date table."
    )
    p.add_argument("--from-year", type=int, default=1920, help="First Saka year (default: 1920)")
    p.add_argument("--to-year", type=int, default=1950, help="Last Saka year (default: 1950)")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Chaitra 1 column (default: iso).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Saka", "Chaitra 1", "Chaitra", "Days"]
    colw = [5, 10, 7, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y, d, chaitra, ndays in new_year_rows(Y0, Y1):
        row = [str(Y), fmt(d), str(chaitra), str(ndays)]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)).rstrip())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
