from __future__ import annotations

import argparse
import logging
import random
from datetime import date, timedelta

from calsaka.core.time import from_jd, to_jd
from calsaka.engines import saka

logger = logging.getLogger(__name__)


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    Gregorian -> Saka -> Gregorian on N random days, plus a check that the
    Saka label of the next day is the successor label (day + 1, or day 1 of
    the following month/year).
    """
    random.seed(seed)
    failures = 0

    for i in range(N):
        d0 = random_date(start, end)
        y, m, d = saka.from_gregorian(d0.year, d0.month, d0.day)
        back = from_jd(saka.to_julian(y, m, d))

        ok = back == d0
        if ok:
            y2, m2, d2 = saka.from_julian(to_jd(d0) + 1)
            if d < saka.days_in_month(y, m):
                ok = (y2, m2, d2) == (y, m, d + 1)
            elif m < 12:
                ok = (y2, m2, d2) == (y, m + 1, 1)
            else:
                ok = (y2, m2, d2) == (y + 1, 1, 1)

        if not ok:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("saka:", (y, m, d))
            print("back:", back)
            if failures >= max_failures:
                return failures

        if i and i % 1000 == 0:
            logger.debug("round-trip: %d/%d checked, %d failures", i, N, failures)

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> saka -> gregorian.")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--start", type=str, default="1100-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="9999-01-01", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
