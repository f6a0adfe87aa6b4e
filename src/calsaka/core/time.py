"""
calsaka.core.time
-----------------
Proleptic Gregorian calendar <-> Julian day conversion.

All Julian days here follow the half-integer convention: a civil date maps to
the JD of its midnight, e.g. 2000-01-01 -> 2451544.5.
"""

from __future__ import annotations

import math
from datetime import MAXYEAR, MINYEAR, date

from .errors import InvalidYearError
from .types import YMD

# JD of midnight starting 0001-01-01 (proleptic Gregorian)
GREGORIAN_EPOCH = 1721425.5


def is_leap(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and not (year % 100 == 0 and year % 400 != 0)


def gregorian_to_julian(year: int, month: int, day: int) -> float:
    """
    Gregorian (year, month, day) -> JD at midnight.

    Closed form; every division floors, so years <= 0 are handled
    (astronomical year numbering).
    """
    y1 = year - 1
    if month <= 2:
        adj = 0
    else:
        adj = -1 if is_leap(year) else -2
    return (
        (GREGORIAN_EPOCH - 1)
        + 365 * y1
        + y1 // 4
        - y1 // 100
        + y1 // 400
        + math.floor((367 * month - 362) / 12 + adj + day)
    )


def julian_to_gregorian(jd: float) -> YMD:
    """Inverse of gregorian_to_julian via 400/100/4/1-year cycle decomposition."""
    wjd = math.floor(jd - 0.5) + 0.5
    depoch = wjd - GREGORIAN_EPOCH

    quadricent, dqc = divmod(depoch, 146097)
    cent, dcent = divmod(dqc, 36524)
    quad, dquad = divmod(dcent, 1461)
    yindex = dquad // 365

    year = int(quadricent * 400 + cent * 100 + quad * 4 + yindex)
    # The last day of a leap cycle lands on index 4 and belongs to the previous year.
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = wjd - gregorian_to_julian(year, 1, 1)
    if wjd < gregorian_to_julian(year, 3, 1):
        leapadj = 0
    else:
        leapadj = 1 if is_leap(year) else 2
    month = int(((yearday + leapadj) * 12 + 373) // 367)
    day = int(wjd - gregorian_to_julian(year, month, 1)) + 1
    return year, month, day


def jd_to_jdn(jd: float) -> int:
    """
    Convert Julian Date to the integer Julian Day Number of the civil day.

      JDN = floor(JD + 0.5)
    """
    return int(math.floor(jd + 0.5))


def day_of_week(jd: float) -> int:
    """Weekday of the civil day containing jd, 0=Sunday..6=Saturday."""
    return (jd_to_jdn(jd) + 1) % 7


def to_jd(d: date) -> float:
    """datetime.date -> JD at midnight."""
    return gregorian_to_julian(d.year, d.month, d.day)


def from_jd(jd: float) -> date:
    """JD -> datetime.date (years 1..9999 only, as limited by datetime)."""
    year, month, day = julian_to_gregorian(jd)
    if not (MINYEAR <= year <= MAXYEAR):
        raise InvalidYearError(year)
    return date(year, month, day)
