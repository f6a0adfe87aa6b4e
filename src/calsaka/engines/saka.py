"""
calsaka.engines.saka
--------------------
Arithmetic Indian national (Saka) calendar on top of the Julian day pivot.

Saka year Y starts on Chaitra 1 of Gregorian year Y + 78: March 21 when that
Gregorian year is leap, March 22 otherwise. Chaitra has 31 days in those leap
years and 30 otherwise; Vaisakha..Bhadra (2-6) have 31 days, Asvina..Phalguna
(7-12) have 30.

The public functions validate their fields (4-digit years unless strict=False);
the underscored ones trust the caller.
"""

from __future__ import annotations

import math
from datetime import date

from ..core.time import (
    YMD,
    day_of_week as _jd_day_of_week,
    from_jd,
    gregorian_to_julian,
    is_leap,
    julian_to_gregorian,
)
from ..core.validate import validate_date, validate_month, validate_year

MONTHS = (
    "Chaitra", "Vaisakha", "Jyaistha", "Asadha", "Sravana", "Bhadra",
    "Asvina", "Kartika", "Agrahayana", "Pausa", "Magha", "Phalguna",
)

DAYS = (
    "Ravivara", "Somvara", "Mangalavara", "Budhavara",
    "Brahaspativara", "Sukravara", "Sanivara",
)

SAKA = 78    # Gregorian year of Saka year 0
START = 80   # Chaitra 1 is always day index 80 (0-based) of its Gregorian year


def days_in_chaitra(gyear: int) -> int:
    return 31 if is_leap(gyear) else 30


# ============================================================
# Unvalidated core
# ============================================================

def _to_julian(year: int, month: int, day: int) -> float:
    gyear = year + SAKA
    start_day = 21 if is_leap(gyear) else 22
    start = gregorian_to_julian(gyear, 3, start_day)

    if month == 1:
        return start + (day - 1)

    jd = start + days_in_chaitra(gyear)
    jd += min(month - 2, 5) * 31
    if month >= 8:
        jd += (month - 7) * 30
    return jd + (day - 1)


def _from_julian(jd: float) -> YMD:
    jd = math.floor(jd) + 0.5
    gyear = julian_to_gregorian(jd)[0]
    yday = int(jd - gregorian_to_julian(gyear, 1, 1))
    year = gyear - SAKA

    if yday < START:
        # Jan 1 .. Chaitra 1: tail of the previous Saka year, whose Chaitra
        # length comes from the previous Gregorian year.
        year -= 1
        chaitra = days_in_chaitra(gyear - 1)
        yday += chaitra + 31 * 5 + 30 * 3 + 10 + START
    else:
        chaitra = days_in_chaitra(gyear)

    yday -= START
    if yday < chaitra:
        return year, 1, yday + 1

    mday = yday - chaitra
    if mday < 31 * 5:
        return year, mday // 31 + 2, mday % 31 + 1
    mday -= 31 * 5
    return year, mday // 30 + 7, mday % 30 + 1


# ============================================================
# Validated API
# ============================================================

def to_julian(year: int, month: int, day: int, *, strict: bool = True) -> float:
    """Saka date -> JD at midnight."""
    validate_date(year, month, day, strict=strict)
    return _to_julian(year, month, day)


def from_julian(jd: float) -> YMD:
    """JD -> Saka (year, month, day). The civil day is floor(jd) + 0.5."""
    return _from_julian(jd)


def to_gregorian(year: int, month: int, day: int, *, strict: bool = True) -> YMD:
    validate_date(year, month, day, strict=strict)
    return julian_to_gregorian(_to_julian(year, month, day))


def from_gregorian(year: int, month: int, day: int, *, strict: bool = True) -> YMD:
    validate_date(year, month, day, strict=strict)
    return _from_julian(gregorian_to_julian(year, month, day))


def days_in_month(year: int, month: int, *, strict: bool = True) -> int:
    """Length of a Saka month, as the distance between consecutive month starts."""
    validate_date(year, month, 1, strict=strict)
    start = _to_julian(year, month, 1)
    if month == 12:
        end = _to_julian(year + 1, 1, 1)
    else:
        end = _to_julian(year, month + 1, 1)
    return int(end - start)


def days_in_year(year: int, *, strict: bool = True) -> int:
    validate_year(year, strict=strict)
    return 366 if is_leap(year + SAKA) else 365


def day_of_week(year: int, month: int, day: int, *, strict: bool = True) -> int:
    """0=Sunday..6=Saturday."""
    validate_date(year, month, day, strict=strict)
    return _jd_day_of_week(_to_julian(year, month, day))


def day_of_year(year: int, month: int, day: int, *, strict: bool = True) -> int:
    """1-based day within the Saka year."""
    validate_date(year, month, day, strict=strict)
    return int(_to_julian(year, month, day) - _to_julian(year, 1, 1)) + 1


def month_name(month: int) -> str:
    validate_month(month)
    return MONTHS[month - 1]


def format_date(year: int, month: int, day: int) -> str:
    """'DD, MonthName YYYY'. Formats any year; only the month is checked."""
    return f"{day:02d}, {month_name(month)} {year:04d}"


def day_name(weekday: int) -> str:
    """Saka weekday name for an index 0=Sunday..6=Saturday."""
    return DAYS[weekday % 7]


def new_year_day(year: int, *, strict: bool = True) -> date:
    """Gregorian date of Chaitra 1 of the given Saka year."""
    validate_year(year, strict=strict)
    return from_jd(_to_julian(year, 1, 1))
