from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Callable, Optional, Sequence

from .attributes.registry import compute_attributes
from .core.time import YMD, day_of_week, from_jd, jd_to_jdn, to_jd
from .core.types import DayInfo
from .core.validate import validate_count, validate_date, validate_year
from .engines import saka
from .diagnostics.pretty_month import render_month_grid

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


def today(clock: Optional[Clock] = None) -> YMD:
    """Today's Saka (year, month, day) according to the host clock (or `clock`)."""
    d = (clock or date.today)()
    return saka.from_gregorian(d.year, d.month, d.day)


def day_info(
    d: date,
    *,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    jd = to_jd(d)
    ymd = saka.from_julian(jd)
    info = DayInfo(
        civil_date=d,
        saka=ymd,
        jd=jd,
        debug={"jdn": jd_to_jdn(jd), "weekday": day_of_week(jd)} if debug else None,
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info


class SakaDate:
    """
    A Saka calendar date that supports in-place field arithmetic.

    Every method taking optional (year, month, day) arguments falls back to the
    stored date for the ones omitted. Mutators compute the new state fully
    before assigning it, so a failed call leaves the instance untouched.
    """

    def __init__(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        *,
        clock: Optional[Clock] = None,
    ):
        self._clock = clock
        if year is None or month is None or day is None:
            ty, tm, td = today(clock)
            year = ty if year is None else year
            month = tm if month is None else month
            day = td if day is None else day
        validate_date(year, month, day)
        self.year = year
        self.month = month
        self.day = day

    @classmethod
    def from_date(cls, d: date) -> "SakaDate":
        return cls(*saka.from_gregorian(d.year, d.month, d.day))

    # ---------------------------------------------------------
    # Value protocol
    # ---------------------------------------------------------

    @property
    def ymd(self) -> YMD:
        return self.year, self.month, self.day

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SakaDate):
            return NotImplemented
        return self.ymd == other.ymd

    def __hash__(self) -> int:
        return hash(self.ymd)

    def __repr__(self) -> str:
        return f"SakaDate({self.year}, {self.month}, {self.day})"

    def __str__(self) -> str:
        return self.as_string()

    def _fill(self, year, month, day) -> YMD:
        return (
            self.year if year is None else year,
            self.month if month is None else month,
            self.day if day is None else day,
        )

    def _set(self, year: int, month: int, day: int) -> None:
        logger.debug("%r -> (%d, %d, %d)", self, year, month, day)
        self.year, self.month, self.day = year, month, day

    # ---------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------

    def as_string(self) -> str:
        """'DD, MonthName YYYY'."""
        return saka.format_date(self.year, self.month, self.day)

    def today(self) -> YMD:
        return today(self._clock)

    def month_name(self, month: Optional[int] = None) -> str:
        return saka.month_name(self.month if month is None else month)

    def day_of_week(self, year: Optional[int] = None, month: Optional[int] = None, day: Optional[int] = None) -> int:
        """0=Sunday..6=Saturday."""
        return saka.day_of_week(*self._fill(year, month, day))

    def day_name(self) -> str:
        return saka.day_name(self.day_of_week())

    def days_in_month(self, year: Optional[int] = None, month: Optional[int] = None) -> int:
        y, m, _ = self._fill(year, month, 1)
        return saka.days_in_month(y, m)

    def render_month_grid(self, year: Optional[int] = None, month: Optional[int] = None) -> str:
        y, m, _ = self._fill(year, month, 1)
        return render_month_grid(y, m)

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def to_gregorian(self, year: Optional[int] = None, month: Optional[int] = None, day: Optional[int] = None) -> YMD:
        return saka.to_gregorian(*self._fill(year, month, day))

    def from_gregorian(self, year: int, month: int, day: int) -> YMD:
        return saka.from_gregorian(year, month, day)

    def to_julian(self, year: Optional[int] = None, month: Optional[int] = None, day: Optional[int] = None) -> float:
        return saka.to_julian(*self._fill(year, month, day))

    def from_julian(self, jd: float) -> YMD:
        return saka.from_julian(jd)

    def to_date(self) -> date:
        return from_jd(self.to_julian())

    # ---------------------------------------------------------
    # Arithmetic (in place)
    # ---------------------------------------------------------

    def add_days(self, n: int) -> None:
        validate_count("day", n, allow_negative=True)
        y, m, d = saka.from_julian(self.to_julian() + n)
        validate_year(y)
        self._set(y, m, d)

    def subtract_days(self, n: int) -> None:
        validate_count("day", n)
        self.add_days(-n)

    def _shift_months(self, delta: int) -> None:
        y, m0 = divmod(self.year * 12 + (self.month - 1) + delta, 12)
        m = m0 + 1
        validate_year(y)
        # Clamp to the target month, e.g. Vaisakha 31 + 5 months -> Asvina 30.
        d = min(self.day, saka.days_in_month(y, m))
        self._set(y, m, d)

    def add_months(self, n: int) -> None:
        self._shift_months(validate_count("month", n))

    def subtract_months(self, n: int) -> None:
        self._shift_months(-validate_count("month", n))

    def _shift_years(self, delta: int) -> None:
        y = self.year + delta
        validate_year(y)
        d = min(self.day, saka.days_in_month(y, self.month))
        self._set(y, self.month, d)

    def add_years(self, n: int) -> None:
        self._shift_years(validate_count("year", n))

    def subtract_years(self, n: int) -> None:
        self._shift_years(-validate_count("year", n))
