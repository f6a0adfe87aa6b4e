"""
Field and count validation for the public entry points.

The Julian-day helpers in calsaka.core.time never validate; everything that
accepts calendar fields from a caller goes through here first.
"""

from __future__ import annotations

from typing import Any

from .errors import (
    InvalidArgumentError,
    InvalidDayError,
    InvalidMonthError,
    InvalidYearError,
)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def validate_year(year: Any, *, strict: bool = True) -> None:
    """strict: positive 4-digit year. Otherwise any integer (proleptic, astronomical)."""
    if not _is_int(year):
        raise InvalidYearError(year)
    if strict and not (1000 <= year <= 9999):
        raise InvalidYearError(year)


def validate_month(month: Any) -> None:
    if not _is_int(month) or not (1 <= month <= 12):
        raise InvalidMonthError(month)


def validate_day(day: Any) -> None:
    # Coarse range only; month lengths are not consulted.
    if not _is_int(day) or not (1 <= day <= 31):
        raise InvalidDayError(day)


def validate_date(year: Any, month: Any, day: Any, *, strict: bool = True) -> None:
    validate_year(year, strict=strict)
    validate_month(month)
    validate_day(day)


def validate_count(name: str, n: Any, *, allow_negative: bool = False) -> int:
    if not _is_int(n):
        raise InvalidArgumentError(name, n)
    if n < 0 and not allow_negative:
        raise InvalidArgumentError(name, n)
    return n
