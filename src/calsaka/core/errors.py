from __future__ import annotations

from typing import Any


class CalsakaError(Exception):
    """Base error."""


class InvalidDateError(CalsakaError, ValueError):
    """Raised when a calendar field is out of range or of the wrong type."""

    field = "date"
    label = "date field"

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid {self.label} [{value!r}]")


class InvalidYearError(InvalidDateError):
    field = "year"
    label = "year"


class InvalidMonthError(InvalidDateError):
    field = "month"
    label = "month number"


class InvalidDayError(InvalidDateError):
    field = "day"
    label = "day number"


class InvalidArgumentError(CalsakaError, ValueError):
    """Raised when an arithmetic count is not a (non-negative) integer."""

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name} count [{value!r}]")
