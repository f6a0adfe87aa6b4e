"""calsaka public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

import logging

# Register the standard day attributes on import
from . import api_init as _api_init  # noqa: F401

from .api import SakaDate, day_info, today
from .core.errors import (
    CalsakaError,
    InvalidArgumentError,
    InvalidDateError,
    InvalidDayError,
    InvalidMonthError,
    InvalidYearError,
)
from .core.time import gregorian_to_julian, is_leap, julian_to_gregorian
from .core.types import DayInfo
from .engines.saka import (
    DAYS,
    MONTHS,
    day_name,
    day_of_week,
    day_of_year,
    days_in_month,
    days_in_year,
    from_gregorian,
    from_julian,
    format_date,
    month_name,
    new_year_day,
    to_gregorian,
    to_julian,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SakaDate",
    "day_info",
    "today",
    "DayInfo",
    "to_gregorian",
    "from_gregorian",
    "to_julian",
    "from_julian",
    "gregorian_to_julian",
    "julian_to_gregorian",
    "is_leap",
    "days_in_month",
    "days_in_year",
    "day_of_week",
    "day_of_year",
    "day_name",
    "format_date",
    "month_name",
    "new_year_day",
    "MONTHS",
    "DAYS",
    "CalsakaError",
    "InvalidDateError",
    "InvalidYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "InvalidArgumentError",
]
