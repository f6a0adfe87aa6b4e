from __future__ import annotations
from typing import Any, Dict

from ..core.time import day_of_week
from ..engines import saka
from .registry import register_attribute

def weekday(info) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat, as in the Saka day-name table.
    w = day_of_week(info.jd)
    return {"weekday": w, "weekday_name": saka.day_name(w)}

def year_day(info) -> Dict[str, Any]:
    y, m, d = info.saka
    return {
        "year_day": saka.day_of_year(y, m, d, strict=False),
        "days_in_year": saka.days_in_year(y, strict=False),
    }

def month_name(info) -> Dict[str, Any]:
    return {"month_name": saka.month_name(info.month)}

register_attribute("weekday", weekday)
register_attribute("year_day", year_day)
register_attribute("month_name", month_name)
