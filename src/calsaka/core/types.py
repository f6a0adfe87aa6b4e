from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Tuple

YMD = Tuple[int, int, int]

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    saka: YMD
    jd: float
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None

    @property
    def year(self) -> int:
        return self.saka[0]

    @property
    def month(self) -> int:
        return self.saka[1]

    @property
    def day(self) -> int:
        return self.saka[2]
