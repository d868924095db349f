from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import try_parse_iso_date


@dataclass(frozen=True)
class DateSpan:
    """Multi-day absence (vacation, sickness, reserves), both ends inclusive."""

    start: date
    end: date

    @classmethod
    def from_strings(cls, start: str, end: str) -> Optional["DateSpan"]:
        start_d = try_parse_iso_date(start)
        end_d = try_parse_iso_date(end)
        if start_d is None or end_d is None:
            return None
        return cls(start=start_d, end=end_d)

    @property
    def day_count(self) -> int:
        return max(0, (self.end - self.start).days + 1)
