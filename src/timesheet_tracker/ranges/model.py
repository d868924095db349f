from __future__ import annotations

from dataclasses import dataclass

from ..clock.model import ClockTime


@dataclass(frozen=True)
class TimeRange:
    """One contiguous segment within a day. Build it via validate_time_range."""

    start: ClockTime
    end: ClockTime

    @property
    def duration_minutes(self) -> int:
        return self.end.minutes - self.start.minutes

    def overlaps(self, other: "TimeRange") -> bool:
        # Half-open: ranges that only touch (09:00-12:00, 12:00-17:00) are fine.
        return self.start.minutes < other.end.minutes and other.start.minutes < self.end.minutes

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"
