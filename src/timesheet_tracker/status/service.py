from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import generate_month_dates, parse_iso_date
from ..core.constants import DEFAULT_WEEKEND_DAYS, FULL_WORK_DAY_MINUTES
from ..ranges.validator import range_minutes
from .badge import build_badge
from .model import DailyAttendance, DaySummary
from .resolver import classify_day, resolve_status


def attendance_minutes(attendances: Iterable[DailyAttendance]) -> int:
    """Minutes covered by records that have both start and end time."""
    total = 0
    for att in attendances:
        if att.start_time and att.end_time:
            total += range_minutes(att.start_time, att.end_time)
    return total


class DaySummaryService:
    """Use case: month history rows (one badge per calendar date)."""

    def __init__(
        self,
        *,
        weekend_days: Iterable[int] = DEFAULT_WEEKEND_DAYS,
        full_day_minutes: int = FULL_WORK_DAY_MINUTES,
    ):
        self._weekend_days = tuple(int(d) for d in weekend_days)
        self._full_day_minutes = int(full_day_minutes)

    def summarize(self, day: date, attendances: Sequence[DailyAttendance]) -> DaySummary:
        kind = classify_day(day, attendances, self._weekend_days)
        total = attendance_minutes(attendances)
        resolved = resolve_status(
            [a.status for a in attendances],
            # any record of the day counts: the approval document is attached to
            # the day, not to the sickness/reserves record
            has_document=any(a.document is True for a in attendances),
            work_minutes=total,
        )
        return DaySummary(
            date=day,
            kind=kind,
            resolved=resolved,
            total_minutes=total,
            badge=build_badge(kind, resolved, full_day_minutes=self._full_day_minutes),
        )

    def summarize_month(
        self,
        *,
        month: int,
        year: int,
        attendances: Iterable[DailyAttendance],
        today: Optional[date] = None,
    ) -> list[DaySummary]:
        """Latest day first; the current month stops at today."""
        by_date: dict[date, list[DailyAttendance]] = defaultdict(list)
        for att in attendances:
            by_date[att.date].append(att)

        out: list[DaySummary] = []
        for day_s in generate_month_dates(month, year, up_to_today=True, today=today):
            day = parse_iso_date(day_s)
            out.append(self.summarize(day, by_date.get(day, [])))
        return out
