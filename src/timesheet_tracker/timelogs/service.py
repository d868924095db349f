from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..core.constants import EXCLUSIVE_STATUSES
from ..core.enums import LocationStatus, ReportingType
from ..core.exceptions import ValidationError
from ..ranges.model import TimeRange
from ..ranges.validator import find_overlaps, validate_no_midnight_crossing, validate_time_range
from .aggregator import calculate_total_duration
from .factory import TimeLogCalculatorFactory
from .model import DailyReportCheck, ProcessedTimeLog, TimeLogEntry

logger = logging.getLogger(__name__)


def validate_required_fields(report: Mapping[str, Any]) -> dict[str, str]:
    """Field errors for one project report row of the daily report form.

    Empty dict means the row can be submitted.
    """
    errors: dict[str, str] = {}

    if not report.get("projectId"):
        errors["projectId"] = "Project is required"
    if not report.get("taskId"):
        errors["taskId"] = "Task is required"
    if not report.get("location"):
        errors["location"] = "Location is required"

    reporting_type = report.get("reportingType")
    if reporting_type == ReportingType.DURATION.value:
        duration = report.get("duration")
        if duration is None or duration == "":
            errors["duration"] = "Duration is required"
        elif duration == 0:
            errors["duration"] = "Duration must be greater than 0"
    elif reporting_type == ReportingType.START_END.value:
        start, end = report.get("startTime"), report.get("endTime")
        if not start:
            errors["startTime"] = "Start time is required"
        if not end:
            errors["endTime"] = "End time is required"
        if start and end:
            checked = validate_time_range(start, end)
            if not checked.ok:
                errors["endTime"] = checked.error

    return errors


def is_project_report_valid(report: Mapping[str, Any]) -> bool:
    return not validate_required_fields(report)


class TimeLogService:
    """Submission checks for a day's time logs.

    Unlike ``calculate_total_duration`` these are admission gates: the first
    problem raises ``ValidationError`` and nothing is accepted.
    """

    def __init__(self, *, factory: Optional[TimeLogCalculatorFactory] = None):
        self._factory = factory or TimeLogCalculatorFactory()

    def total_minutes(self, entries: Iterable[TimeLogEntry]) -> int:
        return calculate_total_duration(entries, factory=self._factory)

    def process_entry(self, entry: TimeLogEntry, index: int) -> ProcessedTimeLog:
        label = f"Time log #{index + 1}"

        valid_locations = [loc.value for loc in LocationStatus]
        if entry.location not in valid_locations:
            raise ValidationError(f"{label}: Location must be one of: {', '.join(valid_locations)}")

        kind = entry.effective_reporting_type
        if kind is None:
            raise ValidationError(f"{label}: Unknown reporting type: {entry.reporting_type}")

        time_range: Optional[TimeRange] = None
        if kind == ReportingType.START_END:
            if not entry.start_time or not entry.end_time:
                raise ValidationError(f"{label}: Project requires startTime and endTime (reportingType=startEnd)")

            checked = validate_time_range(entry.start_time, entry.end_time)
            if not checked.ok:
                raise ValidationError(f"{label}: {checked.error}")
            end_check = validate_no_midnight_crossing(entry.end_time)
            if not end_check.ok:
                raise ValidationError(f"{label}: {end_check.error}")

            time_range = checked.value
            duration = time_range.duration_minutes
        else:
            if entry.duration_minutes is None:
                raise ValidationError(f"{label}: Project requires duration in minutes (reportingType=duration)")
            if isinstance(entry.duration_minutes, bool) or not isinstance(entry.duration_minutes, int) or entry.duration_minutes <= 0:
                raise ValidationError(f"{label}: Duration must be a positive integer")
            duration = entry.duration_minutes

        return ProcessedTimeLog(
            task_id=entry.task_id,
            duration_minutes=duration,
            time_range=time_range,
            location=LocationStatus(entry.location),
            description=(entry.description or "").strip() or None,
        )

    def process_entries(self, entries: Sequence[TimeLogEntry]) -> list[ProcessedTimeLog]:
        logs = [self.process_entry(entry, i) for i, entry in enumerate(entries)]

        ranged = [(i, log.time_range) for i, log in enumerate(logs) if log.time_range is not None]
        overlaps = find_overlaps([r for _, r in ranged])
        if overlaps:
            a, b = overlaps[0]
            (ia, ra), (ib, rb) = ranged[a], ranged[b]
            raise ValidationError(f"Time log #{ia + 1} ({ra}) overlaps with time log #{ib + 1} ({rb})")
        return logs

    def check_daily_report(
        self,
        *,
        start_time: str,
        end_time: str,
        entries: Sequence[TimeLogEntry],
        existing_statuses: Iterable[str] = (),
        existing_ranges: Iterable[TimeRange] = (),
    ) -> DailyReportCheck:
        """Validate a work attendance window together with its time logs.

        ``existing_statuses``/``existing_ranges`` describe attendance already
        stored for the same date; the caller loads them.
        """
        window = validate_time_range(start_time, end_time).unwrap()
        validate_no_midnight_crossing(end_time).unwrap()

        for status in existing_statuses:
            value = getattr(status, "value", status)
            if value in EXCLUSIVE_STATUSES:
                raise ValidationError(
                    f"Cannot create work attendance - exclusive status ({value}) already exists on this date"
                )

        for existing in existing_ranges:
            if window.overlaps(existing):
                raise ValidationError(f"Time range {window} overlaps with existing attendance {existing}")

        logs = self.process_entries(entries)
        total = sum(log.duration_minutes for log in logs)
        if total < window.duration_minutes:
            raise ValidationError(
                f"Total time logs ({total} min) must be >= attendance duration ({window.duration_minutes} min)"
            )

        logger.debug("Daily report %s accepted with %d time logs (%d min)", window, len(logs), total)
        return DailyReportCheck(window=window, logs=logs, total_minutes=total)
