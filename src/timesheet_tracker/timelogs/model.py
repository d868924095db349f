from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import LocationStatus, ReportingType
from ..ranges.model import TimeRange


@dataclass(frozen=True)
class TimeLogEntry:
    """One reported work segment of a day.

    Duration-typed entries carry ``duration_minutes``; start/end entries carry
    ``start_time``/``end_time`` (HH:mm). ``reporting_type`` comes from the
    project the task belongs to.
    """

    reporting_type: Optional[str] = None
    duration_minutes: Optional[int] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    task_id: Optional[int] = None
    location: Optional[str] = None
    description: Optional[str] = None

    @property
    def effective_reporting_type(self) -> Optional[ReportingType]:
        """Declared type, inferred from the fields when absent; None when unknown."""
        if self.reporting_type is not None:
            try:
                return ReportingType(self.reporting_type)
            except (TypeError, ValueError):
                return None
        if self.duration_minutes is not None:
            return ReportingType.DURATION
        return ReportingType.START_END

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TimeLogEntry":
        reporting_type = data.get("reportingType") or data.get("reporting_type")
        duration = data.get("duration", data.get("duration_minutes"))
        return cls(
            reporting_type=reporting_type or None,
            duration_minutes=duration,
            start_time=data.get("startTime", data.get("start_time")),
            end_time=data.get("endTime", data.get("end_time")),
            task_id=data.get("taskId", data.get("task_id")),
            location=data.get("location"),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class ProcessedTimeLog:
    """A time log that passed the submission checks."""

    task_id: Optional[int]
    duration_minutes: int
    time_range: Optional[TimeRange]
    location: LocationStatus
    description: Optional[str] = None


@dataclass(frozen=True)
class DailyReportCheck:
    window: TimeRange
    logs: list[ProcessedTimeLog]
    total_minutes: int
