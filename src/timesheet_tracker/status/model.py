from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import try_parse_iso_date
from ..core.constants import DOCUMENT_REQUIRED_STATUSES, EXCLUSIVE_STATUSES
from ..core.enums import AttendanceStatus, BadgeColor, DayKind
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class DailyAttendance:
    """Attendance record of one user on one date, as loaded upstream."""

    date: date
    status: str
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    document: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DailyAttendance":
        if "date" not in data or "status" not in data:
            raise ValidationError("Attendance record needs date and status")

        day = try_parse_iso_date(data["date"])
        if day is None:
            raise ValidationError(f"Invalid date: {data['date']}")
        return cls(
            date=day,
            status=getattr(data["status"], "value", data["status"]),
            start_time=data.get("startTime", data.get("start_time")),
            end_time=data.get("endTime", data.get("end_time")),
            document=data.get("document"),
        )


@dataclass(frozen=True)
class ResolvedStatus:
    """Single status shown for a day that may carry several records."""

    status: Optional[AttendanceStatus]
    raw_status: str
    is_combined: bool = False
    work_minutes: int = 0
    has_document: bool = False
    is_fallback: bool = False

    @property
    def is_missing_document(self) -> bool:
        return self.raw_status in DOCUMENT_REQUIRED_STATUSES and not self.has_document

    @property
    def is_exclusive(self) -> bool:
        return self.raw_status in EXCLUSIVE_STATUSES

    def to_dict(self) -> dict:
        return {
            "status": self.raw_status,
            "isCombined": self.is_combined,
            "workMinutes": self.work_minutes,
            "hasDocument": self.has_document,
            "isMissingDocument": self.is_missing_document,
            "isFallback": self.is_fallback,
        }


@dataclass(frozen=True)
class Badge:
    label: str
    color: BadgeColor


@dataclass(frozen=True)
class DaySummary:
    date: date
    kind: DayKind
    resolved: Optional[ResolvedStatus]
    total_minutes: int
    badge: Badge

    @property
    def can_add_report(self) -> bool:
        return self.resolved is None or not self.resolved.is_exclusive

    def to_dict(self) -> dict:
        return {
            "date": self.date.strftime("%Y-%m-%d"),
            "kind": self.kind.value,
            "status": self.resolved.to_dict() if self.resolved else None,
            "totalMinutes": self.total_minutes,
            "badge": {"label": self.badge.label, "color": self.badge.color.value},
            "canAddReport": self.can_add_report,
        }
