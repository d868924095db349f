from __future__ import annotations

from typing import Optional

from ..core.constants import FULL_WORK_DAY_MINUTES
from ..core.enums import AttendanceStatus, BadgeColor, DayKind
from ..progress.calculator import format_duration_hours
from .model import Badge, ResolvedStatus

BADGE_LABELS = {
    "missing": "Missing",
    "weekend": "Weekend",
    AttendanceStatus.DAY_OFF: "Day off",
    AttendanceStatus.HALF_DAY_OFF: "Half day off",
    AttendanceStatus.SICKNESS: "Sickness",
    AttendanceStatus.RESERVES: "Reserves",
}

HALF_DAY_WORK_PREFIX = "Half day off/"

MISSING_BADGE = Badge(BADGE_LABELS["missing"], BadgeColor.RED)


def build_badge(
    kind: DayKind,
    resolved: Optional[ResolvedStatus],
    *,
    full_day_minutes: int = FULL_WORK_DAY_MINUTES,
) -> Badge:
    if kind == DayKind.WEEKEND:
        return Badge(BADGE_LABELS["weekend"], BadgeColor.BLUE)
    if kind == DayKind.MISSING or resolved is None:
        return MISSING_BADGE
    if resolved.is_missing_document:
        return MISSING_BADGE

    status = resolved.status
    if status == AttendanceStatus.HALF_DAY_OFF:
        if resolved.is_combined and resolved.work_minutes > 0:
            return Badge(HALF_DAY_WORK_PREFIX + format_duration_hours(resolved.work_minutes), BadgeColor.PURPLE)
        return Badge(BADGE_LABELS[status], BadgeColor.BLUE)

    if status in (AttendanceStatus.DAY_OFF, AttendanceStatus.SICKNESS, AttendanceStatus.RESERVES):
        return Badge(BADGE_LABELS[status], BadgeColor.BLUE)

    if status == AttendanceStatus.WORK:
        color = BadgeColor.GREEN if resolved.work_minutes >= full_day_minutes else BadgeColor.ORANGE
        return Badge(format_duration_hours(resolved.work_minutes), color)

    return MISSING_BADGE
