from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import MINUTES_PER_HOUR
from ..ranges.validator import range_minutes
from .model import ProgressResult, TrackerCompletion


def _percent_of(part: int, whole: int) -> int:
    """round(part / whole * 100), halves rounded up. ``whole`` must be > 0."""
    value = Decimal(part) * 100 / Decimal(whole)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_target_duration(entrance_time: str, exit_time: str) -> int:
    """Entrance-to-exit minutes, or 0 when the pair is missing or invalid."""
    return range_minutes(entrance_time, exit_time)


def calculate_progress_percentage(total: int, target: int) -> int:
    """Progress in percent, 0..100. Overtime is shown as 100."""
    if target <= 0:
        return 0
    return max(0, min(_percent_of(total, target), 100))


def validate_tracker_complete(total: int, target: int) -> TrackerCompletion:
    is_complete = total >= target
    missing = 0 if is_complete else target - total
    missing_percentage = _percent_of(missing, target) if target > 0 else 0
    return TrackerCompletion(
        is_complete=is_complete,
        missing_minutes=missing,
        missing_percentage=missing_percentage,
    )


def calculate_progress(total: int, target: int) -> ProgressResult:
    completion = validate_tracker_complete(total, target)
    return ProgressResult(
        total_minutes=total,
        target_minutes=target,
        percentage=calculate_progress_percentage(total, target),
        is_complete=completion.is_complete,
        missing_minutes=completion.missing_minutes,
        missing_percentage=completion.missing_percentage,
    )


def format_duration_hours(minutes: int) -> str:
    """540 -> "9 h", 450 -> "7.5 h"."""
    hours = minutes / MINUTES_PER_HOUR
    if hours == int(hours):
        return f"{int(hours)} h"
    return f"{hours:.1f} h"
