from __future__ import annotations

import re
from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import now_local, try_parse_iso_date
from .result import Result

DATE_FORMAT_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
DURATION_FORMAT_RE = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def validate_duration(value: str) -> Result[int]:
    """Duration typed as HH:mm, at most 23:59. Returns minutes."""
    if not value:
        return Result.failure("Duration is required")
    match = DURATION_FORMAT_RE.match(value)
    if not match:
        return Result.failure("Invalid format. Use HH:mm (e.g., 08:30)")
    return Result.success(int(match.group(1)) * 60 + int(match.group(2)))


def validate_date_format(value: str) -> Result[date]:
    if not value:
        return Result.failure("Date is required")
    if not DATE_FORMAT_RE.match(value):
        return Result.failure("Invalid format. Use YYYY-MM-DD")

    parsed = try_parse_iso_date(value)
    if parsed is None:
        return Result.failure("Invalid date")
    return Result.success(parsed)


def validate_not_future_date(value: str, *, today: Optional[date] = None) -> Result[date]:
    checked = validate_date_format(value)
    if not checked.ok:
        return checked

    today = today or now_local().date()
    if checked.value > today:
        return Result.failure("Cannot report for future dates")
    return checked
