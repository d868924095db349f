"""Clock-time arithmetic on ``HH:mm`` strings.

Two parsers with different strictness live here on purpose:

* ``parse_time_from_picker`` only accepts what a time picker emits, i.e.
  exactly two-digit hours (``09:00``). Every operation that does arithmetic
  goes through it.
* ``format_time_for_picker`` / ``parse_duration_input`` accept typed input
  with one- or two-digit hours (``9:00``) and normalize it.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.result import Result
from ..core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR, TIME_FORMAT_ERROR
from .model import ClockTime

STRICT_TIME_RE = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])$")
FLEXIBLE_TIME_RE = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


def _parse_flexible(text) -> Optional[ClockTime]:
    if not isinstance(text, str):
        return None
    match = FLEXIBLE_TIME_RE.match(text.strip())
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return ClockTime.of(hours, minutes)


def parse_time_from_picker(text) -> Result[ClockTime]:
    """Strict ``HH:mm`` parse. ``9:00``, ``24:00`` and ``09:60`` are rejected."""
    if not isinstance(text, str) or not text.strip():
        return Result.failure("Time is required")

    trimmed = text.strip()
    match = STRICT_TIME_RE.match(trimmed)
    if not match:
        return Result.failure(TIME_FORMAT_ERROR.format(value=trimmed))
    return Result.success(ClockTime.of(int(match.group(1)), int(match.group(2))))


def format_time_for_picker(text) -> str:
    """Normalize ``H:mm``/``HH:mm`` input to ``HH:mm``; ``""`` when invalid."""
    parsed = _parse_flexible(text)
    return str(parsed) if parsed is not None else ""


def parse_duration_input(text) -> Optional[int]:
    """``"8:30"`` -> 510. Returns None for anything outside 0:00..23:59."""
    parsed = _parse_flexible(text)
    return parsed.minutes if parsed is not None else None


def format_duration_input(minutes: int) -> str:
    """Minutes as ``HH:mm``. Negative clamps to 00:00; 24h and above is kept (48:00)."""
    if minutes < 0:
        return "00:00"
    hours, mins = divmod(int(minutes), MINUTES_PER_HOUR)
    return f"{hours:02d}:{mins:02d}"


def add_minutes_to_time(time: str, minutes_to_add: int) -> Result[ClockTime]:
    parsed = parse_time_from_picker(time)
    if not parsed.ok:
        return parsed
    return Result.success(ClockTime((parsed.value.minutes + int(minutes_to_add)) % MINUTES_PER_DAY))


def round_time_to_interval(time: str, interval_minutes: int) -> Result[ClockTime]:
    """Round to the nearest interval, halves going up. 23:45 @ 30 -> 00:00."""
    if interval_minutes is None or interval_minutes <= 0:
        return Result.failure("Interval must be a positive number of minutes")

    parsed = parse_time_from_picker(time)
    if not parsed.ok:
        return parsed

    interval = int(interval_minutes)
    total = parsed.value.minutes
    rounded = (2 * total + interval) // (2 * interval) * interval
    if rounded >= MINUTES_PER_DAY:
        rounded = 0
    return Result.success(ClockTime(rounded))


def compare_times(time1: str, time2: str) -> Result[int]:
    parsed1 = parse_time_from_picker(time1)
    if not parsed1.ok:
        return Result.failure(parsed1.error)
    parsed2 = parse_time_from_picker(time2)
    if not parsed2.ok:
        return Result.failure(parsed2.error)

    a = parsed1.value.minutes
    b = parsed2.value.minutes
    if a < b:
        return Result.success(-1)
    if a > b:
        return Result.success(1)
    return Result.success(0)


def is_time_in_range(time: str, start_time: str, end_time: str) -> bool:
    """Inclusive on both ends. Unparsable input is simply "not in range"."""
    vs_start = compare_times(time, start_time)
    vs_end = compare_times(time, end_time)
    if not vs_start.ok or not vs_end.ok:
        return False
    return vs_start.value >= 0 and vs_end.value <= 0


def current_time(now: Optional[datetime] = None) -> str:
    now = now or now_local()
    return f"{now.hour:02d}:{now.minute:02d}"
