from __future__ import annotations

from typing import Sequence

from ..clock.arithmetic import parse_duration_input, parse_time_from_picker
from ..clock.model import ClockTime
from ..common.result import Result
from ..core.constants import END_BEFORE_START_ERROR, TIMES_REQUIRED_ERROR
from .model import TimeRange


def validate_time_range(start_time: str, end_time: str) -> Result[TimeRange]:
    """Admission check for a start/end pair: both valid HH:mm and end > start."""
    if not start_time or not end_time:
        return Result.failure(TIMES_REQUIRED_ERROR)

    start = parse_time_from_picker(start_time)
    if not start.ok:
        return Result.failure(start.error)
    end = parse_time_from_picker(end_time)
    if not end.ok:
        return Result.failure(end.error)

    if end.value <= start.value:
        return Result.failure(END_BEFORE_START_ERROR)
    return Result.success(TimeRange(start=start.value, end=end.value))


def validate_no_midnight_crossing(end_time: str) -> Result[ClockTime]:
    """Reject end times of 24:00 and later.

    There are no overnight shifts, so "24:00" is a malformed value rather than
    the end of the day.
    """
    return parse_time_from_picker(end_time)


def calculate_duration_minutes(start_time: str, end_time: str) -> int:
    """end - start in minutes, 0 when either side is unparsable.

    Accepts typed input (``9:00``) as well as picker values. Reversed input
    yields a negative number; callers that need a positive duration validate
    the range first.
    """
    start = parse_duration_input(start_time)
    end = parse_duration_input(end_time)
    if start is None or end is None:
        return 0
    return end - start


def range_minutes(start_time: str, end_time: str) -> int:
    """Minutes of a start/end pair for totals; reversed or empty ranges give 0."""
    return max(0, calculate_duration_minutes(start_time, end_time))


def time_ranges_overlap(start1: str, end1: str, start2: str, end2: str) -> bool:
    parsed = [parse_time_from_picker(t) for t in (start1, end1, start2, end2)]
    if not all(p.ok for p in parsed):
        return False

    s1, e1, s2, e2 = (p.value for p in parsed)
    return TimeRange(start=s1, end=e1).overlaps(TimeRange(start=s2, end=e2))


def find_overlaps(ranges: Sequence[TimeRange]) -> list[tuple[int, int]]:
    """Index pairs (i, j), i < j, of ranges that share interior time."""
    pairs: list[tuple[int, int]] = []
    for i in range(len(ranges)):
        for j in range(i + 1, len(ranges)):
            if ranges[i].overlaps(ranges[j]):
                pairs.append((i, j))
    return pairs
