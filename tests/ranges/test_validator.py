from __future__ import annotations

import pytest

from timesheet_tracker.clock.model import ClockTime
from timesheet_tracker.ranges.model import TimeRange
from timesheet_tracker.ranges.validator import (
    calculate_duration_minutes,
    find_overlaps,
    time_ranges_overlap,
    validate_no_midnight_crossing,
    validate_time_range,
)


def _range(start: str, end: str) -> TimeRange:
    return validate_time_range(start, end).unwrap()


def test_duration_of_work_day():
    assert calculate_duration_minutes("09:00", "17:00") == 480


def test_duration_accepts_typed_hours():
    assert calculate_duration_minutes("9:00", "17:00") == 480


def test_duration_keeps_sign_of_reversed_input():
    assert calculate_duration_minutes("17:00", "09:00") == -480


def test_duration_is_zero_for_bad_input():
    assert calculate_duration_minutes("nine", "17:00") == 0
    assert calculate_duration_minutes("09:00", None) == 0


def test_validate_range_ok():
    checked = validate_time_range("09:00", "12:30")
    assert checked.ok
    assert checked.value.duration_minutes == 210
    assert str(checked.value) == "09:00-12:30"


@pytest.mark.parametrize("start, end", [("09:00", "09:00"), ("17:00", "09:00")])
def test_validate_range_end_must_be_after_start(start, end):
    checked = validate_time_range(start, end)
    assert not checked.ok
    assert checked.error == "End time must be after start time"


def test_validate_range_requires_both_times():
    assert validate_time_range("", "10:00").error == "Start and end times are required"
    assert validate_time_range("09:00", None).error == "Start and end times are required"


def test_validate_range_reports_format_error():
    assert validate_time_range("09:00", "24:00").error == "Invalid time format: 24:00. Expected HH:mm"


@pytest.mark.parametrize("value", ["24:00", "25:00", "24:30"])
def test_midnight_crossing_rejected(value):
    checked = validate_no_midnight_crossing(value)
    assert not checked.ok
    assert "Invalid time format" in checked.error


def test_midnight_crossing_allows_last_minute():
    assert validate_no_midnight_crossing("23:59").ok


def test_adjacent_ranges_do_not_overlap():
    assert time_ranges_overlap("09:00", "12:00", "12:00", "17:00") is False
    assert time_ranges_overlap("12:00", "17:00", "09:00", "12:00") is False


@pytest.mark.parametrize(
    "ranges",
    [
        ("09:00", "14:00", "12:00", "18:00"),
        ("08:00", "20:00", "10:00", "14:00"),
        ("09:00", "17:00", "09:00", "17:00"),
        ("09:00", "12:01", "12:00", "17:00"),
    ],
)
def test_overlapping_ranges(ranges):
    assert time_ranges_overlap(*ranges) is True


def test_separate_ranges_do_not_overlap():
    assert time_ranges_overlap("06:00", "10:00", "18:00", "22:00") is False


def test_overlap_false_on_bad_input():
    assert time_ranges_overlap("9:00", "14:00", "12:00", "18:00") is False


def test_one_minute_ranges_follow_ordering():
    a = TimeRange(ClockTime(600), ClockTime(601))
    b = TimeRange(ClockTime(601), ClockTime(602))
    assert not a.overlaps(b)
    assert a.overlaps(a)


def test_find_overlaps_reports_index_pairs():
    ranges = [_range("09:00", "10:00"), _range("10:00", "11:00"), _range("10:30", "12:00"), _range("08:00", "09:30")]
    assert find_overlaps(ranges) == [(0, 3), (1, 2)]


def test_find_overlaps_empty():
    assert find_overlaps([]) == []
