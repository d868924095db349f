from __future__ import annotations

import pytest

from timesheet_tracker.core.enums import LocationStatus, ReportingType
from timesheet_tracker.core.exceptions import ValidationError
from timesheet_tracker.ranges.validator import validate_time_range
from timesheet_tracker.timelogs.model import TimeLogEntry
from timesheet_tracker.timelogs.service import TimeLogService, is_project_report_valid, validate_required_fields


def _duration(minutes, location="office"):
    return TimeLogEntry(reporting_type=ReportingType.DURATION, duration_minutes=minutes, location=location, task_id=1)


def _start_end(start, end, location="office"):
    return TimeLogEntry(reporting_type=ReportingType.START_END, start_time=start, end_time=end, location=location, task_id=2)


def test_process_entries_returns_durations():
    svc = TimeLogService()
    logs = svc.process_entries([_duration(240), _start_end("13:00", "16:00", "home")])

    assert [log.duration_minutes for log in logs] == [240, 180]
    assert logs[0].time_range is None
    assert str(logs[1].time_range) == "13:00-16:00"
    assert logs[1].location == LocationStatus.HOME


@pytest.mark.parametrize("minutes", [0, -5, 1.5, True])
def test_duration_must_be_positive_integer(minutes):
    with pytest.raises(ValidationError, match="Time log #1: Duration must be a positive integer"):
        TimeLogService().process_entries([_duration(minutes)])


def test_duration_required():
    with pytest.raises(ValidationError, match="requires duration in minutes"):
        TimeLogService().process_entries([_duration(None)])


def test_start_end_required():
    with pytest.raises(ValidationError, match="Time log #2: Project requires startTime and endTime"):
        TimeLogService().process_entries([_duration(30), _start_end("09:00", None)])


def test_start_end_order_checked():
    with pytest.raises(ValidationError, match="End time must be after start time"):
        TimeLogService().process_entries([_start_end("10:00", "10:00")])


def test_start_end_rejects_24_00():
    with pytest.raises(ValidationError, match="Invalid time format: 24:00"):
        TimeLogService().process_entries([_start_end("22:00", "24:00")])


def test_location_checked():
    with pytest.raises(ValidationError, match="Location must be one of: office, client, home"):
        TimeLogService().process_entries([_duration(30, location="moon")])


def test_overlapping_entries_rejected():
    entries = [_start_end("09:00", "12:00"), _duration(30), _start_end("11:00", "13:00")]
    with pytest.raises(ValidationError, match=r"Time log #1 \(09:00-12:00\) overlaps with time log #3 \(11:00-13:00\)"):
        TimeLogService().process_entries(entries)


def test_adjacent_entries_accepted():
    logs = TimeLogService().process_entries([_start_end("09:00", "12:00"), _start_end("12:00", "17:00")])
    assert sum(log.duration_minutes for log in logs) == 480


def test_check_daily_report_ok():
    check = TimeLogService().check_daily_report(
        start_time="09:00",
        end_time="17:00",
        entries=[_duration(240), _start_end("13:00", "17:00")],
    )
    assert check.total_minutes == 480
    assert check.window.duration_minutes == 480


def test_check_daily_report_needs_enough_logged_time():
    with pytest.raises(ValidationError, match=r"Total time logs \(420 min\) must be >= attendance duration \(480 min\)"):
        TimeLogService().check_daily_report(
            start_time="09:00",
            end_time="17:00",
            entries=[_duration(240), _start_end("09:00", "12:00")],
        )


def test_check_daily_report_blocks_exclusive_status():
    with pytest.raises(ValidationError, match=r"exclusive status \(sickness\)"):
        TimeLogService().check_daily_report(
            start_time="09:00",
            end_time="10:00",
            entries=[_duration(60)],
            existing_statuses=["work", "sickness"],
        )


def test_check_daily_report_allows_half_day_off_next_to_it():
    check = TimeLogService().check_daily_report(
        start_time="13:00",
        end_time="17:00",
        entries=[_duration(240)],
        existing_statuses=["halfDayOff"],
        existing_ranges=[validate_time_range("08:00", "13:00").unwrap()],
    )
    assert check.total_minutes == 240


def test_check_daily_report_blocks_overlap_with_existing():
    with pytest.raises(ValidationError, match="Time range 12:00-17:00 overlaps with existing attendance 08:00-13:00"):
        TimeLogService().check_daily_report(
            start_time="12:00",
            end_time="17:00",
            entries=[_duration(300)],
            existing_ranges=[validate_time_range("08:00", "13:00").unwrap()],
        )


def test_check_daily_report_invalid_window():
    with pytest.raises(ValidationError, match="End time must be after start time"):
        TimeLogService().check_daily_report(start_time="17:00", end_time="09:00", entries=[])


def test_total_minutes_is_lenient():
    assert TimeLogService().total_minutes([_duration(60), _start_end("bad", "10:00")]) == 60


def test_required_fields_duration_report():
    errors = validate_required_fields({"reportingType": "duration", "duration": 0})
    assert errors == {
        "projectId": "Project is required",
        "taskId": "Task is required",
        "location": "Location is required",
        "duration": "Duration must be greater than 0",
    }


def test_required_fields_start_end_report():
    base = {"projectId": 1, "taskId": 2, "location": "office", "reportingType": "startEnd"}
    assert validate_required_fields({**base, "startTime": "10:00"}) == {"endTime": "End time is required"}
    assert validate_required_fields({**base, "startTime": "10:00", "endTime": "09:00"}) == {
        "endTime": "End time must be after start time"
    }
    assert is_project_report_valid({**base, "startTime": "09:00", "endTime": "10:00"})


def test_unknown_reporting_type_rejected():
    entry = TimeLogEntry(reporting_type="hourly", duration_minutes=30, location="office", task_id=1)
    with pytest.raises(ValidationError, match="Time log #1: Unknown reporting type: hourly"):
        TimeLogService().process_entries([entry])
