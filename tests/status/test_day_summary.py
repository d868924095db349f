from __future__ import annotations

from datetime import date

from timesheet_tracker.core.enums import BadgeColor, DayKind
from timesheet_tracker.status.badge import build_badge
from timesheet_tracker.status.model import DailyAttendance
from timesheet_tracker.status.resolver import resolve_status
from timesheet_tracker.status.service import DaySummaryService, attendance_minutes


def _att(day, status, start=None, end=None, document=None):
    return DailyAttendance(date=day, status=status, start_time=start, end_time=end, document=document)


def test_full_work_day_is_green(fixed_today):
    summary = DaySummaryService().summarize(fixed_today, [_att(fixed_today, "work", "08:00", "17:00")])

    assert summary.kind == DayKind.REPORTED
    assert summary.total_minutes == 540
    assert summary.badge.label == "9 h"
    assert summary.badge.color == BadgeColor.GREEN


def test_short_work_day_is_orange(fixed_today):
    summary = DaySummaryService().summarize(fixed_today, [_att(fixed_today, "work", "09:00", "16:30")])
    assert summary.badge.label == "7.5 h"
    assert summary.badge.color == BadgeColor.ORANGE


def test_half_day_off_with_work_is_purple(fixed_today):
    summary = DaySummaryService().summarize(
        fixed_today,
        [_att(fixed_today, "halfDayOff"), _att(fixed_today, "work", "13:00", "17:00")],
    )
    assert summary.resolved.is_combined
    assert summary.badge.label == "Half day off/4 h"
    assert summary.badge.color == BadgeColor.PURPLE


def test_sickness_without_document_shows_missing(fixed_today):
    summary = DaySummaryService().summarize(fixed_today, [_att(fixed_today, "sickness")])
    assert summary.badge.label == "Missing"
    assert summary.badge.color == BadgeColor.RED
    assert summary.can_add_report is False


def test_sickness_with_document(fixed_today):
    summary = DaySummaryService().summarize(fixed_today, [_att(fixed_today, "sickness", document=True)])
    assert summary.badge.label == "Sickness"
    assert summary.badge.color == BadgeColor.BLUE


def test_document_on_any_record_of_the_day_counts(fixed_today):
    records = [_att(fixed_today, "sickness"), _att(fixed_today, "work", "08:00", "10:00", document=True)]
    summary = DaySummaryService().summarize(fixed_today, records)
    assert summary.resolved.has_document is True
    assert summary.badge.label == "Sickness"
    assert summary.badge.color == BadgeColor.BLUE


def test_weekend_and_missing_days(fixed_today):
    svc = DaySummaryService()
    assert svc.summarize(date(2026, 1, 17), []).badge.label == "Weekend"
    missing = svc.summarize(fixed_today, [])
    assert missing.kind == DayKind.MISSING
    assert missing.badge.color == BadgeColor.RED
    assert missing.resolved is None
    assert missing.can_add_report is True


def test_unknown_status_badge_is_missing(fixed_today):
    resolved = resolve_status(["training"])
    assert build_badge(DayKind.REPORTED, resolved).label == "Missing"


def test_full_day_threshold_is_configurable(fixed_today):
    svc = DaySummaryService(full_day_minutes=480)
    summary = svc.summarize(fixed_today, [_att(fixed_today, "work", "09:00", "17:00")])
    assert summary.badge.color == BadgeColor.GREEN


def test_attendance_minutes_skips_open_and_bad_records(fixed_today):
    records = [
        _att(fixed_today, "work", "08:00", "12:00"),
        _att(fixed_today, "work", "13:00", None),
        _att(fixed_today, "work", "15:00", "14:00"),
    ]
    assert attendance_minutes(records) == 240


def test_summarize_month_latest_first(fixed_today):
    attendances = [
        DailyAttendance.from_dict({"date": "2026-01-13", "status": "work", "startTime": "08:00", "endTime": "17:00"}),
        DailyAttendance.from_dict({"date": "2026-01-02", "status": "dayOff"}),
    ]
    rows = DaySummaryService().summarize_month(month=1, year=2026, attendances=attendances, today=fixed_today)

    assert len(rows) == 14
    assert rows[0].date == fixed_today
    assert rows[0].kind == DayKind.MISSING
    assert rows[1].badge.label == "9 h"
    # 2026-01-02 is a Friday, but a reported day is never shown as weekend
    assert rows[-2].badge.label == "Day off"
    # 2026-01-01 is a Thursday with nothing reported
    assert rows[-1].kind == DayKind.MISSING


def test_day_summary_to_dict(fixed_today):
    data = DaySummaryService().summarize(fixed_today, [_att(fixed_today, "dayOff")]).to_dict()
    assert data["date"] == "2026-01-14"
    assert data["badge"] == {"label": "Day off", "color": "blue"}
    assert data["canAddReport"] is False
