from __future__ import annotations

from flask import Flask

from ..common.responses import get_json_body, json_endpoint, json_ok
from ..common.validators import require_non_empty
from ..container import Container
from ..core.exceptions import ValidationError
from ..ranges.validator import validate_time_range
from .model import TimeLogEntry
from .service import validate_required_fields


def _entries_from(data: dict) -> list[TimeLogEntry]:
    raw = data.get("timeLogs")
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(item, dict) for item in raw):
        raise ValidationError("timeLogs must be a list of objects")
    return [TimeLogEntry.from_dict(item) for item in raw]


def register(app: Flask, container: Container) -> None:
    @app.route("/api/time-logs/total", methods=["POST"], endpoint="api_time_logs_total")
    @json_endpoint
    def api_time_logs_total():
        entries = _entries_from(get_json_body())
        return json_ok({"totalMinutes": container.time_log_service.total_minutes(entries)})

    @app.route("/api/time-logs/validate", methods=["POST"], endpoint="api_time_logs_validate")
    @json_endpoint
    def api_time_logs_validate():
        data = get_json_body()
        start = require_non_empty(data.get("startTime") or "", "startTime")
        end = require_non_empty(data.get("endTime") or "", "endTime")

        existing_ranges = [
            validate_time_range(r.get("startTime"), r.get("endTime")).unwrap()
            for r in (data.get("existingRanges") or [])
        ]
        check = container.time_log_service.check_daily_report(
            start_time=start,
            end_time=end,
            entries=_entries_from(data),
            existing_statuses=data.get("existingStatuses") or [],
            existing_ranges=existing_ranges,
        )
        return json_ok(
            {
                "window": str(check.window),
                "totalMinutes": check.total_minutes,
                "timeLogs": [
                    {
                        "taskId": log.task_id,
                        "durationMinutes": log.duration_minutes,
                        "timeRange": str(log.time_range) if log.time_range else None,
                        "location": log.location.value,
                    }
                    for log in check.logs
                ],
            }
        )

    @app.route("/api/time-logs/form-errors", methods=["POST"], endpoint="api_time_logs_form_errors")
    @json_endpoint
    def api_time_logs_form_errors():
        errors = validate_required_fields(get_json_body())
        return json_ok({"valid": not errors, "errors": errors})
