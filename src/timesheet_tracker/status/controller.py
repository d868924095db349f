from __future__ import annotations

from flask import Flask

from ..common.responses import get_json_body, int_field, json_endpoint, json_ok
from ..common.validators import validate_date_format
from ..container import Container
from ..core.exceptions import ValidationError
from .model import DailyAttendance
from .resolver import require_known, resolve_status


def register(app: Flask, container: Container) -> None:
    @app.route("/api/status/resolve", methods=["POST"], endpoint="api_status_resolve")
    @json_endpoint
    def api_status_resolve():
        data = get_json_body()
        statuses = data.get("statuses") or []
        if not isinstance(statuses, list):
            raise ValidationError("statuses must be a list")

        resolved = resolve_status(
            statuses,
            has_document=bool(data.get("hasDocument")),
            work_minutes=int_field(data, "workMinutes"),
        )
        if data.get("strict"):
            require_known(resolved)
        return json_ok(resolved.to_dict() if resolved else None)

    @app.route("/api/status/day-summary", methods=["POST"], endpoint="api_status_day_summary")
    @json_endpoint
    def api_status_day_summary():
        data = get_json_body()
        day = validate_date_format(data.get("date")).unwrap()
        attendances = [
            DailyAttendance.from_dict({**item, "date": day})
            for item in (data.get("attendances") or [])
            if isinstance(item, dict)
        ]
        summary = container.day_summary_service.summarize(day, attendances)
        return json_ok(summary.to_dict())

    @app.route("/api/status/month", methods=["POST"], endpoint="api_status_month")
    @json_endpoint
    def api_status_month():
        data = get_json_body()
        month, year = int_field(data, "month"), int_field(data, "year")
        if not 1 <= month <= 12 or year <= 0:
            raise ValidationError("month must be 1-12 and year must be positive")

        attendances = [DailyAttendance.from_dict(item) for item in (data.get("attendances") or []) if isinstance(item, dict)]
        rows = container.day_summary_service.summarize_month(month=month, year=year, attendances=attendances)
        return json_ok([row.to_dict() for row in rows])
