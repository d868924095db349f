from __future__ import annotations

from flask import Flask

from ..common.responses import get_json_body, int_field, json_endpoint, json_ok
from ..container import Container
from ..timelogs.model import TimeLogEntry
from .calculator import calculate_progress, format_duration_hours


def register(app: Flask, container: Container) -> None:
    @app.route("/api/progress", methods=["POST"], endpoint="api_progress")
    @json_endpoint
    def api_progress():
        """Progress of a day's report. Never fails on bad times; they count as 0."""
        data = get_json_body()
        if "timeLogs" in data:
            raw = data.get("timeLogs")
            items = raw if isinstance(raw, list) else []
            entries = [TimeLogEntry.from_dict(item) for item in items if isinstance(item, dict)]
            result = container.progress_service.for_day(
                entrance_time=data.get("entranceTime"),
                exit_time=data.get("exitTime"),
                entries=entries,
            )
        else:
            result = calculate_progress(int_field(data, "total", strict=False), int_field(data, "target", strict=False))

        payload = result.to_dict()
        payload["totalLabel"] = format_duration_hours(result.total_minutes)
        payload["targetLabel"] = format_duration_hours(result.target_minutes)
        return json_ok(payload)
