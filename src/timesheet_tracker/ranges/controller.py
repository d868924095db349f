from __future__ import annotations

from flask import Flask

from ..common.responses import get_json_body, json_endpoint, json_ok
from ..container import Container
from .validator import time_ranges_overlap, validate_no_midnight_crossing, validate_time_range


def register(app: Flask, container: Container) -> None:
    @app.route("/api/time/validate-range", methods=["POST"], endpoint="api_time_validate_range")
    @json_endpoint
    def api_time_validate_range():
        data = get_json_body()
        start, end = data.get("startTime"), data.get("endTime")

        time_range = validate_time_range(start, end).unwrap()
        validate_no_midnight_crossing(end).unwrap()
        return json_ok({"startTime": str(time_range.start), "endTime": str(time_range.end), "durationMinutes": time_range.duration_minutes})

    @app.route("/api/time/overlap", methods=["POST"], endpoint="api_time_overlap")
    @json_endpoint
    def api_time_overlap():
        data = get_json_body()
        first, second = data.get("first") or {}, data.get("second") or {}
        overlaps = time_ranges_overlap(
            first.get("startTime"),
            first.get("endTime"),
            second.get("startTime"),
            second.get("endTime"),
        )
        return json_ok({"overlaps": overlaps})
