from __future__ import annotations

from flask import Flask

from ..common.responses import get_json_body, json_endpoint, json_ok
from ..container import Container
from .day_counter import day_count


def register(app: Flask, container: Container) -> None:
    @app.route("/api/absence/day-count", methods=["POST"], endpoint="api_absence_day_count")
    @json_endpoint
    def api_absence_day_count():
        data = get_json_body()
        return json_ok({"days": day_count(data.get("startDate"), data.get("endDate"))})
