from __future__ import annotations

from flask import Flask

from ..common.responses import get_json_body, int_field, json_endpoint, json_ok
from ..container import Container
from .arithmetic import (
    add_minutes_to_time,
    compare_times,
    format_time_for_picker,
    is_time_in_range,
    parse_time_from_picker,
    round_time_to_interval,
)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/time/normalize", methods=["POST"], endpoint="api_time_normalize")
    @json_endpoint
    def api_time_normalize():
        """Normalize typed input and snap it to the picker interval."""
        data = get_json_body()
        normalized = format_time_for_picker(data.get("time"))
        interval = int_field(data, "interval", container.time_picker_interval)

        rounded = round_time_to_interval(normalized, interval).unwrap()
        return json_ok({"normalized": normalized, "rounded": str(rounded), "interval": interval})

    @app.route("/api/time/shift", methods=["POST"], endpoint="api_time_shift")
    @json_endpoint
    def api_time_shift():
        data = get_json_body()
        shifted = add_minutes_to_time(data.get("time"), int_field(data, "minutes")).unwrap()
        return json_ok({"time": str(shifted)})

    @app.route("/api/time/compare", methods=["POST"], endpoint="api_time_compare")
    @json_endpoint
    def api_time_compare():
        data = get_json_body()
        time = data.get("time")
        result = {"comparison": compare_times(time, data.get("other")).unwrap()}
        if data.get("start") is not None and data.get("end") is not None:
            result["inRange"] = is_time_in_range(time, data["start"], data["end"])
        return json_ok(result)

    @app.route("/api/time/parse", methods=["POST"], endpoint="api_time_parse")
    @json_endpoint
    def api_time_parse():
        parsed = parse_time_from_picker(get_json_body().get("time")).unwrap()
        return json_ok({"time": str(parsed), "minutes": parsed.minutes})
