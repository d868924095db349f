"""Example: use the services directly (without Flask).

Controllers are a thin layer; the rules live in the feature modules.
"""

import importlib

from config import get_settings_module

from timesheet_tracker.container import build_container
from timesheet_tracker.core.enums import ReportingType
from timesheet_tracker.timelogs.model import TimeLogEntry


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(engine_config=settings.ENGINE_CONFIG)

    entries = [
        TimeLogEntry(reporting_type=ReportingType.DURATION, duration_minutes=240, location="office"),
        TimeLogEntry(reporting_type=ReportingType.START_END, start_time="13:00", end_time="16:00", location="home"),
    ]
    print(container.progress_service.for_day(entrance_time="09:00", exit_time="17:00", entries=entries))


if __name__ == "__main__":
    main()
