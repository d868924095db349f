from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_TIME_PICKER_INTERVAL, DEFAULT_WEEKEND_DAYS, FULL_WORK_DAY_MINUTES
from .progress.service import ProgressService
from .status.service import DaySummaryService
from .timelogs.factory import TimeLogCalculatorFactory
from .timelogs.service import TimeLogService


@dataclass(frozen=True)
class Container:
    time_picker_interval: int
    weekend_days: tuple[int, ...]

    time_log_service: TimeLogService
    progress_service: ProgressService
    day_summary_service: DaySummaryService


def build_container(*, engine_config: dict | None = None) -> Container:
    engine_config = engine_config or {}
    weekend_days = tuple(int(d) for d in engine_config.get("weekend_days", DEFAULT_WEEKEND_DAYS))
    full_day_minutes = int(engine_config.get("full_work_day_minutes", FULL_WORK_DAY_MINUTES))

    factory = TimeLogCalculatorFactory()
    time_log_service = TimeLogService(factory=factory)
    progress_service = ProgressService(factory=factory)
    day_summary_service = DaySummaryService(weekend_days=weekend_days, full_day_minutes=full_day_minutes)

    return Container(
        time_picker_interval=int(engine_config.get("time_picker_interval", DEFAULT_TIME_PICKER_INTERVAL)),
        weekend_days=weekend_days,
        time_log_service=time_log_service,
        progress_service=progress_service,
        day_summary_service=day_summary_service,
    )
