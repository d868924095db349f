from __future__ import annotations

from typing import Iterable, Optional

from ..timelogs.aggregator import calculate_total_duration
from ..timelogs.factory import TimeLogCalculatorFactory
from ..timelogs.model import TimeLogEntry
from .calculator import calculate_progress, calculate_target_duration
from .model import ProgressResult


class ProgressService:
    """Use case: progress bar of the daily report modal."""

    def __init__(self, *, factory: Optional[TimeLogCalculatorFactory] = None):
        self._factory = factory or TimeLogCalculatorFactory()

    def for_day(self, *, entrance_time: str, exit_time: str, entries: Iterable[TimeLogEntry]) -> ProgressResult:
        target = calculate_target_duration(entrance_time, exit_time)
        total = calculate_total_duration(entries, factory=self._factory)
        return calculate_progress(total, target)
