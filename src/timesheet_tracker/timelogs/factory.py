from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ReportingType
from .calculator.base import TimeLogCalculator
from .calculator.duration_calculator import DurationCalculator
from .calculator.start_end_calculator import StartEndCalculator
from .calculator.unknown_calculator import UnknownTypeCalculator
from .model import TimeLogEntry


@dataclass
class TimeLogCalculatorFactory:
    """Factory Pattern: choose the duration rule from the entry's reporting type."""

    def for_entry(self, entry: TimeLogEntry) -> TimeLogCalculator:
        kind = entry.effective_reporting_type
        if kind is None:
            return UnknownTypeCalculator()
        if kind == ReportingType.DURATION:
            return DurationCalculator()
        return StartEndCalculator()
