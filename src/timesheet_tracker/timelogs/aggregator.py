from __future__ import annotations

from typing import Iterable, Optional

from .factory import TimeLogCalculatorFactory
from .model import TimeLogEntry


def calculate_total_duration(
    entries: Optional[Iterable[TimeLogEntry]],
    *,
    factory: Optional[TimeLogCalculatorFactory] = None,
) -> int:
    """Sum of the day's time logs in minutes.

    Lenient on purpose: a malformed entry adds 0 instead of failing the whole
    report.
    """
    if not entries:
        return 0

    factory = factory or TimeLogCalculatorFactory()
    total = 0
    for entry in entries:
        total += factory.for_entry(entry).duration_minutes(entry)
    return total
