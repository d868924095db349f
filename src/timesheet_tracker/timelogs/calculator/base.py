from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import TimeLogEntry


class TimeLogCalculator(ABC):
    """Calculator interface (Strategy Pattern per reporting type)."""

    @abstractmethod
    def duration_minutes(self, entry: TimeLogEntry) -> int:
        raise NotImplementedError
