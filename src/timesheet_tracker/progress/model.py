from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProgressResult:
    """Reported time against the entrance-exit window of a day."""

    total_minutes: int
    target_minutes: int
    percentage: int
    is_complete: bool
    missing_minutes: int
    missing_percentage: int = 0

    def to_dict(self) -> dict:
        return {
            "totalMinutes": self.total_minutes,
            "targetMinutes": self.target_minutes,
            "percentage": self.percentage,
            "isComplete": self.is_complete,
            "missingMinutes": self.missing_minutes,
            "missingPercentage": self.missing_percentage,
        }


@dataclass(frozen=True)
class TrackerCompletion:
    is_complete: bool
    missing_minutes: int
    missing_percentage: int
