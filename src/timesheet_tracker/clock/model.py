from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR


@dataclass(frozen=True, order=True)
class ClockTime:
    """Wall-clock time of day, stored as minutes since midnight (0..1439)."""

    minutes: int

    def __post_init__(self) -> None:
        if not 0 <= self.minutes < MINUTES_PER_DAY:
            raise ValueError(f"ClockTime out of range: {self.minutes}")

    @classmethod
    def of(cls, hour: int, minute: int) -> "ClockTime":
        return cls(hour * MINUTES_PER_HOUR + minute)

    @property
    def hour(self) -> int:
        return self.minutes // MINUTES_PER_HOUR

    @property
    def minute(self) -> int:
        return self.minutes % MINUTES_PER_HOUR

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"
