from __future__ import annotations

import logging

from .base import TimeLogCalculator
from ..model import TimeLogEntry

logger = logging.getLogger(__name__)


class DurationCalculator(TimeLogCalculator):
    """Duration-typed entry: the reported minutes are taken as is."""

    def duration_minutes(self, entry: TimeLogEntry) -> int:
        if entry.duration_minutes is None:
            return 0
        try:
            return int(entry.duration_minutes)
        except (TypeError, ValueError):
            logger.debug("Skipping time log with duration %r", entry.duration_minutes)
            return 0
