from __future__ import annotations

import logging

from .base import TimeLogCalculator
from ..model import TimeLogEntry
from ...ranges.validator import range_minutes

logger = logging.getLogger(__name__)


class StartEndCalculator(TimeLogCalculator):
    """Start/end entry: end - start. Malformed or reversed ranges count as 0."""

    def duration_minutes(self, entry: TimeLogEntry) -> int:
        minutes = range_minutes(entry.start_time, entry.end_time)
        if minutes == 0:
            logger.debug("Time log %s-%s counts as 0 minutes", entry.start_time, entry.end_time)
        return minutes
