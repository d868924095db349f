from __future__ import annotations

import logging

from .base import TimeLogCalculator
from ..model import TimeLogEntry

logger = logging.getLogger(__name__)


class UnknownTypeCalculator(TimeLogCalculator):
    """Entry whose reporting type is not recognised: contributes nothing."""

    def duration_minutes(self, entry: TimeLogEntry) -> int:
        logger.debug("Skipping time log with reporting type %r", entry.reporting_type)
        return 0
