"""Reduce the statuses present on one date to the status shown for that date.

The priority is an ordered list of (predicate, outcome) rules, evaluated top
to bottom; the first match wins. Input order never matters for known
statuses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import is_weekend
from ..core.constants import DEFAULT_WEEKEND_DAYS
from ..core.enums import AttendanceStatus, DayKind
from ..core.exceptions import UnknownStatusError
from .model import ResolvedStatus

logger = logging.getLogger(__name__)

WORK = AttendanceStatus.WORK.value
SICKNESS = AttendanceStatus.SICKNESS.value
RESERVES = AttendanceStatus.RESERVES.value
DAY_OFF = AttendanceStatus.DAY_OFF.value
HALF_DAY_OFF = AttendanceStatus.HALF_DAY_OFF.value


@dataclass(frozen=True)
class PriorityRule:
    matches: Callable[[frozenset], bool]
    outcome: AttendanceStatus
    combined: bool = False


PRIORITY_RULES: tuple[PriorityRule, ...] = (
    PriorityRule(lambda present: DAY_OFF in present, AttendanceStatus.DAY_OFF),
    PriorityRule(lambda present: SICKNESS in present, AttendanceStatus.SICKNESS),
    PriorityRule(lambda present: RESERVES in present, AttendanceStatus.RESERVES),
    PriorityRule(
        lambda present: HALF_DAY_OFF in present and WORK in present,
        AttendanceStatus.HALF_DAY_OFF,
        combined=True,
    ),
    PriorityRule(lambda present: HALF_DAY_OFF in present, AttendanceStatus.HALF_DAY_OFF),
    PriorityRule(lambda present: WORK in present, AttendanceStatus.WORK),
)


def resolve_status(
    statuses: Iterable,
    *,
    has_document: bool = False,
    work_minutes: int = 0,
) -> Optional[ResolvedStatus]:
    """Pick the representative status of a day.

    Returns None for an empty day; weekend/missing classification is
    ``classify_day``'s job. ``has_document`` only matters for sickness and
    reserves, which are shown as missing without it.
    """
    ordered = [getattr(s, "value", s) for s in statuses]
    if not ordered:
        return None

    present = frozenset(ordered)
    for rule in PRIORITY_RULES:
        if rule.matches(present):
            return ResolvedStatus(
                status=rule.outcome,
                raw_status=rule.outcome.value,
                is_combined=rule.combined,
                work_minutes=int(work_minutes),
                has_document=bool(has_document),
            )

    logger.warning("No known attendance status in %s, falling back to %r", ordered, ordered[0])
    return ResolvedStatus(
        status=None,
        raw_status=str(ordered[0]),
        work_minutes=int(work_minutes),
        has_document=bool(has_document),
        is_fallback=True,
    )


def require_known(resolved: Optional[ResolvedStatus]) -> Optional[ResolvedStatus]:
    """Turn a first-seen fallback into an error for callers that must not guess."""
    if resolved is not None and resolved.is_fallback:
        raise UnknownStatusError(f"Unknown attendance status: {resolved.raw_status}")
    return resolved


def classify_day(day: date, records: Sequence, weekend_days: Iterable[int] = DEFAULT_WEEKEND_DAYS) -> DayKind:
    if records:
        return DayKind.REPORTED
    if is_weekend(day, weekend_days):
        return DayKind.WEEKEND
    return DayKind.MISSING
