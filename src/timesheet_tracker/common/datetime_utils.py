from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from ..core.constants import DEFAULT_WEEKEND_DAYS


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_iso_date(value) -> Optional[date]:
    """Like parse_iso_date, but returns None for anything unparsable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        return None


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def is_weekend(day: date, weekend_days: Iterable[int] = DEFAULT_WEEKEND_DAYS) -> bool:
    return day.weekday() in set(weekend_days)


def is_workday(day: date, weekend_days: Iterable[int] = DEFAULT_WEEKEND_DAYS) -> bool:
    return not is_weekend(day, weekend_days)


def generate_month_dates(month: int, year: int, *, up_to_today: bool = False, today: Optional[date] = None) -> list[str]:
    """Dates of a month as YYYY-MM-DD strings, latest first.

    Future months yield an empty list. With ``up_to_today`` the current month
    stops at today.
    """
    today = today or now_local().date()
    first = date(year, month, 1)
    if first > today:
        return []

    next_month = date(year + month // 12, month % 12 + 1, 1)
    last = next_month - timedelta(days=1)
    if up_to_today and first.year == today.year and first.month == today.month:
        last = today

    out: list[str] = []
    current = first
    while current <= last:
        out.append(current.strftime("%Y-%m-%d"))
        current += timedelta(days=1)
    out.reverse()
    return out
