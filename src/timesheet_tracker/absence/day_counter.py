from __future__ import annotations

from .model import DateSpan


def day_count(start, end) -> int:
    """Inclusive number of days from start to end (YYYY-MM-DD or date).

    0 when either side is unparsable or the span is reversed.
    """
    span = DateSpan.from_strings(start, end)
    return span.day_count if span is not None else 0
