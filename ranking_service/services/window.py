"""Time window filtering."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..core.exceptions import InvalidWindow
from ..core.time import epoch_now
from ..models import ScoreRecord
from .types import RankingQuery

DAY_SECONDS = 24 * 60 * 60

PERIOD_SECONDS = {
    "week": 7 * DAY_SECONDS,
    "month": 30 * DAY_SECONDS,
}
PERIODS = ("week", "month", "all")

# Signed 64-bit, the widest integer the score store can bind.
TIMESTAMP_MIN = -(2**63)
TIMESTAMP_MAX = 2**63 - 1


def validate_window(window_start: int, window_end: int) -> None:
    if window_start > window_end:
        raise InvalidWindow(window_start, window_end)


def filter_window(
    records: Iterable[ScoreRecord], query: RankingQuery
) -> List[ScoreRecord]:
    """Return the records whose timestamp falls inside the query window.

    Both ends are inclusive and input order is preserved.
    """

    validate_window(query.window_start, query.window_end)
    return [
        record
        for record in records
        if query.window_start <= record.timestamp <= query.window_end
    ]


def period_window(period: str, now: Optional[int] = None) -> Tuple[int, int]:
    """Resolve a named period to a window ending at ``now``."""

    end = epoch_now() if now is None else now
    if period == "all":
        return TIMESTAMP_MIN, end
    try:
        length = PERIOD_SECONDS[period]
    except KeyError:
        raise ValueError(f"Unknown period: {period}") from None
    return end - length, end


__all__ = [
    "PERIODS",
    "TIMESTAMP_MAX",
    "TIMESTAMP_MIN",
    "filter_window",
    "period_window",
    "validate_window",
]
