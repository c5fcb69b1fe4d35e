"""Ordering and rank lookups for score records inside a window.

Records are ordered by score descending, then by timestamp ascending (the
participant who reached the score first wins a tie), then by identifier
ascending. Identifiers are unique, so the order is total and every record
gets its own rank.
"""

from __future__ import annotations

import heapq
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.config import LEADERBOARD_SIZE
from ..models import ScoreRecord
from .types import RankedRecord, WindowRanking

SortKey = Tuple[int, int, str]


def sort_key(record: ScoreRecord) -> SortKey:
    return (-record.score, record.timestamp, record.identifier)


def distinct_records(records: Iterable[ScoreRecord]) -> List[ScoreRecord]:
    """Keep one record per identifier, the one that ranks best."""

    best: Dict[str, ScoreRecord] = {}
    for record in records:
        current = best.get(record.identifier)
        if current is None or sort_key(record) < sort_key(current):
            best[record.identifier] = record
    return list(best.values())


def _ranked(rank: int, record: ScoreRecord) -> RankedRecord:
    return RankedRecord(
        rank=rank,
        identifier=record.identifier,
        score=record.score,
        timestamp=record.timestamp,
    )


def rank_records(records: Iterable[ScoreRecord]) -> List[RankedRecord]:
    """Sort every record and number them from 1."""

    ordered = sorted(distinct_records(records), key=sort_key)
    return [_ranked(rank, record) for rank, record in enumerate(ordered, start=1)]


def select_top(
    records: Sequence[ScoreRecord], limit: int = LEADERBOARD_SIZE
) -> List[RankedRecord]:
    """Return the first ``limit`` records in rank order.

    Uses a bounded heap instead of sorting the whole sequence. Expects
    distinct identifiers.
    """

    if limit <= 0:
        return []
    leaders = heapq.nsmallest(limit, records, key=sort_key)
    return [_ranked(rank, record) for rank, record in enumerate(leaders, start=1)]


def locate_rank(records: Sequence[ScoreRecord], identifier: str) -> Optional[int]:
    """Return the 1-based rank of ``identifier``, or None when it is absent.

    The rank is one more than the number of records that sort strictly
    before the target. Expects distinct identifiers.
    """

    target = next((r for r in records if r.identifier == identifier), None)
    if target is None:
        return None
    target_key = sort_key(target)
    return 1 + sum(1 for record in records if sort_key(record) < target_key)


def count_participants(records: Iterable[ScoreRecord]) -> int:
    return len({record.identifier for record in records})


def rank_window(
    records: Iterable[ScoreRecord],
    target_identifier: str,
    limit: int = LEADERBOARD_SIZE,
) -> WindowRanking:
    """Compute the leaders, population size and target rank of a window."""

    participants = distinct_records(records)
    return WindowRanking(
        top=tuple(select_top(participants, limit)),
        total=count_participants(participants),
        target_rank=locate_rank(participants, target_identifier),
    )


__all__ = [
    "count_participants",
    "distinct_records",
    "locate_rank",
    "rank_records",
    "rank_window",
    "select_top",
    "sort_key",
]
