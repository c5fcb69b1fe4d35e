"""Attach achievement counts to leaderboard rows."""

from __future__ import annotations

from collections import Counter
from typing import Callable, Dict, Iterable, Mapping, Sequence, Set, Tuple

from ..models import AchievementRecord
from .types import LeaderboardEntry, RankedRecord

AchievementCounter = Callable[[Set[str]], Mapping[str, int]]


def count_achievements(
    records: Iterable[AchievementRecord], identifiers: Set[str]
) -> Dict[str, int]:
    """Group achievements by identifier, keeping only the requested ones."""

    counts = Counter(
        record.identifier for record in records if record.identifier in identifiers
    )
    return dict(counts)


def enrich_entries(
    top: Sequence[RankedRecord], fetch_counts: AchievementCounter
) -> Tuple[LeaderboardEntry, ...]:
    """Build leaderboard rows in rank order with their achievement counts."""

    if not top:
        return ()

    counts = fetch_counts({record.identifier for record in top})
    return tuple(
        LeaderboardEntry(
            identifier=record.identifier,
            score=record.score,
            achievement_count=int(counts.get(record.identifier, 0)),
        )
        for record in top
    )


__all__ = ["AchievementCounter", "count_achievements", "enrich_entries"]
