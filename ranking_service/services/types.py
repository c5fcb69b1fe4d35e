"""Value types shared by the ranking pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class RankingQuery:
    target_identifier: str
    window_start: int
    window_end: int


@dataclass(frozen=True)
class RankedRecord:
    """One position in the window ordering."""

    rank: int
    identifier: str
    score: int
    timestamp: int


@dataclass(frozen=True)
class LeaderboardEntry:
    identifier: str
    score: int
    achievement_count: int = 0


@dataclass(frozen=True)
class WindowRanking:
    """Ranking output before achievements are attached."""

    top: Tuple[RankedRecord, ...]
    total: int
    target_rank: Optional[int]


@dataclass(frozen=True)
class RankingResult:
    top_entries: Tuple[LeaderboardEntry, ...]
    total_participants: int
    target_rank: Optional[int]
    expires_at: datetime
    max_age: int


__all__ = [
    "LeaderboardEntry",
    "RankedRecord",
    "RankingQuery",
    "RankingResult",
    "WindowRanking",
]
