"""Service layer helpers."""

from .assembler import assemble_result, cache_headers
from .leaderboard import compute_ranking, result_to_payload
from .sources import (
    InMemoryAchievementSource,
    InMemoryScoreSource,
    SQLAchievementSource,
    SQLScoreSource,
)
from .types import LeaderboardEntry, RankedRecord, RankingQuery, RankingResult
from .window import PERIODS, TIMESTAMP_MAX, TIMESTAMP_MIN, period_window

__all__ = [
    "InMemoryAchievementSource",
    "InMemoryScoreSource",
    "LeaderboardEntry",
    "PERIODS",
    "RankedRecord",
    "RankingQuery",
    "RankingResult",
    "SQLAchievementSource",
    "SQLScoreSource",
    "TIMESTAMP_MAX",
    "TIMESTAMP_MIN",
    "assemble_result",
    "cache_headers",
    "compute_ranking",
    "period_window",
    "result_to_payload",
]
