"""Windowed leaderboard pipeline."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from ..core.config import LEADERBOARD_SIZE
from .achievements import enrich_entries
from .assembler import assemble_result
from .ranking import rank_window
from .sources import AchievementSource, ScoreSource
from .types import RankingQuery, RankingResult
from .window import filter_window, validate_window

logger = logging.getLogger(__name__)


def compute_ranking(
    query: RankingQuery,
    scores: ScoreSource,
    achievements: AchievementSource,
    *,
    now: Optional[datetime] = None,
    ttl: Optional[timedelta] = None,
) -> RankingResult:
    """Return the leaders, participant count and target rank for a window.

    The window is checked before anything is read. Errors from either source
    propagate and no partial result is produced.
    """

    validate_window(query.window_start, query.window_end)

    fetched = scores.fetch_scores(query.window_start, query.window_end)
    in_window = filter_window(fetched, query)
    ranking = rank_window(in_window, query.target_identifier, LEADERBOARD_SIZE)
    entries = enrich_entries(ranking.top, achievements.fetch_achievement_counts)

    logger.debug(
        "Ranked window [%s, %s]: total=%s target=%s rank=%s",
        query.window_start,
        query.window_end,
        ranking.total,
        query.target_identifier,
        ranking.target_rank,
    )
    return assemble_result(entries, ranking.total, ranking.target_rank, now=now, ttl=ttl)


def result_to_payload(result: RankingResult) -> Dict[str, Any]:
    """Serialise a ranking result to the API response body."""

    return {
        "best_users": [
            {
                "address": entry.identifier,
                "xp": entry.score,
                "achievements": entry.achievement_count,
            }
            for entry in result.top_entries
        ],
        "total_users": result.total_participants,
        "position": result.target_rank,
    }


__all__ = ["compute_ranking", "result_to_payload"]
