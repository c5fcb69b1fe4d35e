"""Final result assembly and cache directives."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Dict, Iterable, Optional

from ..core.config import CACHE_MAX_AGE_SECONDS
from ..core.time import utcnow
from .types import LeaderboardEntry, RankingResult


def assemble_result(
    top_entries: Iterable[LeaderboardEntry],
    total_participants: int,
    target_rank: Optional[int],
    *,
    now: Optional[datetime] = None,
    ttl: Optional[timedelta] = None,
) -> RankingResult:
    """Combine the pipeline outputs and stamp the freshness deadline."""

    assembled_at = now or utcnow()
    if assembled_at.tzinfo is None:
        assembled_at = assembled_at.replace(tzinfo=timezone.utc)
    if ttl is None:
        ttl = timedelta(seconds=CACHE_MAX_AGE_SECONDS)
    max_age = int(ttl.total_seconds())

    return RankingResult(
        top_entries=tuple(top_entries),
        total_participants=total_participants,
        target_rank=target_rank,
        expires_at=assembled_at + timedelta(seconds=max_age),
        max_age=max_age,
    )


def cache_headers(result: RankingResult) -> Dict[str, str]:
    """HTTP caching headers for a result, both taken from its freshness stamp."""

    return {
        "Cache-Control": f"public, max-age={result.max_age}",
        "Expires": format_datetime(result.expires_at.astimezone(timezone.utc), usegmt=True),
    }


__all__ = ["assemble_result", "cache_headers"]
