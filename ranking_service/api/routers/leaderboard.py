"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlmodel import Session

from ...core import DataSourceUnavailable, InvalidWindow, epoch_now, get_session
from ...services import (
    PERIODS,
    RankingQuery,
    SQLAchievementSource,
    SQLScoreSource,
    TIMESTAMP_MAX,
    TIMESTAMP_MIN,
    cache_headers,
    compute_ranking,
    period_window,
    result_to_payload,
)

router = APIRouter(tags=["leaderboard"])


def _ranking_response(
    query: RankingQuery, response: Response, session: Session
) -> Dict[str, Any]:
    try:
        result = compute_ranking(
            query, SQLScoreSource(session), SQLAchievementSource(session)
        )
    except InvalidWindow as exc:
        raise HTTPException(
            400, "start_timestamp must not be after end_timestamp"
        ) from exc
    except DataSourceUnavailable as exc:
        raise HTTPException(503, "Error querying ranks") from exc

    for name, value in cache_headers(result).items():
        response.headers[name] = value
    return result_to_payload(result)


@router.get("/leaderboard/static_info")
def get_static_info(
    addr: str,
    response: Response,
    start_timestamp: int = Query(..., ge=TIMESTAMP_MIN, le=TIMESTAMP_MAX),
    end_timestamp: int = Query(..., ge=TIMESTAMP_MIN, le=TIMESTAMP_MAX),
    session: Session = Depends(get_session),
):
    """Top participants, population and caller position for a time window."""

    query = RankingQuery(
        target_identifier=addr,
        window_start=start_timestamp,
        window_end=end_timestamp,
    )
    return _ranking_response(query, response, session)


@router.get("/leaderboard/{period}/static_info")
def get_period_static_info(
    period: str,
    addr: str,
    response: Response,
    session: Session = Depends(get_session),
):
    """Same as ``/leaderboard/static_info`` for the last week, month or all time."""

    if period not in PERIODS:
        raise HTTPException(404, f"Unknown period, expected one of {', '.join(PERIODS)}")

    window_start, window_end = period_window(period, epoch_now())
    query = RankingQuery(
        target_identifier=addr,
        window_start=window_start,
        window_end=window_end,
    )
    return _ranking_response(query, response, session)


__all__ = ["router"]
