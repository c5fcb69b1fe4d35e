"""System-level API endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ...core import CACHE_MAX_AGE_SECONDS, LEADERBOARD_SIZE, get_session
from ...services import PERIODS

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Liveness probe; does not touch the database."""

    return {"ok": True}


@router.get("/healthz")
def healthz(session: Session = Depends(get_session)) -> JSONResponse:
    """Readiness probe that round-trips a query to the score store."""

    try:
        session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Readiness check failed")
        return JSONResponse({"ok": False}, status_code=503)
    return JSONResponse({"ok": True})


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {
        "leaderboard_size": LEADERBOARD_SIZE,
        "cache_max_age": CACHE_MAX_AGE_SECONDS,
        "periods": list(PERIODS),
    }


__all__ = ["router"]
