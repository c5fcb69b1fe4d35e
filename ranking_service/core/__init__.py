"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    CACHE_MAX_AGE_SECONDS,
    DATABASE_URL,
    DB_RESET,
    LEADERBOARD_SIZE,
    LOG_LEVEL,
)
from .database import engine, get_session
from .exceptions import DataSourceUnavailable, InvalidWindow, RankingError
from .time import epoch_now, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "CACHE_MAX_AGE_SECONDS",
    "DATABASE_URL",
    "DB_RESET",
    "DataSourceUnavailable",
    "InvalidWindow",
    "LEADERBOARD_SIZE",
    "LOG_LEVEL",
    "RankingError",
    "engine",
    "epoch_now",
    "get_session",
    "utcnow",
]
