"""Errors raised by the ranking core."""

from __future__ import annotations


class RankingError(Exception):
    """Base class for ranking failures."""


class InvalidWindow(RankingError):
    """Raised when a window starts after it ends."""

    def __init__(self, window_start: int, window_end: int) -> None:
        super().__init__(
            f"window_start ({window_start}) is after window_end ({window_end})"
        )
        self.window_start = window_start
        self.window_end = window_end


class DataSourceUnavailable(RankingError):
    """Raised when a score or achievement read fails."""


__all__ = ["DataSourceUnavailable", "InvalidWindow", "RankingError"]
