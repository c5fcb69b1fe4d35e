"""Clock helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def epoch_now() -> int:
    """Return the current time as whole epoch seconds."""
    return int(utcnow().timestamp())


__all__ = ["epoch_now", "utcnow"]
