"""Database model exports."""

from .achievement import AchievementRecord
from .score import ScoreRecord

__all__ = [
    "AchievementRecord",
    "ScoreRecord",
]
