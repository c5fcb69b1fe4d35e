"""Database model for unlocked achievements."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field as ORMField, SQLModel


class AchievementRecord(SQLModel, table=True):
    """Achievement unlocked by a participant."""

    __tablename__ = "achieved"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    identifier: str = ORMField(index=True)
    achievement_id: str


__all__ = ["AchievementRecord"]
