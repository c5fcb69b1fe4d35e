"""Database model for participant score totals."""

from __future__ import annotations

from sqlmodel import Field as ORMField, SQLModel


class ScoreRecord(SQLModel, table=True):
    """Latest points total for one participant."""

    __tablename__ = "leaderboard_table"

    identifier: str = ORMField(primary_key=True)
    score: int
    timestamp: int = ORMField(index=True)


__all__ = ["ScoreRecord"]
