"""Read-only data sources for score and achievement records."""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Protocol, Sequence, Set

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, func, select

from ..core.exceptions import DataSourceUnavailable
from ..models import AchievementRecord, ScoreRecord
from .achievements import count_achievements

logger = logging.getLogger(__name__)


class ScoreSource(Protocol):
    def fetch_scores(self, window_start: int, window_end: int) -> Sequence[ScoreRecord]:
        ...


class AchievementSource(Protocol):
    def fetch_achievement_counts(self, identifiers: Set[str]) -> Mapping[str, int]:
        ...


class SQLScoreSource:
    """Score reads with the window pushed down to the database."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def fetch_scores(self, window_start: int, window_end: int) -> List[ScoreRecord]:
        statement = select(ScoreRecord).where(
            ScoreRecord.timestamp >= window_start,
            ScoreRecord.timestamp <= window_end,
        )
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as exc:
            logger.exception(
                "Score query failed. window=[%s, %s]", window_start, window_end
            )
            raise DataSourceUnavailable("Error querying scores") from exc


class SQLAchievementSource:
    """Achievement counts from a single grouped COUNT query."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def fetch_achievement_counts(self, identifiers: Set[str]) -> Mapping[str, int]:
        if not identifiers:
            return {}
        statement = (
            select(AchievementRecord.identifier, func.count(col(AchievementRecord.id)))
            .where(col(AchievementRecord.identifier).in_(sorted(identifiers)))
            .group_by(AchievementRecord.identifier)
        )
        try:
            rows = self.session.exec(statement).all()
        except SQLAlchemyError as exc:
            logger.exception("Achievement count query failed. ids=%s", sorted(identifiers))
            raise DataSourceUnavailable("Error querying achievements") from exc
        return {identifier: int(count) for identifier, count in rows}


class InMemoryScoreSource:
    """Returns every record; the window filter trims them afterwards."""

    def __init__(self, records: Iterable[ScoreRecord] = ()) -> None:
        self.records = list(records)

    def fetch_scores(self, window_start: int, window_end: int) -> List[ScoreRecord]:
        return list(self.records)


class InMemoryAchievementSource:
    def __init__(self, records: Iterable[AchievementRecord] = ()) -> None:
        self.records = list(records)

    def fetch_achievement_counts(self, identifiers: Set[str]) -> Mapping[str, int]:
        return count_achievements(self.records, identifiers)


__all__ = [
    "AchievementSource",
    "InMemoryAchievementSource",
    "InMemoryScoreSource",
    "SQLAchievementSource",
    "SQLScoreSource",
    "ScoreSource",
]
