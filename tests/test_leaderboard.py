"""Tests for the full ranking pipeline."""

from datetime import datetime, timezone

import pytest

from ranking_service.core import DataSourceUnavailable, InvalidWindow
from ranking_service.services import (
    InMemoryAchievementSource,
    InMemoryScoreSource,
    RankingQuery,
    compute_ranking,
    result_to_payload,
)
from tests.factories import achievements, score

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def scores():
    return InMemoryScoreSource(
        [
            score("A", 100, 10),
            score("B", 100, 5),
            score("C", 90, 1),
            score("D", 70, 50),
            score("late", 999, 5_000),
        ]
    )


@pytest.fixture
def unlocked():
    return InMemoryAchievementSource(achievements("A", 2) + achievements("D", 5))


class ExplodingSource:
    def __init__(self):
        self.calls = 0

    def fetch_scores(self, window_start, window_end):
        self.calls += 1
        raise DataSourceUnavailable("down")

    def fetch_achievement_counts(self, identifiers):
        self.calls += 1
        raise DataSourceUnavailable("down")


class TestComputeRanking:
    def test_example(self, scores, unlocked):
        result = compute_ranking(RankingQuery("A", 0, 100), scores, unlocked, now=NOW)
        assert [e.identifier for e in result.top_entries] == ["B", "A", "C"]
        assert [e.achievement_count for e in result.top_entries] == [0, 2, 0]
        assert result.total_participants == 4
        assert result.target_rank == 2

    def test_records_outside_window_are_ignored(self, scores, unlocked):
        result = compute_ranking(RankingQuery("late", 0, 100), scores, unlocked, now=NOW)
        assert "late" not in [e.identifier for e in result.top_entries]
        assert result.total_participants == 4
        assert result.target_rank is None

    def test_empty_window(self, scores, unlocked):
        result = compute_ranking(RankingQuery("A", 200, 300), scores, unlocked, now=NOW)
        assert result.top_entries == ()
        assert result.total_participants == 0
        assert result.target_rank is None

    def test_target_outside_top(self, scores, unlocked):
        result = compute_ranking(RankingQuery("D", 0, 100), scores, unlocked, now=NOW)
        assert result.target_rank == 4
        assert "D" not in [e.identifier for e in result.top_entries]

    def test_repeated_runs_are_identical(self, scores, unlocked):
        query = RankingQuery("C", 0, 100)
        first = compute_ranking(query, scores, unlocked, now=NOW)
        second = compute_ranking(query, scores, unlocked, now=NOW)
        assert first == second
        assert result_to_payload(first) == result_to_payload(second)

    def test_invalid_window_fails_before_fetch(self, unlocked):
        source = ExplodingSource()
        with pytest.raises(InvalidWindow):
            compute_ranking(RankingQuery("A", 10, 9), source, unlocked, now=NOW)
        assert source.calls == 0

    def test_score_source_failure_propagates(self, unlocked):
        with pytest.raises(DataSourceUnavailable):
            compute_ranking(RankingQuery("A", 0, 10), ExplodingSource(), unlocked, now=NOW)

    def test_achievement_source_failure_propagates(self, scores):
        with pytest.raises(DataSourceUnavailable):
            compute_ranking(RankingQuery("A", 0, 100), scores, ExplodingSource(), now=NOW)


class TestResultToPayload:
    def test_shape(self, scores, unlocked):
        result = compute_ranking(RankingQuery("A", 0, 100), scores, unlocked, now=NOW)
        assert result_to_payload(result) == {
            "best_users": [
                {"address": "B", "xp": 100, "achievements": 0},
                {"address": "A", "xp": 100, "achievements": 2},
                {"address": "C", "xp": 90, "achievements": 0},
            ],
            "total_users": 4,
            "position": 2,
        }

    def test_absent_position_is_null(self, scores, unlocked):
        result = compute_ranking(RankingQuery("nobody", 0, 100), scores, unlocked, now=NOW)
        assert result_to_payload(result)["position"] is None
