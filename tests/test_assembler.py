"""Tests for result assembly and cache headers."""

from datetime import datetime, timedelta, timezone

from ranking_service.services import assemble_result, cache_headers
from ranking_service.services.types import LeaderboardEntry

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestAssembleResult:
    def test_default_expiry_is_five_minutes(self):
        result = assemble_result([], 0, None, now=NOW)
        assert result.expires_at == NOW + timedelta(minutes=5)

    def test_custom_ttl(self):
        result = assemble_result([], 0, None, now=NOW, ttl=timedelta(seconds=30))
        assert result.expires_at == NOW + timedelta(seconds=30)

    def test_naive_now_is_treated_as_utc(self):
        result = assemble_result([], 0, None, now=NOW.replace(tzinfo=None))
        assert result.expires_at == NOW + timedelta(minutes=5)

    def test_fields_are_carried_over(self):
        entries = [LeaderboardEntry("a", 10, 1)]
        result = assemble_result(entries, 4, 2, now=NOW)
        assert result.top_entries == (LeaderboardEntry("a", 10, 1),)
        assert result.total_participants == 4
        assert result.target_rank == 2


class TestCacheHeaders:
    def test_custom_ttl_drives_both_headers(self):
        result = assemble_result([], 0, None, now=NOW, ttl=timedelta(seconds=30))
        assert cache_headers(result) == {
            "Cache-Control": "public, max-age=30",
            "Expires": "Fri, 01 Mar 2024 12:00:30 GMT",
        }

    def test_headers_use_stored_expiry(self):
        result = assemble_result([], 0, None, now=NOW)
        assert cache_headers(result) == {
            "Cache-Control": "public, max-age=300",
            "Expires": "Fri, 01 Mar 2024 12:05:00 GMT",
        }

    def test_expiry_in_other_timezone_is_converted(self):
        plus_two = timezone(timedelta(hours=2))
        result = assemble_result([], 0, None, now=NOW.astimezone(plus_two))
        assert cache_headers(result)["Expires"] == "Fri, 01 Mar 2024 12:05:00 GMT"
