"""Windowed XP leaderboard service."""
