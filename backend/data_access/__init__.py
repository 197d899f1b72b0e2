"""
Data access layer for the CRT Snake leaderboard.

This module provides the repository used to record scores and read the
ranked leaderboard.
"""

from .repositories import BaseRepository, LeaderboardRepository, MAX_LEADERBOARD_ENTRIES

__all__ = [
    'BaseRepository',
    'LeaderboardRepository',
    'MAX_LEADERBOARD_ENTRIES',
]
