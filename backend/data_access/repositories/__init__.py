"""
Repository pattern implementations for data access.

This module provides a clean abstraction over database operations
with proper connection management and error handling.
"""

from .base import BaseRepository
from .leaderboard_repository import LeaderboardRepository, MAX_LEADERBOARD_ENTRIES

__all__ = ['BaseRepository', 'LeaderboardRepository', 'MAX_LEADERBOARD_ENTRIES']
