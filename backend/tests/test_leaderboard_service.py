"""
Tests for services/leaderboard_service.py - submission validation and ranking.
"""

import pytest
import sys
import os
from unittest.mock import MagicMock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.leaderboard_service import (
    InvalidSubmission,
    LeaderboardService,
    MAX_USERNAME_LENGTH,
    validate_submission,
)


class TestValidateSubmission:
    """Tests for validate_submission()."""

    @pytest.mark.parametrize("username", [None, "", "   ", 123, ["agent"]])
    def test_username_required(self, username):
        with pytest.raises(InvalidSubmission, match="Username is required"):
            validate_submission(username, 5)

    def test_username_too_long(self):
        with pytest.raises(InvalidSubmission, match="20 characters or less"):
            validate_submission("x" * (MAX_USERNAME_LENGTH + 1), 5)

    def test_username_is_trimmed_before_length_check(self):
        name, _ = validate_submission("  " + "x" * MAX_USERNAME_LENGTH + "  ", 5)
        assert name == "x" * MAX_USERNAME_LENGTH

    @pytest.mark.parametrize("score", [-1, "5", None, True, False, 1.5, float("nan"), float("inf"), [5]])
    def test_invalid_scores(self, score):
        with pytest.raises(InvalidSubmission, match="Invalid score"):
            validate_submission("agent", score)

    def test_whole_float_is_accepted(self):
        assert validate_submission("agent", 7.0) == ("agent", 7)

    def test_zero_is_valid(self):
        assert validate_submission("agent", 0) == ("agent", 0)

    def test_invalid_submission_is_a_value_error(self):
        assert issubclass(InvalidSubmission, ValueError)


class TestLeaderboardService:
    """Tests for LeaderboardService with a mocked repository."""

    def test_submit_score_zero(self):
        """A zero score is stored and ranked like any other."""
        repository = MagicMock()
        repository.record_score.return_value = {'id': 1, 'created_at': '2024-01-01T00:00:00', 'position': 1}

        result = LeaderboardService(repository).submit_score("agent", 0)

        assert result == {'position': 1, 'rank': 'Rookie Leaker'}
        repository.record_score.assert_called_once_with("agent", 0, "Rookie Leaker")

    def test_submit_score_assigns_rank_from_score(self):
        repository = MagicMock()
        repository.record_score.return_value = {'id': 9, 'created_at': '2024-01-01T00:00:00', 'position': 3}

        result = LeaderboardService(repository).submit_score("  agent  ", 42)

        assert result == {'position': 3, 'rank': 'Shadow Associate'}
        repository.record_score.assert_called_once_with("agent", 42, "Shadow Associate")

    def test_invalid_submission_stores_nothing(self):
        repository = MagicMock()

        with pytest.raises(InvalidSubmission):
            LeaderboardService(repository).submit_score("", 10)

        repository.record_score.assert_not_called()

    def test_repository_errors_propagate(self):
        repository = MagicMock()
        repository.record_score.side_effect = Exception("db down")

        with pytest.raises(Exception, match="db down"):
            LeaderboardService(repository).submit_score("agent", 10)

    def test_get_leaderboard_passes_limit(self):
        repository = MagicMock()
        repository.get_top_scores.return_value = [{'username': 'a', 'score': 1}]

        assert LeaderboardService(repository).get_leaderboard(limit=5) == [{'username': 'a', 'score': 1}]
        repository.get_top_scores.assert_called_once_with(limit=5)

    def test_submit_against_sqlite(self, sqlite_repository):
        service = LeaderboardService(sqlite_repository)

        first = service.submit_score("alpha", 12)
        second = service.submit_score("bravo", 30)
        third = service.submit_score("charlie", 12)

        assert first == {'position': 1, 'rank': 'Field Operative'}
        assert second == {'position': 1, 'rank': 'Deep State Threat'}
        assert third['position'] == 3
        assert [e['username'] for e in service.get_leaderboard()] == ['bravo', 'alpha', 'charlie']
