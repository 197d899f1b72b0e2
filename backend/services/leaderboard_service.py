"""
Leaderboard service: validates submissions, assigns ranks and persists scores.
"""

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from data_access.repositories import LeaderboardRepository, MAX_LEADERBOARD_ENTRIES
from domain.ranks import calculate_rank

logger = logging.getLogger(__name__)

MAX_USERNAME_LENGTH = 20


class InvalidSubmission(ValueError):
    """A score submission failed validation; the message is shown to the player."""


def validate_submission(username: Any, score: Any) -> Tuple[str, int]:
    """
    Check a submission and normalise it.

    Args:
        username: Raw username from the request
        score: Raw score from the request

    Returns:
        (trimmed username, integer score)

    Raises:
        InvalidSubmission: If the username is missing or too long, or the
            score is not a non-negative whole number.
    """
    if not isinstance(username, str) or not username.strip():
        raise InvalidSubmission("Username is required")

    username = username.strip()
    if len(username) > MAX_USERNAME_LENGTH:
        raise InvalidSubmission(f"Username must be {MAX_USERNAME_LENGTH} characters or less")

    # bool is an int subclass; JSON true/false is not a score
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise InvalidSubmission("Invalid score")
    if isinstance(score, float) and (not math.isfinite(score) or not score.is_integer()):
        raise InvalidSubmission("Invalid score")
    if score < 0:
        raise InvalidSubmission("Invalid score")

    return username, int(score)


class LeaderboardService:
    """
    Server side of score submission and listing.
    """

    def __init__(self, repository: Optional[LeaderboardRepository] = None):
        self.repository = repository or LeaderboardRepository()

    def submit_score(self, username: Any, score: Any) -> Dict[str, Any]:
        """
        Validate and store a score.

        Returns:
            Dict with the 1-based position and the rank label

        Raises:
            InvalidSubmission: On validation failure (nothing is stored)
        """
        username, score = validate_submission(username, score)
        rank = calculate_rank(score)

        result = self.repository.record_score(username, score, rank)
        logger.info(f"Recorded score {score} for {username!r} at position {result['position']}")

        return {
            'position': result['position'],
            'rank': rank
        }

    def get_leaderboard(self, limit: int = MAX_LEADERBOARD_ENTRIES) -> List[Dict[str, Any]]:
        return self.repository.get_top_scores(limit=limit)
