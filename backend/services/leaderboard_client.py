"""
HTTP client for the leaderboard API.

Failures never raise into the game: fetches fall back to an empty list and
submissions return {'success': False, 'error': ...}. No automatic retries;
the player can submit again by hand.
"""

import os
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000/api/leaderboard"
DEFAULT_TIMEOUT = 10


class LeaderboardClient:
    """
    Talks to /api/leaderboard.

    Args:
        api_url: Endpoint URL (defaults to LEADERBOARD_API_URL env var)
        timeout: Request timeout in seconds (defaults to LEADERBOARD_TIMEOUT env var)
        session: Optional requests.Session to reuse connections
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.api_url = api_url or os.getenv('LEADERBOARD_API_URL', DEFAULT_API_URL)
        self.timeout = timeout if timeout is not None else float(os.getenv('LEADERBOARD_TIMEOUT', DEFAULT_TIMEOUT))
        self.session = session or requests.Session()
        self._executor: Optional[ThreadPoolExecutor] = None

    def fetch_scores(self) -> List[Dict[str, Any]]:
        """
        Fetch the top scores.

        Returns:
            List of entries, or [] if the request failed
        """
        try:
            response = self.session.get(self.api_url, timeout=self.timeout)
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Leaderboard fetch error: {e}")
            return []

        if not isinstance(data, dict):
            logger.error(f"Unexpected leaderboard response: {data!r}")
            return []

        if data.get('success'):
            return data.get('scores', [])

        logger.error(f"Failed to fetch leaderboard: {data.get('error')}")
        return []

    def submit_score(self, username: str, score: int) -> Dict[str, Any]:
        """
        Submit a score.

        Returns:
            {'success': True, 'position': int, 'rank': str} or
            {'success': False, 'error': str}
        """
        try:
            response = self.session.post(
                self.api_url,
                json={'username': username, 'score': score},
                timeout=self.timeout,
                headers={'Content-Type': 'application/json'}
            )
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Leaderboard submit error: {e}")
            return {'success': False, 'error': 'Network error'}

        if not isinstance(data, dict):
            logger.error(f"Unexpected leaderboard response: {data!r}")
            return {'success': False, 'error': 'Network error'}

        if data.get('success'):
            return {
                'success': True,
                'position': data.get('position'),
                'rank': data.get('rank')
            }

        return {'success': False, 'error': data.get('error') or 'Unknown error'}

    def submit_score_async(self, username: str, score: int) -> Future:
        """Submit in a background thread; the caller never has to wait on it."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="leaderboard")
        return self._executor.submit(self.submit_score, username, score)

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def format_date(date_string: str, now: Optional[datetime] = None) -> str:
    """
    Format an entry timestamp for the leaderboard table.

    Returns 'JUST NOW', '5M AGO', '3H AGO', '12D AGO', or 'Jan 5' for
    anything a month old or more.
    """
    # Server timestamps are UTC; naive values are read the same way
    date = datetime.fromisoformat(date_string.replace('Z', '+00:00'))
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff_seconds = (now - date).total_seconds()
    diff_mins = int(diff_seconds // 60)
    diff_hours = int(diff_seconds // 3600)
    diff_days = int(diff_seconds // 86400)

    if diff_mins < 1:
        return 'JUST NOW'
    if diff_mins < 60:
        return f'{diff_mins}M AGO'
    if diff_hours < 24:
        return f'{diff_hours}H AGO'
    if diff_days < 30:
        return f'{diff_days}D AGO'

    return f"{date.strftime('%b')} {date.day}"
