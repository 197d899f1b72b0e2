"""
Game-over bookkeeping: local high score and leaderboard submission.

Submissions run in the background; their results only update the status
message shown to the player, never the game session itself.
"""

import logging
from concurrent.futures import Future
from typing import Any, Dict, Optional

from engine.listener import GameListener, GameOverEvent
from .leaderboard_client import LeaderboardClient
from .local_storage import LocalStore

logger = logging.getLogger(__name__)


class ScoreReporter(GameListener):
    """
    Attributes:
        last_result: summary of the most recent finished session
        status_message: text for the submission status line
        pending: Future of the submission in flight, if any
    """

    def __init__(self, store: LocalStore, client: Optional[LeaderboardClient] = None):
        self.store = store
        self.client = client
        self.last_result: Optional[Dict[str, Any]] = None
        self.status_message = ""
        self.pending: Optional[Future] = None

    def on_game_over(self, event: GameOverEvent) -> None:
        is_new_high_score = self.store.save_high_score(event.score)
        self.last_result = {
            "score": event.score,
            "rank": event.rank,
            "collision": event.collision,
            "new_high_score": is_new_high_score and event.score > 0,
            "high_score": self.store.get_high_score(),
        }
        self.status_message = ""

        if event.score <= 0 or self.client is None:
            return

        # Returning players are submitted automatically
        username = self.store.get_username()
        if username:
            self.submit(username, event.score)

    def submit(self, username: str, score: int) -> Optional[Future]:
        """
        Submit a score in the background (manual submit for new players).

        Returns:
            The Future of the request, or None if nothing was sent
        """
        username = (username or "").strip()
        if not username:
            self.status_message = "[ ERROR: CODENAME REQUIRED ]"
            return None
        if self.client is None:
            self.status_message = "[ ERROR: LEADERBOARD OFFLINE ]"
            return None

        self.status_message = "[ TRANSMITTING... ]"
        future = self.client.submit_score_async(username, score)
        future.add_done_callback(lambda f: self._handle_submission(username, f))
        self.pending = future
        return future

    def _handle_submission(self, username: str, future: Future) -> None:
        try:
            result = future.result()
        except Exception as e:
            logger.error(f"Score submission failed: {e}")
            result = {"success": False, "error": "Network error"}

        if result.get("success"):
            self.store.save_username(username)
            self.status_message = f"[ SUBMITTED - RANK #{result['position']} ]"
        else:
            self.status_message = f"[ ERROR: {str(result.get('error')).upper()} ]"

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until the submission in flight (if any) has finished."""
        if self.pending is not None:
            self.pending.result(timeout=timeout)
