"""
Leaderboard repository for score-related database operations.
"""

from datetime import datetime, timezone
from typing import Dict, Any, List

from .base import BaseRepository


MAX_LEADERBOARD_ENTRIES = 100

# Ties on score go to the earlier submission; id settles identical timestamps.
COUNT_BETTER_SQL = """
    SELECT COUNT(*) AS better
    FROM leaderboard
    WHERE score > %s
       OR (score = %s AND created_at < %s)
       OR (score = %s AND created_at = %s AND id < %s)
"""


class LeaderboardRepository(BaseRepository):
    """
    Repository for leaderboard table operations.
    """

    # -------------------------------------------------------------------------
    # Write operations
    # -------------------------------------------------------------------------

    def record_score(self, username: str, score: int, rank: str) -> Dict[str, Any]:
        """
        Insert a score and compute its 1-based position in one transaction.

        Args:
            username: Already trimmed and validated name
            score: Non-negative score
            rank: Rank label for the score

        Returns:
            Dict with id, created_at (ISO string) and position
        """
        with self.connection() as (conn, cursor):
            cursor.execute("""
                INSERT INTO leaderboard (username, score, rank, created_at)
                VALUES (%s, %s, %s, NOW())
                RETURNING id, created_at
            """, (username, score, rank))
            inserted = cursor.fetchone()

            entry_id = inserted['id']
            created_at = inserted['created_at']

            cursor.execute(COUNT_BETTER_SQL, (
                score,
                score, created_at,
                score, created_at, entry_id
            ))
            better = cursor.fetchone()['better']

            return {
                'id': entry_id,
                'created_at': self._format_timestamp(created_at),
                'position': int(better) + 1
            }

    def clear(self) -> int:
        """
        Delete every leaderboard row.

        Returns:
            Number of rows deleted
        """
        with self.connection() as (conn, cursor):
            cursor.execute("DELETE FROM leaderboard")
            return cursor.rowcount

    # -------------------------------------------------------------------------
    # Query operations
    # -------------------------------------------------------------------------

    def get_top_scores(self, limit: int = MAX_LEADERBOARD_ENTRIES) -> List[Dict[str, Any]]:
        """
        Get the best scores, highest first, earlier submissions first on ties.

        Args:
            limit: Maximum number of entries (capped at 100)

        Returns:
            List of entry dictionaries
        """
        limit = max(1, min(limit, MAX_LEADERBOARD_ENTRIES))

        with self.read_connection() as (conn, cursor):
            cursor.execute("""
                SELECT username, score, rank, created_at
                FROM leaderboard
                ORDER BY score DESC, created_at ASC, id ASC
                LIMIT %s
            """, (limit,))

            return [self._row_to_entry(row) for row in cursor.fetchall()]

    def get_total_count(self) -> int:
        with self.read_connection() as (conn, cursor):
            cursor.execute("SELECT COUNT(*) AS count FROM leaderboard")
            row = cursor.fetchone()
            return int(row['count']) if row else 0

    # -------------------------------------------------------------------------
    # Helper methods
    # -------------------------------------------------------------------------

    def _format_timestamp(self, value: Any) -> Any:
        """ISO string with an explicit UTC offset; TIMESTAMP columns come back naive."""
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return value.astimezone(timezone.utc).isoformat()
        return value

    def _row_to_entry(self, row: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'username': row['username'],
            'score': row['score'],
            'rank': row['rank'],
            'created_at': self._format_timestamp(row['created_at'])
        }
