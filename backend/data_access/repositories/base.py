"""
Base repository with connection management.

Every repository opens one connection per unit of work; the context managers
below commit on success, roll back on failure and always close.
"""

from contextlib import contextmanager
from typing import Any, Callable, Generator, Optional

import database_postgres


def get_connection():
    return database_postgres.get_connection()


class BaseRepository:
    """
    Base class for all repositories.

    Args:
        connection_factory: Callable returning a DB-API connection. Defaults
            to the PostgreSQL connection from database_postgres.
    """

    def __init__(self, connection_factory: Optional[Callable[[], Any]] = None):
        self._connection_factory = connection_factory

    def _connect(self):
        if self._connection_factory is not None:
            return self._connection_factory()
        return get_connection()

    @contextmanager
    def connection(self, auto_commit: bool = True) -> Generator[Any, None, None]:
        """
        Yield (connection, cursor) for a write transaction.

        Commits on a clean exit when auto_commit is set, rolls back if the
        block raises.

        Example:
            with self.connection() as (conn, cursor):
                cursor.execute("DELETE FROM leaderboard")
        """
        conn = self._connect()
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if auto_commit:
                conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    @contextmanager
    def read_connection(self) -> Generator[Any, None, None]:
        """Yield (connection, cursor) for queries that need no commit."""
        conn = self._connect()
        cursor = conn.cursor()
        try:
            yield conn, cursor
        finally:
            cursor.close()
            conn.close()
