"""
Shared fixtures.

The sqlite fixtures let the leaderboard SQL run for real: placeholders and
NOW() are rewritten to sqlite syntax, everything else goes through unchanged.
"""

import os
import sqlite3
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data_access.repositories import LeaderboardRepository  # noqa: E402

SQLITE_NOW = "strftime('%Y-%m-%d %H:%M:%f', 'now')"

SQLITE_SCHEMA = """
    CREATE TABLE IF NOT EXISTS leaderboard (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        username TEXT NOT NULL,
        score INTEGER NOT NULL,
        rank TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
"""


class SqliteCursor:
    def __init__(self, cursor):
        self._cursor = cursor

    def execute(self, sql, params=()):
        sql = sql.replace("%s", "?").replace("NOW()", SQLITE_NOW)
        return self._cursor.execute(sql, params)

    def fetchone(self):
        return self._cursor.fetchone()

    def fetchall(self):
        return self._cursor.fetchall()

    @property
    def rowcount(self):
        return self._cursor.rowcount

    def close(self):
        self._cursor.close()


class SqliteConnection:
    def __init__(self, path):
        self._conn = sqlite3.connect(path)
        self._conn.row_factory = sqlite3.Row

    def cursor(self):
        return SqliteCursor(self._conn.cursor())

    def commit(self):
        self._conn.commit()

    def rollback(self):
        self._conn.rollback()

    def close(self):
        self._conn.close()


@pytest.fixture
def sqlite_db(tmp_path):
    """Path to a sqlite file holding an empty leaderboard table."""
    if sqlite3.sqlite_version_info < (3, 35, 0):
        pytest.skip("sqlite RETURNING needs 3.35+")

    path = str(tmp_path / "leaderboard.db")
    conn = sqlite3.connect(path)
    conn.execute(SQLITE_SCHEMA)
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def sqlite_repository(sqlite_db):
    return LeaderboardRepository(connection_factory=lambda: SqliteConnection(sqlite_db))


@pytest.fixture
def insert_entry(sqlite_db):
    """Insert a row with an explicit timestamp, bypassing record_score."""
    def _insert(username, score, rank, created_at):
        conn = sqlite3.connect(sqlite_db)
        conn.execute(
            "INSERT INTO leaderboard (username, score, rank, created_at) VALUES (?, ?, ?, ?)",
            (username, score, rank, created_at)
        )
        conn.commit()
        conn.close()
    return _insert
