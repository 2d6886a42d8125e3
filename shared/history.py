# Dot Shared History
# SQLite log of feedback and the summaries generated for it

import sqlite3
from contextlib import closing

from .config import HISTORY_DB_PATH, HISTORY_LIMIT
from .errors import PersistenceError, StoreQueryError

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS summaries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    feedback TEXT NOT NULL,
    summary TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
)
"""

INSERT_SQL = "INSERT INTO summaries (feedback, summary) VALUES (?, ?)"

RECENT_SQL = f"SELECT id, feedback, summary, created_at FROM summaries ORDER BY created_at DESC LIMIT {HISTORY_LIMIT}"


class HistoryStore:
    """Append-only history of summaries.

    Opens a connection per call so one store can be shared by
    Flask's request threads.
    """

    def __init__(self, path=None):
        self.path = path or HISTORY_DB_PATH
        with closing(self._connect()) as conn, conn:
            conn.execute(CREATE_TABLE_SQL)

    def _connect(self):
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    def insert(self, feedback, summary):
        """Record a summary. Returns the new row id."""
        try:
            with closing(self._connect()) as conn, conn:
                cursor = conn.execute(INSERT_SQL, (feedback, summary))
                return cursor.lastrowid
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not save summary: {e}") from e

    def list_recent(self):
        """Return the newest records, newest first."""
        try:
            with closing(self._connect()) as conn:
                rows = conn.execute(RECENT_SQL).fetchall()
        except sqlite3.Error as e:
            raise StoreQueryError(f"Could not read history: {e}") from e

        return [dict(row) for row in rows]
