"""
In‑memory SQLite database.

This module provides the ``Database`` object that owns the single
SQLite connection used by the application, a ``cursor`` context
manager that serialises access to it, and ``init_db`` which creates
the ``usuario`` table.  The database lives in memory and disappears
together with the process; there are no migrations.

One connection is shared by every request.  SQLite connections are
not safe for concurrent use, so all access goes through ``cursor``,
which holds a lock for the duration of the block and commits or rolls
back on exit.
"""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS usuario (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    birth_date TEXT NOT NULL
);
"""


class Database:
    """Owner of the process‑lifetime SQLite connection."""

    def __init__(self, path: str = ":memory:") -> None:
        self.path = path
        self._lock = threading.Lock()
        self._conn = self.get_connection()

    def get_connection(self) -> sqlite3.Connection:
        """Open the SQLite connection.

        ``check_same_thread`` is disabled because request handlers run
        store calls in a worker thread pool; the lock in ``cursor``
        guarantees only one thread uses the connection at a time.
        """
        conn = sqlite3.connect(self.path, check_same_thread=False)
        # Return rows as dict‑like objects keyed by column name
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor while holding the connection lock.

        The transaction is committed when the block exits normally and
        rolled back if it raises.
        """
        with self._lock:
            cursor = self._conn.cursor()
            try:
                yield cursor
                self._conn.commit()
            except Exception:
                self._conn.rollback()
                raise
            finally:
                cursor.close()

    def init_db(self) -> None:
        """Create the ``usuario`` table if it does not exist."""
        with self.cursor() as cursor:
            cursor.executescript(SCHEMA)
        logger.debug("Database initialised at %s", self.path)

    def close(self) -> None:
        with self._lock:
            self._conn.close()
