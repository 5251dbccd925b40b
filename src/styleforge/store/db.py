from __future__ import annotations

import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager


class Database:
    """Connection holder for the preset store.

    The connection is shared across request threads and every statement runs
    under one re-entrant lock. :meth:`transaction` holds that lock until it
    commits or rolls back.
    """

    def __init__(self, path: str = ":memory:") -> None:
        self._path = path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.RLock()

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_memory(self) -> bool:
        return self._path == ":memory:"

    def connect(self) -> None:
        with self._lock:
            self._conn = sqlite3.connect(self._path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            if not self.is_memory:
                self._conn.execute("PRAGMA journal_mode=WAL")

    def close(self) -> None:
        with self._lock:
            if self._conn:
                self._conn.close()
                self._conn = None

    @property
    def connection(self) -> sqlite3.Connection:
        assert self._conn is not None, "Database not connected"
        return self._conn

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        with self._lock:
            return self.connection.execute(sql, params)

    def executescript(self, script: str) -> None:
        with self._lock:
            self.connection.executescript(script)

    def fetch_one(self, sql: str, params: tuple = ()) -> sqlite3.Row | None:
        """Run a query and return its first row, or None."""
        with self._lock:
            return self.connection.execute(sql, params).fetchone()

    def fetch_all(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        with self._lock:
            return self.connection.execute(sql, params).fetchall()

    def commit(self) -> None:
        with self._lock:
            self.connection.commit()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Commit on success, roll back if the block raises."""
        with self._lock:
            conn = self.connection
            try:
                yield conn
            except BaseException:
                conn.rollback()
                raise
            conn.commit()
