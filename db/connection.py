"""
Database connection utilities for the LifeAid storefront.

Provides connection creation, PRAGMA configuration, and context manager.
"""

import os
import sqlite3
from contextlib import contextmanager

DEFAULT_DB_PATH = os.environ.get('DB_PATH', 'lifeaid_store.db')


def get_db_path():
    """Resolve the active database path (DB_PATH may change at runtime, e.g. in tests)."""
    return os.environ.get('DB_PATH', DEFAULT_DB_PATH)


def apply_pragmas(conn):
    """Apply standard PRAGMA settings to a connection."""
    conn.execute("PRAGMA journal_mode = WAL")
    conn.execute("PRAGMA busy_timeout = 5000")
    conn.execute("PRAGMA foreign_keys = ON")
    conn.execute("PRAGMA synchronous = NORMAL")
    conn.execute("PRAGMA temp_store = MEMORY")


@contextmanager
def get_connection(db_path=None, row_factory=True):
    """
    Context manager for database connections with WAL mode.

    Args:
        db_path: Path to the SQLite database file (None = active DB_PATH)
        row_factory: If True, set row_factory to sqlite3.Row for dict-like access

    Yields:
        sqlite3.Connection configured with WAL mode and busy timeout
    """
    conn = sqlite3.connect(db_path or get_db_path())
    apply_pragmas(conn)
    if row_factory:
        conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()
