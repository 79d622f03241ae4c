"""
Database connection management for FastAPI.

Wraps synchronous sqlite3 calls in run_in_executor for async compatibility.
"""

import asyncio
import sqlite3
from contextlib import contextmanager
from functools import partial

from db import apply_pragmas, get_db_path


def get_db_connection():
    """Get database connection with WAL mode and row factory.

    Returns a plain connection (caller must close).
    """
    conn = sqlite3.connect(get_db_path())
    apply_pragmas(conn)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_db():
    """Context manager for database connections."""
    conn = get_db_connection()
    try:
        yield conn
    finally:
        conn.close()


async def run_sync(fn, *args, **kwargs):
    """Run a synchronous function in the default executor."""
    loop = asyncio.get_running_loop()
    if kwargs:
        return await loop.run_in_executor(None, partial(fn, *args, **kwargs))
    return await loop.run_in_executor(None, partial(fn, *args))
