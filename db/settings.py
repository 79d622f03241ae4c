"""
Key/value website settings table access.
"""

from db.records import utc_now


def get_setting(conn, key):
    """Return the stored value for key, or None."""
    row = conn.execute("SELECT value FROM website_settings WHERE key = ?", (key,)).fetchone()
    return row[0] if row else None


def get_all_settings(conn):
    rows = conn.execute("SELECT key, value FROM website_settings").fetchall()
    return {r[0]: r[1] for r in rows}


def upsert_setting(conn, key, value, commit=True):
    conn.execute(
        """INSERT INTO website_settings (key, value, updated_at) VALUES (?, ?, ?)
           ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at""",
        (key, value, utc_now()),
    )
    if commit:
        conn.commit()
