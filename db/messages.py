"""
Contact form and newsletter message table access.
"""

from db.records import row_to_dict, utc_now

_BOOL_FIELDS = ('is_read', 'is_replied')


def list_messages(conn):
    """All messages, newest first."""
    rows = conn.execute(
        "SELECT * FROM contact_messages ORDER BY created_at DESC, id DESC"
    ).fetchall()
    return [row_to_dict(r, _BOOL_FIELDS) for r in rows]


def get_message(conn, message_id):
    row = conn.execute("SELECT * FROM contact_messages WHERE id = ?", (message_id,)).fetchone()
    return row_to_dict(row, _BOOL_FIELDS)


def create_message(conn, name, email, message, phone=None, message_type='contact'):
    cursor = conn.execute(
        """INSERT INTO contact_messages (name, email, phone, message, type, is_read, is_replied, created_at)
           VALUES (?, ?, ?, ?, ?, 0, 0, ?)""",
        (name, email, phone, message, message_type, utc_now()),
    )
    conn.commit()
    return get_message(conn, cursor.lastrowid)


def mark_read(conn, message_id):
    cursor = conn.execute("UPDATE contact_messages SET is_read = 1 WHERE id = ?", (message_id,))
    conn.commit()
    return cursor.rowcount > 0


def mark_replied(conn, message_id):
    """Mark a message replied; a replied message is also read."""
    cursor = conn.execute(
        "UPDATE contact_messages SET is_replied = 1, is_read = 1 WHERE id = ?", (message_id,)
    )
    conn.commit()
    return cursor.rowcount > 0


def count_unread(conn):
    return conn.execute("SELECT COUNT(*) FROM contact_messages WHERE is_read = 0").fetchone()[0]
