"""
Tutorial video table access.
"""

from db.records import build_update, row_to_dict, utc_now

VIDEO_FIELDS = [
    'youtube_id', 'title_id', 'title_en',
    'description_id', 'description_en', 'is_active', 'sort_order',
]


def _to_video(row):
    return row_to_dict(row, ('is_active',))


def _encode(values):
    encoded = dict(values)
    if 'is_active' in encoded:
        encoded['is_active'] = 1 if encoded['is_active'] else 0
    return encoded


def list_videos(conn):
    rows = conn.execute("SELECT * FROM videos ORDER BY sort_order ASC, id ASC").fetchall()
    return [_to_video(r) for r in rows]


def list_active_videos(conn):
    rows = conn.execute(
        "SELECT * FROM videos WHERE is_active = 1 ORDER BY sort_order ASC, id ASC"
    ).fetchall()
    return [_to_video(r) for r in rows]


def get_video(conn, video_id):
    row = conn.execute("SELECT * FROM videos WHERE id = ?", (video_id,)).fetchone()
    return _to_video(row)


def create_video(conn, values):
    encoded = _encode(values)
    columns = [f for f in VIDEO_FIELDS if f in encoded] + ['created_at']
    params = [encoded[f] for f in VIDEO_FIELDS if f in encoded] + [utc_now()]
    placeholders = ','.join('?' for _ in columns)
    cursor = conn.execute(
        f"INSERT INTO videos ({', '.join(columns)}) VALUES ({placeholders})", params
    )
    conn.commit()
    return get_video(conn, cursor.lastrowid)


def update_video(conn, video_id, values):
    set_sql, params = build_update(_encode(values), VIDEO_FIELDS)
    if not set_sql:
        return get_video(conn, video_id)
    cursor = conn.execute(f"UPDATE videos SET {set_sql} WHERE id = ?", params + [video_id])
    conn.commit()
    if cursor.rowcount == 0:
        return None
    return get_video(conn, video_id)


def delete_video(conn, video_id):
    cursor = conn.execute("DELETE FROM videos WHERE id = ?", (video_id,))
    conn.commit()
    return cursor.rowcount > 0
