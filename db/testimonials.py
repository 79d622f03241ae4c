"""
Customer testimonial table access.
"""

from db.records import build_update, row_to_dict, utc_now

TESTIMONIAL_FIELDS = [
    'name', 'role_id', 'role_en', 'rating',
    'comment_id', 'comment_en', 'is_active', 'sort_order',
]


def _to_testimonial(row):
    return row_to_dict(row, ('is_active',))


def _encode(values):
    encoded = dict(values)
    if 'is_active' in encoded:
        encoded['is_active'] = 1 if encoded['is_active'] else 0
    return encoded


def list_testimonials(conn):
    rows = conn.execute("SELECT * FROM testimonials ORDER BY sort_order ASC, id ASC").fetchall()
    return [_to_testimonial(r) for r in rows]


def list_active_testimonials(conn):
    """Active testimonials for public display."""
    rows = conn.execute(
        "SELECT * FROM testimonials WHERE is_active = 1 ORDER BY sort_order ASC, id ASC"
    ).fetchall()
    return [_to_testimonial(r) for r in rows]


def get_testimonial(conn, testimonial_id):
    row = conn.execute("SELECT * FROM testimonials WHERE id = ?", (testimonial_id,)).fetchone()
    return _to_testimonial(row)


def create_testimonial(conn, values):
    encoded = _encode(values)
    columns = [f for f in TESTIMONIAL_FIELDS if f in encoded] + ['created_at']
    params = [encoded[f] for f in TESTIMONIAL_FIELDS if f in encoded] + [utc_now()]
    placeholders = ','.join('?' for _ in columns)
    cursor = conn.execute(
        f"INSERT INTO testimonials ({', '.join(columns)}) VALUES ({placeholders})", params
    )
    conn.commit()
    return get_testimonial(conn, cursor.lastrowid)


def update_testimonial(conn, testimonial_id, values):
    set_sql, params = build_update(_encode(values), TESTIMONIAL_FIELDS)
    if not set_sql:
        return get_testimonial(conn, testimonial_id)
    cursor = conn.execute(
        f"UPDATE testimonials SET {set_sql} WHERE id = ?", params + [testimonial_id]
    )
    conn.commit()
    if cursor.rowcount == 0:
        return None
    return get_testimonial(conn, testimonial_id)


def delete_testimonial(conn, testimonial_id):
    cursor = conn.execute("DELETE FROM testimonials WHERE id = ?", (testimonial_id,))
    conn.commit()
    return cursor.rowcount > 0
