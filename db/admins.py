"""
Admin account (admin_profiles) table access.
"""

from db.records import row_to_dict, utc_now


def get_admin_by_email(conn, email):
    row = conn.execute(
        "SELECT * FROM admin_profiles WHERE lower(email) = lower(?)", (email,)
    ).fetchone()
    return row_to_dict(row)


def get_admin(conn, admin_id):
    row = conn.execute("SELECT * FROM admin_profiles WHERE id = ?", (admin_id,)).fetchone()
    return row_to_dict(row)


def create_admin(conn, email, password_hash, display_name=None, role='admin'):
    cursor = conn.execute(
        "INSERT INTO admin_profiles (email, password_hash, display_name, role, created_at) VALUES (?, ?, ?, ?, ?)",
        (email, password_hash, display_name, role, utc_now()),
    )
    conn.commit()
    return get_admin(conn, cursor.lastrowid)


def update_display_name(conn, admin_id, display_name):
    conn.execute("UPDATE admin_profiles SET display_name = ? WHERE id = ?", (display_name, admin_id))
    conn.commit()


def update_email(conn, admin_id, email):
    conn.execute("UPDATE admin_profiles SET email = ? WHERE id = ?", (email, admin_id))
    conn.commit()


def update_password_hash(conn, admin_id, password_hash):
    conn.execute("UPDATE admin_profiles SET password_hash = ? WHERE id = ?", (password_hash, admin_id))
    conn.commit()
