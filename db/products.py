"""
Product catalog table access.

Functions take an open connection; callers own commit/close.
"""

import json

from db.records import build_update, row_to_dict, utc_now

PRODUCT_FIELDS = [
    'slug', 'image_base64', 'thumbnails_base64',
    'title_id', 'title_en', 'description_id', 'description_en',
    'condition_id', 'condition_en', 'min_order_id', 'min_order_en',
    'category_id', 'category_en', 'price', 'price_numeric',
    'is_active', 'sort_order',
]

_BOOL_FIELDS = ('is_active',)
_JSON_FIELDS = {'thumbnails_base64': []}


def _to_product(row):
    return row_to_dict(row, _BOOL_FIELDS, _JSON_FIELDS)


def _encode(values):
    """Encode Python values into their column representation."""
    encoded = dict(values)
    if 'thumbnails_base64' in encoded:
        encoded['thumbnails_base64'] = json.dumps(encoded['thumbnails_base64'] or [])
    if 'is_active' in encoded:
        encoded['is_active'] = 1 if encoded['is_active'] else 0
    return encoded


def list_products(conn):
    """All products for the admin list, by sort_order."""
    rows = conn.execute("SELECT * FROM products ORDER BY sort_order ASC, id ASC").fetchall()
    return [_to_product(r) for r in rows]


def list_active_products(conn):
    """Active products for the storefront, by sort_order."""
    rows = conn.execute(
        "SELECT * FROM products WHERE is_active = 1 ORDER BY sort_order ASC, id ASC"
    ).fetchall()
    return [_to_product(r) for r in rows]


def get_product(conn, product_id):
    row = conn.execute("SELECT * FROM products WHERE id = ?", (product_id,)).fetchone()
    return _to_product(row)


def get_active_product_by_slug(conn, slug):
    row = conn.execute(
        "SELECT * FROM products WHERE slug = ? AND is_active = 1", (slug,)
    ).fetchone()
    return _to_product(row)


def slug_exists(conn, slug, exclude_id=None):
    """Check whether a slug is taken by another product."""
    if exclude_id is None:
        row = conn.execute("SELECT 1 FROM products WHERE slug = ?", (slug,)).fetchone()
    else:
        row = conn.execute(
            "SELECT 1 FROM products WHERE slug = ? AND id != ?", (slug, exclude_id)
        ).fetchone()
    return row is not None


def create_product(conn, values):
    """Insert a product and return the stored row."""
    encoded = _encode(values)
    now = utc_now()
    columns = [f for f in PRODUCT_FIELDS if f in encoded] + ['created_at', 'updated_at']
    params = [encoded[f] for f in PRODUCT_FIELDS if f in encoded] + [now, now]
    placeholders = ','.join('?' for _ in columns)
    cursor = conn.execute(
        f"INSERT INTO products ({', '.join(columns)}) VALUES ({placeholders})", params
    )
    conn.commit()
    return get_product(conn, cursor.lastrowid)


def update_product(conn, product_id, values):
    """Update the given fields of a product (stamps updated_at).

    Returns:
        Updated product dict, or None if the product does not exist
    """
    encoded = _encode(values)
    encoded['updated_at'] = utc_now()
    set_sql, params = build_update(encoded, PRODUCT_FIELDS + ['updated_at'])
    cursor = conn.execute(f"UPDATE products SET {set_sql} WHERE id = ?", params + [product_id])
    conn.commit()
    if cursor.rowcount == 0:
        return None
    return get_product(conn, product_id)


def delete_product(conn, product_id):
    """Delete a product. Returns True if a row was removed."""
    cursor = conn.execute("DELETE FROM products WHERE id = ?", (product_id,))
    conn.commit()
    return cursor.rowcount > 0
