"""
Row conversion helpers shared by the table modules.
"""

import json
from datetime import datetime, timezone


def utc_now():
    """ISO-8601 UTC timestamp used for created_at/updated_at columns."""
    return datetime.now(timezone.utc).isoformat()


def row_to_dict(row, bool_fields=(), json_fields=None):
    """Convert a sqlite3.Row to a plain dict.

    Args:
        row: sqlite3.Row (or None)
        bool_fields: Column names stored as 0/1 to expose as bool
        json_fields: Mapping of column name -> default for JSON-encoded columns

    Returns:
        dict, or None when row is None
    """
    if row is None:
        return None
    data = dict(row)
    for field in bool_fields:
        if field in data and data[field] is not None:
            data[field] = bool(data[field])
    for field, default in (json_fields or {}).items():
        if field not in data:
            continue
        raw = data[field]
        if not raw:
            data[field] = default
            continue
        try:
            data[field] = json.loads(raw)
        except (TypeError, json.JSONDecodeError):
            data[field] = default
    return data


def build_update(values, allowed):
    """Build a `col = ?` SET clause from the allowed keys present in values.

    Returns:
        Tuple of (set_sql, params); set_sql is empty when nothing to update
    """
    columns = [key for key in allowed if key in values]
    set_sql = ', '.join(f'{col} = ?' for col in columns)
    return set_sql, [values[col] for col in columns]
