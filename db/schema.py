"""
Database schema definitions and initialization for the LifeAid storefront.

Single source of truth for all table and index definitions.
"""

import sqlite3

from db.connection import apply_pragmas, get_db_path

# Schema definitions as (name, type_definition) tuples
# Type definition includes any defaults or constraints

PRODUCTS_COLUMNS = [
    ('id', 'INTEGER PRIMARY KEY AUTOINCREMENT'),
    ('slug', 'TEXT NOT NULL UNIQUE'),
    ('image_base64', "TEXT DEFAULT ''"),
    ('thumbnails_base64', "TEXT DEFAULT '[]'"),  # JSON array

    # Bilingual content (descriptions are markdown)
    ('title_id', 'TEXT NOT NULL'),
    ('title_en', 'TEXT NOT NULL'),
    ('description_id', "TEXT DEFAULT ''"),
    ('description_en', "TEXT DEFAULT ''"),
    ('condition_id', "TEXT DEFAULT 'Baru'"),
    ('condition_en', "TEXT DEFAULT 'New'"),
    ('min_order_id', "TEXT DEFAULT '1 Buah'"),
    ('min_order_en', "TEXT DEFAULT '1 Unit'"),
    ('category_id', "TEXT DEFAULT ''"),
    ('category_en', "TEXT DEFAULT ''"),

    # Pricing
    ('price', "TEXT DEFAULT ''"),
    ('price_numeric', 'INTEGER DEFAULT 0 CHECK (price_numeric >= 0)'),

    # Publishing
    ('is_active', 'INTEGER DEFAULT 1 CHECK (is_active IN (0, 1))'),
    ('sort_order', 'INTEGER DEFAULT 0'),
    ('created_at', 'TEXT'),
    ('updated_at', 'TEXT'),
]

TESTIMONIALS_COLUMNS = [
    ('id', 'INTEGER PRIMARY KEY AUTOINCREMENT'),
    ('name', 'TEXT NOT NULL'),
    ('role_id', "TEXT DEFAULT ''"),
    ('role_en', "TEXT DEFAULT ''"),
    ('rating', 'INTEGER DEFAULT 5 CHECK (rating >= 1 AND rating <= 5)'),
    ('comment_id', "TEXT DEFAULT ''"),
    ('comment_en', "TEXT DEFAULT ''"),
    ('is_active', 'INTEGER DEFAULT 1 CHECK (is_active IN (0, 1))'),
    ('sort_order', 'INTEGER DEFAULT 0'),
    ('created_at', 'TEXT'),
]

CONTACT_MESSAGES_COLUMNS = [
    ('id', 'INTEGER PRIMARY KEY AUTOINCREMENT'),
    ('name', 'TEXT NOT NULL'),
    ('email', 'TEXT NOT NULL'),
    ('phone', 'TEXT'),
    ('message', 'TEXT NOT NULL'),
    ('type', "TEXT DEFAULT 'contact'"),  # 'contact' or 'subscribe'
    ('is_read', 'INTEGER DEFAULT 0 CHECK (is_read IN (0, 1))'),
    ('is_replied', 'INTEGER DEFAULT 0 CHECK (is_replied IN (0, 1))'),
    ('created_at', 'TEXT'),
]

VIDEOS_COLUMNS = [
    ('id', 'INTEGER PRIMARY KEY AUTOINCREMENT'),
    ('youtube_id', 'TEXT NOT NULL'),
    ('title_id', 'TEXT NOT NULL'),
    ('title_en', 'TEXT NOT NULL'),
    ('description_id', "TEXT DEFAULT ''"),
    ('description_en', "TEXT DEFAULT ''"),
    ('is_active', 'INTEGER DEFAULT 1 CHECK (is_active IN (0, 1))'),
    ('sort_order', 'INTEGER DEFAULT 0'),
    ('created_at', 'TEXT'),
]

WEBSITE_SETTINGS_COLUMNS = [
    ('key', 'TEXT PRIMARY KEY'),
    ('value', 'TEXT'),
    ('updated_at', 'TEXT'),
]

CHAT_MEMORY_COLUMNS = [
    ('id', 'INTEGER PRIMARY KEY AUTOINCREMENT'),
    ('session_id', 'TEXT NOT NULL'),
    ('role', "TEXT NOT NULL CHECK (role IN ('user', 'assistant', 'system'))"),
    ('content', "TEXT NOT NULL DEFAULT ''"),
    ('metadata', "TEXT DEFAULT '{}'"),  # JSON object (name, email, phone, ...)
    ('created_at', 'TEXT'),
]

ADMIN_PROFILES_COLUMNS = [
    ('id', 'INTEGER PRIMARY KEY AUTOINCREMENT'),
    ('email', 'TEXT NOT NULL UNIQUE'),
    ('password_hash', 'TEXT NOT NULL'),
    ('display_name', 'TEXT'),
    ('role', "TEXT DEFAULT 'admin'"),
    ('created_at', 'TEXT'),
]

TABLES = [
    ('products', PRODUCTS_COLUMNS),
    ('testimonials', TESTIMONIALS_COLUMNS),
    ('contact_messages', CONTACT_MESSAGES_COLUMNS),
    ('videos', VIDEOS_COLUMNS),
    ('website_settings', WEBSITE_SETTINGS_COLUMNS),
    ('chat_memory', CHAT_MEMORY_COLUMNS),
    ('admin_profiles', ADMIN_PROFILES_COLUMNS),
]

# Index definitions as (name, table, column_expression)
INDEXES = [
    ('idx_products_active_sort', 'products', 'is_active, sort_order'),
    ('idx_testimonials_active_sort', 'testimonials', 'is_active, sort_order'),
    ('idx_videos_active_sort', 'videos', 'is_active, sort_order'),
    ('idx_contact_created', 'contact_messages', 'created_at DESC'),
    ('idx_chat_session', 'chat_memory', 'session_id, created_at'),
    ('idx_chat_created', 'chat_memory', 'created_at DESC'),
]


def _build_create_table_sql(table_name, columns, constraints=None):
    """Build CREATE TABLE IF NOT EXISTS SQL from column definitions."""
    col_defs = [f'{name} {typedef}' for name, typedef in columns]
    if constraints:
        col_defs.extend(constraints)
    cols_sql = ',\n                    '.join(col_defs)
    return f'''CREATE TABLE IF NOT EXISTS {table_name} (
                    {cols_sql}
                )'''


def _migrate_add_missing_columns(conn, table_name, columns):
    """Add any missing columns to an existing table.

    Args:
        conn: SQLite connection
        table_name: Name of the table to migrate
        columns: List of (name, type_definition) tuples defining expected columns
    """
    cursor = conn.execute(f"PRAGMA table_info({table_name})")
    existing_cols = {row[1] for row in cursor.fetchall()}

    for col_name, col_type in columns:
        if col_name not in existing_cols:
            # ALTER TABLE cannot add PRIMARY KEY/UNIQUE columns, keep the base type only
            base_type = col_type.split()[0] if col_type else 'TEXT'
            try:
                conn.execute(f"ALTER TABLE {table_name} ADD COLUMN {col_name} {base_type}")
                print(f"  Added column: {table_name}.{col_name}")
            except sqlite3.OperationalError as e:
                if 'duplicate column name' not in str(e).lower():
                    print(f"  Warning: Could not add {table_name}.{col_name}: {e}")


def init_database(db_path=None):
    """
    Initialize the database schema (idempotent).

    Creates all tables and indexes using CREATE IF NOT EXISTS.
    Safe to call on existing databases - automatically adds new columns.

    Args:
        db_path: Path to the SQLite database file (None = active DB_PATH)
    """
    conn = sqlite3.connect(db_path or get_db_path())
    try:
        apply_pragmas(conn)

        for table_name, columns in TABLES:
            conn.execute(_build_create_table_sql(table_name, columns))
            _migrate_add_missing_columns(conn, table_name, columns)

        for idx_name, table, column_expr in INDEXES:
            conn.execute(
                f'CREATE INDEX IF NOT EXISTS {idx_name} ON {table}({column_expr})'
            )

        conn.commit()
    finally:
        conn.close()


def get_schema_info():
    """Return schema information for debugging/display."""
    return {
        'tables': {name: [col[0] for col in columns] for name, columns in TABLES},
        'indexes': len(INDEXES),
    }
