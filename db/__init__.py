"""
LifeAid storefront database package.

Re-exports public API for convenient imports.
"""

from db.connection import get_connection, apply_pragmas, get_db_path, DEFAULT_DB_PATH
from db.schema import (
    init_database, get_schema_info,
    PRODUCTS_COLUMNS, TESTIMONIALS_COLUMNS, CONTACT_MESSAGES_COLUMNS,
    VIDEOS_COLUMNS, WEBSITE_SETTINGS_COLUMNS, CHAT_MEMORY_COLUMNS,
    ADMIN_PROFILES_COLUMNS, TABLES, INDEXES,
)
