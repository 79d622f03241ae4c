"""
Website settings with a local-file fallback.

Settings live in the website_settings table. Every save is mirrored to a
local JSON file first, and reads fall back to that file when the database
is unreachable, so the storefront keeps its contact details and catalog
mode through database outages.
"""

import json
import logging
import os
import sqlite3

from api import config
from api.config import get_settings_fallback_path
from api.database import get_db
from db.settings import get_all_settings, get_setting, upsert_setting

logger = logging.getLogger(__name__)

USE_DATABASE_PRODUCTS = 'use_database_products'
FEATURED_PRODUCT_CONTENT = 'featured_product_content'

DEFAULT_SETTINGS = {
    'whatsapp': '',
    'email': '',
    'phone': '',
    'address': '',
    'tokopedia': '',
    'shopee': '',
    'instagram': '',
    'facebook': '',
    USE_DATABASE_PRODUCTS: 'false',
}

CONTACT_KEYS = ['email', 'phone', 'whatsapp', 'address', 'tokopedia', 'shopee', 'instagram', 'facebook']


def _load_local_settings():
    """Read the local fallback file. Missing or corrupt file -> {}."""
    path = get_settings_fallback_path()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid local settings file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        return {}
    return {k: str(v) for k, v in data.items() if k in DEFAULT_SETTINGS and v is not None}


def _save_local_settings(settings):
    path = get_settings_fallback_path()
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(settings, f, indent=2)


def load_site_settings():
    """Current settings merged over defaults.

    Database values win; the local file is used when the database is
    unreachable or holds no settings yet.
    """
    settings = dict(DEFAULT_SETTINGS)
    try:
        with get_db() as conn:
            stored = get_all_settings(conn)
    except sqlite3.Error as e:
        logger.warning("Settings database unavailable, using local settings: %s", e)
        settings.update(_load_local_settings())
        return settings

    known = {k: (v or '') for k, v in stored.items() if k in DEFAULT_SETTINGS}
    if known:
        settings.update(known)
    else:
        settings.update(_load_local_settings())
    return settings


def save_site_settings(values):
    """Persist settings: local file first, then each key in the database.

    Unknown keys are ignored. A database failure is logged; the local copy
    still holds the new values.

    Returns:
        Tuple of (settings dict, saved_to_database bool)
    """
    settings = load_site_settings()
    for key, value in values.items():
        if key in DEFAULT_SETTINGS and value is not None:
            settings[key] = str(value)

    _save_local_settings(settings)

    try:
        with get_db() as conn:
            for key, value in settings.items():
                upsert_setting(conn, key, value, commit=False)
            conn.commit()
    except sqlite3.Error as e:
        logger.warning("Settings database save failed, saved locally only: %s", e)
        return settings, False
    return settings, True


def fetch_setting(key):
    """Single setting value, or None when missing or unreadable."""
    try:
        with get_db() as conn:
            return get_setting(conn, key) or None
    except sqlite3.Error as e:
        logger.warning("Failed to fetch setting %s: %s", key, e)
        return None


def update_setting(key, value):
    """Upsert a single setting. Raises sqlite3.Error on failure."""
    with get_db() as conn:
        upsert_setting(conn, key, value)


def is_using_database_products():
    """Whether the storefront serves catalog content from the database."""
    value = fetch_setting(USE_DATABASE_PRODUCTS)
    if value is None:
        value = _load_local_settings().get(USE_DATABASE_PRODUCTS)
    return value == 'true'


def public_contact_settings():
    """Contact details for the public site, configured defaults filling blanks."""
    settings = load_site_settings()
    defaults = config.SITE_CONFIG['contact_defaults']
    return {key: settings.get(key) or defaults.get(key, '') for key in CONTACT_KEYS}
