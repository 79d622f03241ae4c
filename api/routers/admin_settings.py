"""
Admin website settings, featured-product content and cache control.
"""

import json
import logging
import sqlite3

from fastapi import APIRouter, Depends, HTTPException

from api import config
from api.auth import CurrentUser, require_admin
from api.models.content import FeaturedContent, SettingsUpdate
from catalog.cache import product_cache
from catalog.settings import (
    FEATURED_PRODUCT_CONTENT, USE_DATABASE_PRODUCTS,
    load_site_settings, save_site_settings, update_setting,
)
from catalog.source import load_featured_content

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


def _settings_response(settings):
    data = dict(settings)
    data[USE_DATABASE_PRODUCTS] = settings.get(USE_DATABASE_PRODUCTS) == 'true'
    return data


@router.get("/settings")
def admin_get_settings(user: CurrentUser = Depends(require_admin)):
    return _settings_response(load_site_settings())


@router.put("/settings")
def admin_update_settings(body: SettingsUpdate, user: CurrentUser = Depends(require_admin)):
    """Save settings. The local fallback file is always written, the database when reachable."""
    values = body.model_dump(exclude_none=True)
    if USE_DATABASE_PRODUCTS in values:
        values[USE_DATABASE_PRODUCTS] = 'true' if values[USE_DATABASE_PRODUCTS] else 'false'
    settings, saved_to_database = save_site_settings(values)
    product_cache.clear()
    return {'settings': _settings_response(settings), 'saved_to_database': saved_to_database}


@router.get("/featured")
def admin_get_featured(user: CurrentUser = Depends(require_admin)):
    return load_featured_content()


@router.put("/featured")
def admin_update_featured(body: FeaturedContent, user: CurrentUser = Depends(require_admin)):
    content = body.model_dump()
    try:
        update_setting(FEATURED_PRODUCT_CONTENT, json.dumps(content))
    except sqlite3.Error as e:
        logger.error("Error saving featured content: %s", e)
        raise HTTPException(status_code=503, detail="Database unavailable, featured content not saved")
    product_cache.clear()
    return content


@router.post("/cache/clear")
async def admin_clear_cache(user: CurrentUser = Depends(require_admin)):
    product_cache.clear()
    return {'success': True}


@router.post("/config/reload")
def admin_reload_config(user: CurrentUser = Depends(require_admin)):
    """Re-read site_config.json (cache TTL, translation endpoints, i18n, contact defaults)."""
    config.reload_config()
    product_cache.clear()
    logger.info("Site config reloaded from %s", config._CONFIG_PATH)
    return {'success': True}
