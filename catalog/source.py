"""
Storefront data source resolution.

The `use_database_products` flag decides whether catalog content comes from
the database tables or from the bundled fallback data. Read failures are
logged and resolved to the fallback, never raised to page handlers.
"""

import json
import logging
import sqlite3

from api.database import get_db
from catalog import fallback
from catalog.settings import FEATURED_PRODUCT_CONTENT, fetch_setting, is_using_database_products
from db.products import get_active_product_by_slug, list_active_products
from db.testimonials import list_active_testimonials
from db.videos import list_active_videos
from markup import parse_markdown

logger = logging.getLogger(__name__)


def _mark_database(product):
    product['source'] = 'database'
    return product


def fetch_public_products():
    """Active database products ordered for display; [] on error."""
    try:
        with get_db() as conn:
            return [_mark_database(p) for p in list_active_products(conn)]
    except sqlite3.Error as e:
        logger.error("Error fetching public products: %s", e)
        return []


def fetch_product_by_slug(slug):
    """Active database product by slug; None when missing or on error."""
    try:
        with get_db() as conn:
            product = get_active_product_by_slug(conn, slug)
    except sqlite3.Error as e:
        logger.error("Error fetching product by slug %s: %s", slug, e)
        return None
    return _mark_database(product) if product else None


def _pick(record, field, lang):
    return record.get(f'{field}_{lang}') or ''


def localize_product(product, lang):
    """Single-language view of a product, description rendered to HTML."""
    description = _pick(product, 'description', lang)
    return {
        'id': product.get('id'),
        'slug': product['slug'],
        'title': _pick(product, 'title', lang),
        'description': description,
        'description_html': parse_markdown(description),
        'condition': _pick(product, 'condition', lang),
        'min_order': _pick(product, 'min_order', lang),
        'category': _pick(product, 'category', lang),
        'price': product.get('price', ''),
        'price_numeric': product.get('price_numeric', 0),
        'image': product.get('image_base64') or product.get('image') or '',
        'thumbnails': product.get('thumbnails_base64') or product.get('thumbnails') or [],
        'source': product.get('source', 'database'),
    }


def localize_testimonial(item, lang):
    """Display shape used by the testimonial carousel."""
    name = item.get('name') or ''
    return {
        'name': name,
        'role': _pick(item, 'role', lang),
        'rating': item.get('rating') or 5,
        'comment': _pick(item, 'comment', lang),
        'initial': name[:1].upper(),
    }


def fetch_public_testimonials(lang):
    """Localized testimonials: database rows when enabled and present, else bundled ones."""
    items = []
    if is_using_database_products():
        try:
            with get_db() as conn:
                items = list_active_testimonials(conn)
        except sqlite3.Error as e:
            logger.error("Error loading testimonials: %s", e)
            items = []
    if not items:
        items = fallback.static_testimonials()
    return [localize_testimonial(item, lang) for item in items]


def load_featured_content():
    """Stored featured-product block merged over the defaults (ignores the flag)."""
    value = fetch_setting(FEATURED_PRODUCT_CONTENT)
    if not value:
        return fallback.default_featured_content()
    try:
        stored = json.loads(value)
    except json.JSONDecodeError:
        logger.error("Error parsing featured product content")
        return fallback.default_featured_content()
    content = fallback.default_featured_content()
    if isinstance(stored, dict):
        content.update(stored)
    return content


def fetch_featured_content():
    """Homepage featured-product block; stored JSON when enabled, else defaults."""
    if not is_using_database_products():
        return fallback.default_featured_content()
    return load_featured_content()


def localize_featured_content(content, lang):
    """Collapse the `<field>_<lang>` keys of the featured block into `<field>`."""
    localized = {field: _pick(content, field, lang) for field in fallback.FEATURED_TEXT_FIELDS}
    localized['image'] = content.get('image_base64') or ''
    localized['linked_product_id'] = content.get('linked_product_id')
    return localized


def fetch_public_videos(lang):
    """Active tutorial videos, localized."""
    try:
        with get_db() as conn:
            videos = list_active_videos(conn)
    except sqlite3.Error as e:
        logger.error("Error fetching videos: %s", e)
        return []
    return [
        {
            'id': v['id'],
            'youtube_id': v['youtube_id'],
            'title': _pick(v, 'title', lang),
            'description_html': parse_markdown(_pick(v, 'description', lang)),
        }
        for v in videos
    ]
