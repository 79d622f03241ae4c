"""
Admin product management.

Slugs are derived from the Indonesian title unless given explicitly, and
the numeric price is parsed from the display price. Every write clears the
product cache so the storefront picks up the change immediately.
"""

import re

from fastapi import APIRouter, Depends, HTTPException

from api.auth import CurrentUser, require_admin
from api.database import get_db
from api.models.catalog import ProductCreate, ProductUpdate
from catalog.cache import product_cache
from db.products import (
    create_product, delete_product, get_product, list_products, slug_exists, update_product,
)

router = APIRouter(prefix="/api/admin/products", tags=["admin"])

_SLUG_INVALID = re.compile(r'[^a-z0-9\s-]')
_WHITESPACE = re.compile(r'\s+')
_DASHES = re.compile(r'-+')
_NON_DIGITS = re.compile(r'\D')
# "Rp 2.200.000,00": comma decimals after dot thousands
_DECIMAL_PART = re.compile(r',\d{1,2}\s*$')


def slugify(title):
    """URL slug from a product title: 'Sling Standar (M)' -> 'sling-standar-m'."""
    slug = _SLUG_INVALID.sub('', title.lower())
    slug = _WHITESPACE.sub('-', slug.strip())
    return _DASHES.sub('-', slug).strip('-')


def parse_price(price):
    """Whole-rupiah value of a display price ('Rp 1.500.000,00' -> 1500000, no digits -> 0)."""
    whole = _DECIMAL_PART.sub('', price or '')
    digits = _NON_DIGITS.sub('', whole)
    return int(digits) if digits else 0


def _check_slug(conn, slug, exclude_id=None):
    if not slug:
        raise HTTPException(status_code=400, detail="Slug cannot be empty")
    if slug_exists(conn, slug, exclude_id):
        raise HTTPException(status_code=409, detail=f"Slug '{slug}' is already used by another product")


@router.get("")
def admin_list_products(user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        return {'products': list_products(conn)}


@router.get("/{product_id}")
def admin_get_product(product_id: int, user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        product = get_product(conn, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", status_code=201)
def admin_create_product(body: ProductCreate, user: CurrentUser = Depends(require_admin)):
    values = body.model_dump()
    values['slug'] = slugify(values['slug'] or values['title_id'])
    values['price_numeric'] = parse_price(values['price'])
    with get_db() as conn:
        _check_slug(conn, values['slug'])
        product = create_product(conn, values)
    product_cache.clear()
    return product


@router.put("/{product_id}")
def admin_update_product(product_id: int, body: ProductUpdate, user: CurrentUser = Depends(require_admin)):
    """Partial update; a new title_id regenerates the slug unless one is supplied."""
    values = body.model_dump(exclude_none=True)
    if 'slug' in values:
        values['slug'] = slugify(values['slug'])
    elif 'title_id' in values:
        values['slug'] = slugify(values['title_id'])
    if 'price' in values:
        values['price_numeric'] = parse_price(values['price'])

    with get_db() as conn:
        if not get_product(conn, product_id):
            raise HTTPException(status_code=404, detail="Product not found")
        if 'slug' in values:
            _check_slug(conn, values['slug'], exclude_id=product_id)
        product = update_product(conn, product_id, values)
    product_cache.clear()
    return product


@router.delete("/{product_id}")
def admin_delete_product(product_id: int, user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        deleted = delete_product(conn, product_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Product not found")
    product_cache.clear()
    return {'success': True}
