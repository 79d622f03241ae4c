"""
Public catalog router: products, testimonials, featured block, videos, contact details.

Product reads go through the shared product cache; every endpoint answers
with bundled fallback content when the database is unavailable.
"""

from fastapi import APIRouter, HTTPException, Query

from api.database import run_sync
from catalog.cache import product_cache
from catalog.settings import public_contact_settings
from catalog.source import (
    fetch_featured_content, fetch_public_testimonials, fetch_public_videos,
    localize_featured_content, localize_product,
)

router = APIRouter(prefix="/api", tags=["catalog"])

_LANG = Query('en', pattern="^(id|en)$")


@router.get("/products")
async def list_products(lang: str = _LANG, accessories_only: bool = False):
    """Storefront product list.

    accessories_only=true returns only database products ([] in static mode);
    otherwise the bundled catalog stands in when the database has none.
    """
    if accessories_only:
        products, from_cache = await product_cache.fetch_accessories()
    else:
        products, from_cache = await product_cache.fetch_products()
    return {
        'products': [localize_product(p, lang) for p in products],
        'from_cache': from_cache,
    }


@router.post("/products/prefetch")
async def prefetch_products():
    """Warm the product cache (joins a prefetch already running)."""
    await product_cache.prefetch()
    return {'success': True, 'cached': product_cache.get_cached_products() is not None}


@router.get("/products/{slug}")
async def get_product(slug: str, lang: str = _LANG):
    product, from_cache = await product_cache.fetch_product(slug)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return {'product': localize_product(product, lang), 'from_cache': from_cache}


@router.get("/testimonials")
async def list_testimonials(lang: str = _LANG):
    testimonials = await run_sync(fetch_public_testimonials, lang)
    return {'testimonials': testimonials}


@router.get("/featured")
async def get_featured(lang: str = _LANG):
    """Homepage featured-product block."""
    content = await run_sync(fetch_featured_content)
    return {'featured': localize_featured_content(content, lang)}


@router.get("/videos")
async def list_videos(lang: str = _LANG):
    videos = await run_sync(fetch_public_videos, lang)
    return {'videos': videos}


@router.get("/site-settings")
async def get_site_settings():
    """Contact details and marketplace links for the header and footer."""
    return await run_sync(public_contact_settings)
