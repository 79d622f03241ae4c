"""
In-memory product cache with prefetch.

Product pages read through this cache so a product that was already loaded
(or prefetched at startup) is served without touching the database. Entries
expire after `cache_ttl_seconds` (5 minutes by default).
"""

import asyncio
import logging
import time

from api import config
from api.database import run_sync
from catalog import fallback, source
from catalog.settings import is_using_database_products

logger = logging.getLogger(__name__)

_ALL_PRODUCTS = 'all'


class CatalogSource:
    """Where cache misses are resolved: the database catalog or the bundled fallback."""

    def is_using_database_products(self):
        return is_using_database_products()

    def fetch_public_products(self):
        return source.fetch_public_products()

    def fetch_product_by_slug(self, slug):
        return source.fetch_product_by_slug(slug)

    def get_static_product(self, slug):
        return fallback.get_static_product(slug)

    def static_products(self):
        return fallback.static_products()


class CacheEntry:
    """Cached value and the clock reading when it was stored."""
    __slots__ = ('data', 'timestamp')

    def __init__(self, data, timestamp):
        self.data = data
        self.timestamp = timestamp


class ProductCache:
    """Time-boxed product list/detail cache.

    At most one prefetch runs at a time; concurrent callers await the
    prefetch already in flight.
    """

    def __init__(self, ttl_seconds=None, clock=time.monotonic, catalog_source=None):
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._source = catalog_source or CatalogSource()
        self._lists = {}
        self._details = {}
        self._prefetch_task = None

    @property
    def ttl_seconds(self):
        """Fixed TTL if one was given, else the current `cache_ttl_seconds` setting."""
        if self._ttl_seconds is not None:
            return self._ttl_seconds
        return config.SITE_CONFIG['cache_ttl_seconds']

    def _is_valid(self, entry):
        if entry is None:
            return False
        return (self._clock() - entry.timestamp) < self.ttl_seconds

    # --- Raw cache access ---

    def get_cached_products(self):
        """Cached product list, or None if absent or expired."""
        entry = self._lists.get(_ALL_PRODUCTS)
        if self._is_valid(entry):
            logger.debug("Using cached product list")
            return entry.data
        return None

    def set_cached_products(self, products):
        self._lists[_ALL_PRODUCTS] = CacheEntry(products, self._clock())
        logger.debug("Cached product list: %d items", len(products))

    def get_cached_product_detail(self, slug):
        """Cached product for slug, or None if absent, expired or a stored miss."""
        entry = self._details.get(slug)
        if self._is_valid(entry):
            logger.debug("Using cached product detail for: %s", slug)
            return entry.data
        return None

    def set_cached_product_detail(self, slug, product):
        self._details[slug] = CacheEntry(product, self._clock())

    def _store_products(self, products):
        self.set_cached_products(products)
        for product in products:
            self.set_cached_product_detail(product['slug'], product)

    def clear(self):
        """Drop every entry (after catalog or settings edits)."""
        self._lists.clear()
        self._details.clear()
        logger.info("Product cache cleared")

    @property
    def is_prefetching(self):
        return self._prefetch_task is not None and not self._prefetch_task.done()

    # --- Prefetch ---

    async def prefetch(self):
        """Eagerly populate the cache, joining a prefetch already in flight."""
        task = self._prefetch_task
        if task is not None:
            await task
            return

        if self.get_cached_products() is not None:
            return

        task = asyncio.ensure_future(self._prefetch())
        self._prefetch_task = task
        try:
            await task
        finally:
            if self._prefetch_task is task:
                self._prefetch_task = None

    async def _prefetch(self):
        logger.info("Starting product prefetch")
        try:
            use_database = await run_sync(self._source.is_using_database_products)
            if use_database:
                products = await run_sync(self._source.fetch_public_products)
                if products:
                    self._store_products(products)
            else:
                for product in self._source.static_products():
                    self.set_cached_product_detail(product['slug'], product)
        except Exception:
            logger.exception("Prefetch error")

    # --- Read-through fetches ---

    async def fetch_product(self, slug):
        """Product detail with cache support.

        Returns:
            Tuple of (product or None, from_cache)
        """
        cached = self.get_cached_product_detail(slug)
        if cached:
            return cached, True

        try:
            if await run_sync(self._source.is_using_database_products):
                product = await run_sync(self._source.fetch_product_by_slug, slug)
                if product:
                    self.set_cached_product_detail(slug, product)
                    return product, False

            static_product = self._source.get_static_product(slug)
            if static_product:
                self.set_cached_product_detail(slug, static_product)
                return static_product, False

            return None, False
        except Exception:
            logger.exception("Product fetch error for %s", slug)
            return self._source.get_static_product(slug), False

    async def fetch_accessories(self):
        """Database product list with cache support; [] when not in database mode.

        Returns:
            Tuple of (products, from_cache)
        """
        cached = self.get_cached_products()
        if cached:
            return cached, True

        try:
            if await run_sync(self._source.is_using_database_products):
                products = await run_sync(self._source.fetch_public_products)
                if products:
                    self._store_products(products)
                    return products, False
            return [], False
        except Exception:
            logger.exception("Accessories fetch error")
            return [], False

    async def fetch_products(self):
        """Storefront product list: database products, else the bundled catalog."""
        products, from_cache = await self.fetch_accessories()
        if products:
            return products, from_cache
        return self._source.static_products(), False


product_cache = ProductCache()
