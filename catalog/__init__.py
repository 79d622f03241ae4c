"""
Storefront catalog: bundled fallback content, settings flag, data source
resolution and the in-memory product cache.
"""
