"""
Visitor language detection.

Order of precedence:
1. Saved preference (preferred-language cookie)
2. Indonesian timezone reported by the browser
3. Browser language starting with "id"
4. IP geolocation (optional, one lookup per client address)
5. Configured default language (English unless set)
"""

import asyncio
import logging
from collections import OrderedDict
from typing import Optional

import httpx

from api import config
from i18n import default_language, is_supported

logger = logging.getLogger(__name__)


def browser_language(accept_language):
    """Primary language tag of an Accept-Language header, lowercased ('' if absent)."""
    if not accept_language:
        return ''
    first = accept_language.split(',')[0]
    return first.split(';')[0].strip().lower()


def detect_language(preferred=None, accept_language=None):
    """Synchronous detection used for the initial render (no timezone or network)."""
    if preferred and is_supported(preferred):
        return preferred
    if browser_language(accept_language).startswith('id'):
        return 'id'
    return default_language()


class GeoLocator:
    """IP-to-country lookup with a bounded per-address memo.

    Concurrent lookups for the same address share one request; failures are
    remembered as None, so a memoized address is not queried again. The memo
    keeps the `max_entries` most recently used addresses.
    """

    def __init__(self, url_template=None, client: Optional[httpx.AsyncClient] = None, timeout=5,
                 max_entries=None):
        self._url_template = url_template
        self._client = client
        self.timeout = timeout
        self._max_entries = max_entries
        self._results = OrderedDict()

    @property
    def url_template(self):
        return self._url_template or config.SITE_CONFIG['i18n']['geolocation_url']

    @property
    def max_entries(self):
        if self._max_entries is not None:
            return self._max_entries
        return config.SITE_CONFIG['i18n']['geolocation_memo_size']

    async def _lookup(self, ip):
        url = self.url_template.format(ip=ip)
        try:
            if self._client is not None:
                response = await self._client.get(url, headers={'Accept': 'application/json'})
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url, headers={'Accept': 'application/json'})
            if response.status_code != 200:
                return None
            return response.json().get('country_code')
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.info("Geolocation detection failed, using default: %s", e)
            return None

    async def country_code(self, ip):
        if not ip:
            return None
        pending = self._results.get(ip)
        if pending is None:
            pending = asyncio.ensure_future(self._lookup(ip))
            self._results[ip] = pending
            while len(self._results) > max(self.max_entries, 1):
                self._results.popitem(last=False)
        else:
            self._results.move_to_end(ip)
        return await pending

    @property
    def memo_size(self):
        return len(self._results)

    def clear(self):
        self._results.clear()


_geolocator = None


def get_geolocator():
    global _geolocator
    if _geolocator is None:
        _geolocator = GeoLocator()
    return _geolocator


async def detect_country(preferred=None, timezone=None, accept_language=None,
                         client_ip=None, geolocator=None, geolocation_enabled=None):
    """Full detection including timezone and (optionally) IP geolocation.

    Returns:
        A supported language code
    """
    if preferred and is_supported(preferred):
        return preferred

    i18n_config = config.SITE_CONFIG['i18n']
    if timezone and timezone in i18n_config['indonesian_timezones']:
        return 'id'

    if browser_language(accept_language).startswith('id'):
        return 'id'

    if geolocation_enabled is None:
        geolocation_enabled = i18n_config['geolocation_enabled']
    if geolocation_enabled and client_ip:
        locator = geolocator or get_geolocator()
        if await locator.country_code(client_ip) == 'ID':
            return 'id'

    return default_language()
