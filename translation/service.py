"""
Indonesian/English machine translation for the admin content editor.

Uses the public Google Translate GTX endpoint first and MyMemory as the
fallback. Batches are translated sequentially with a short fixed delay
between items to stay polite to the free endpoints.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx

from api import config

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ('id', 'en')


class TranslationError(Exception):
    """Raised when no translation provider returned a usable result."""


def _check_language(lang):
    if lang not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language '{lang}' (expected one of {SUPPORTED_LANGUAGES})")


class TranslationService:
    """Translate text between Indonesian and English.

    Args:
        client: Optional shared httpx.AsyncClient (tests pass one with a mock transport).
            Without one, each call opens a short-lived client.
        primary_url / fallback_url: Provider endpoints (defaults from site config)
        request_delay: Seconds to wait after each successfully translated batch item
        timeout: Per-request timeout in seconds
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, primary_url=None,
                 fallback_url=None, request_delay=None, timeout=None):
        self._client = client
        self._primary_url = primary_url
        self._fallback_url = fallback_url
        self._request_delay = request_delay
        self._timeout = timeout

    # Unset options follow the current site config

    @property
    def primary_url(self):
        return self._primary_url or config.SITE_CONFIG['translation']['primary_url']

    @property
    def fallback_url(self):
        return self._fallback_url or config.SITE_CONFIG['translation']['fallback_url']

    @property
    def request_delay(self):
        if self._request_delay is not None:
            return self._request_delay
        return config.SITE_CONFIG['translation']['request_delay_ms'] / 1000.0

    @property
    def timeout(self):
        return self._timeout or config.SITE_CONFIG['translation']['timeout_seconds']

    @asynccontextmanager
    async def _session(self):
        if self._client is not None:
            yield self._client
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                yield client

    # --- Providers ---

    async def _translate_with_google(self, client, text, source, target):
        params = {
            'client': 'gtx',
            'sl': 'id' if source == 'id' else 'en',
            'tl': 'id' if target == 'id' else 'en',
            'dt': 't',
            'q': text,
        }
        response = await client.get(self.primary_url, params=params)
        if response.status_code != 200:
            raise TranslationError(f"Google Translate failed with HTTP {response.status_code}")
        data = response.json()
        # [[["translated", "source", ...], ...], ...]
        if data and isinstance(data, list) and data[0]:
            return ''.join(segment[0] for segment in data[0] if segment and segment[0])
        raise TranslationError("Invalid Google response")

    async def _translate_with_mymemory(self, client, text, source, target):
        params = {'q': text, 'langpair': f'{source}|{target}'}
        response = await client.get(self.fallback_url, params=params)
        if response.status_code != 200:
            raise TranslationError(f"MyMemory failed with HTTP {response.status_code}")
        data = response.json()
        if data and isinstance(data, dict) and data.get('responseData'):
            translated = data['responseData'].get('translatedText')
            if translated is not None:
                return translated
        raise TranslationError("Invalid MyMemory response")

    async def _translate(self, client, text, source, target):
        if not text.strip():
            return ''
        if source == target:
            return text

        try:
            return await self._translate_with_google(client, text, source, target)
        except (httpx.HTTPError, ValueError, TypeError, IndexError, TranslationError) as e:
            logger.warning("Google Translate failed, trying MyMemory: %s", e)

        try:
            return await self._translate_with_mymemory(client, text, source, target)
        except (httpx.HTTPError, ValueError, TypeError, TranslationError) as e:
            logger.error("All translation services failed: %s", e)
            raise TranslationError(str(e)) from e

    # --- Public API ---

    async def translate_text(self, text, source, target):
        """Translate a single text.

        Blank text gives '' and same-language requests return the text unchanged.

        Raises:
            ValueError: unsupported language code
            TranslationError: every provider failed
        """
        _check_language(source)
        _check_language(target)
        async with self._session() as client:
            return await self._translate(client, text, source, target)

    async def translate_multiple(self, texts, source, target):
        """Translate a dict of texts one after another.

        Empty values are copied as-is; an item that fails keeps its original text.
        """
        _check_language(source)
        _check_language(target)
        results = {}
        async with self._session() as client:
            for key, value in texts.items():
                if not value:
                    results[key] = value
                    continue
                try:
                    results[key] = await self._translate(client, value, source, target)
                except TranslationError:
                    results[key] = value
                    continue
                if self.request_delay:
                    await asyncio.sleep(self.request_delay)
        return results

    async def check_available(self):
        """Whether at least one provider answers."""
        try:
            await self.translate_text('test', 'en', 'id')
            return True
        except TranslationError:
            return False

    async def auto_translate_fields(self, fields, source, target, overwrite=False):
        """Fill the `<name>_<target>` fields of a bilingual record from `<name>_<source>`.

        Only fields with a source value are translated; existing target values are
        kept unless overwrite is set.

        Returns:
            Tuple of (updated fields dict, list of filled target keys)
        """
        _check_language(source)
        _check_language(target)
        if source == target:
            return dict(fields), []

        suffix = f'_{source}'
        pending = {}
        for key, value in fields.items():
            if not key.endswith(suffix) or not isinstance(value, str) or not value.strip():
                continue
            target_key = key[:-len(suffix)] + f'_{target}'
            if overwrite or not fields.get(target_key):
                pending[target_key] = value

        translated = await self.translate_multiple(pending, source, target)
        updated = dict(fields)
        updated.update(translated)
        return updated, list(translated)


_service = None


def get_translation_service():
    """Process-wide service instance (FastAPI dependency)."""
    global _service
    if _service is None:
        _service = TranslationService()
    return _service
