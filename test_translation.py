"""
Tests for the translation service (Google GTX first, MyMemory fallback).

Outbound HTTP is served by httpx.MockTransport; nothing leaves the process.

Run: python3 -m pytest test_translation.py -v
"""

import asyncio
import os
import sys
import unittest
from unittest.mock import AsyncMock, patch

import httpx

# Ensure project root is on sys.path
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)

from translation import TranslationError, TranslationService

GOOGLE_URL = 'https://google.test/translate_a/single'
MYMEMORY_URL = 'https://mymemory.test/get'


class FakeProviders:
    """Mock transport handler answering like both providers.

    google_status / mymemory_status control failures; texts listed in
    `untranslatable` fail on both providers.
    """

    def __init__(self, google_status=200, mymemory_status=200, untranslatable=()):
        self.google_status = google_status
        self.mymemory_status = mymemory_status
        self.untranslatable = set(untranslatable)
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        params = request.url.params
        text = params.get('q')
        if request.url.host == 'google.test':
            if self.google_status != 200 or text in self.untranslatable:
                return httpx.Response(self.google_status if self.google_status != 200 else 503)
            # Long texts come back split into sentence segments
            return httpx.Response(200, json=[[[f"G[{text}]", text, None, None], [" ok", "", None, None]], None, params['sl']])
        if self.mymemory_status != 200 or text in self.untranslatable:
            return httpx.Response(self.mymemory_status if self.mymemory_status != 200 else 500)
        return httpx.Response(200, json={'responseData': {'translatedText': f"M[{text}]"}, 'responseStatus': 200})

    def hosts(self):
        return [r.url.host for r in self.requests]


def _run(providers, coro_factory, **service_kwargs):
    async def main():
        async with httpx.AsyncClient(transport=httpx.MockTransport(providers)) as client:
            service = TranslationService(
                client=client, primary_url=GOOGLE_URL, fallback_url=MYMEMORY_URL,
                request_delay=service_kwargs.pop('request_delay', 0), **service_kwargs,
            )
            return await coro_factory(service)
    return asyncio.run(main())


class TestTranslateText(unittest.TestCase):

    def test_google_first(self):
        providers = FakeProviders()
        result = _run(providers, lambda s: s.translate_text('Halo', 'id', 'en'))
        self.assertEqual(result, 'G[Halo] ok')
        self.assertEqual(providers.hosts(), ['google.test'])
        params = providers.requests[0].url.params
        self.assertEqual((params['client'], params['sl'], params['tl'], params['dt']), ('gtx', 'id', 'en', 't'))

    def test_falls_back_to_mymemory(self):
        providers = FakeProviders(google_status=429)
        result = _run(providers, lambda s: s.translate_text('Halo', 'id', 'en'))
        self.assertEqual(result, 'M[Halo]')
        self.assertEqual(providers.hosts(), ['google.test', 'mymemory.test'])
        self.assertEqual(providers.requests[1].url.params['langpair'], 'id|en')

    def test_both_fail(self):
        providers = FakeProviders(google_status=500, mymemory_status=500)
        with self.assertRaises(TranslationError):
            _run(providers, lambda s: s.translate_text('Halo', 'id', 'en'))

    def test_invalid_google_payload_falls_back(self):
        def handler(request):
            if request.url.host == 'google.test':
                return httpx.Response(200, json=[])
            return httpx.Response(200, json={'responseData': {'translatedText': 'fallback'}})
        result = _run(handler, lambda s: s.translate_text('Halo', 'id', 'en'))
        self.assertEqual(result, 'fallback')

    def test_blank_and_same_language_skip_requests(self):
        providers = FakeProviders()
        self.assertEqual(_run(providers, lambda s: s.translate_text('   ', 'id', 'en')), '')
        self.assertEqual(_run(providers, lambda s: s.translate_text('Sama', 'en', 'en')), 'Sama')
        self.assertEqual(providers.requests, [])

    def test_unsupported_language(self):
        with self.assertRaises(ValueError):
            _run(FakeProviders(), lambda s: s.translate_text('Hallo', 'de', 'en'))

    def test_check_available(self):
        self.assertTrue(_run(FakeProviders(), lambda s: s.check_available()))
        down = FakeProviders(google_status=500, mymemory_status=500)
        self.assertFalse(_run(down, lambda s: s.check_available()))


class TestTranslateMultiple(unittest.TestCase):

    def test_sequential_with_failures_kept(self):
        providers = FakeProviders(untranslatable={'Rusak'})
        texts = {'title': 'Judul', 'empty': '', 'broken': 'Rusak', 'desc': 'Deskripsi'}
        result = _run(providers, lambda s: s.translate_multiple(texts, 'id', 'en'))
        self.assertEqual(result, {
            'title': 'G[Judul] ok',
            'empty': '',
            'broken': 'Rusak',
            'desc': 'G[Deskripsi] ok',
        })
        # Items are sent in order, one after another
        sent = [r.url.params['q'] for r in providers.requests if r.url.host == 'google.test']
        self.assertEqual(sent, ['Judul', 'Rusak', 'Deskripsi'])

    def test_delay_after_each_success(self):
        providers = FakeProviders(untranslatable={'Rusak'})
        texts = {'a': 'Satu', 'b': 'Rusak', 'c': 'Tiga'}
        with patch('translation.service.asyncio.sleep', new=AsyncMock()) as sleep:
            _run(providers, lambda s: s.translate_multiple(texts, 'id', 'en'), request_delay=0.05)
        self.assertEqual(sleep.await_count, 2)
        sleep.assert_awaited_with(0.05)

    def test_default_delay_is_fifty_ms(self):
        self.assertAlmostEqual(TranslationService().request_delay, 0.05)


class TestAutoTranslateFields(unittest.TestCase):

    FIELDS = {
        'title_id': 'Alat Angkat',
        'title_en': '',
        'description_id': 'Kuat',
        'description_en': 'Existing',
        'condition_id': '',
        'price': 'Rp 1.000',
    }

    def test_fills_only_empty_targets(self):
        updated, filled = _run(FakeProviders(), lambda s: s.auto_translate_fields(self.FIELDS, 'id', 'en'))
        self.assertEqual(filled, ['title_en'])
        self.assertEqual(updated['title_en'], 'G[Alat Angkat] ok')
        self.assertEqual(updated['description_en'], 'Existing')
        self.assertEqual(updated['price'], 'Rp 1.000')
        self.assertNotIn('condition_en', updated)

    def test_overwrite(self):
        updated, filled = _run(
            FakeProviders(), lambda s: s.auto_translate_fields(self.FIELDS, 'id', 'en', overwrite=True)
        )
        self.assertEqual(sorted(filled), ['description_en', 'title_en'])
        self.assertEqual(updated['description_en'], 'G[Kuat] ok')

    def test_english_to_indonesian(self):
        fields = {'title_en': 'Lift', 'title_id': ''}
        updated, _ = _run(FakeProviders(), lambda s: s.auto_translate_fields(fields, 'en', 'id'))
        self.assertEqual(updated['title_id'], 'G[Lift] ok')

    def test_same_language_is_noop(self):
        updated, filled = _run(FakeProviders(), lambda s: s.auto_translate_fields(self.FIELDS, 'id', 'id'))
        self.assertEqual((updated, filled), (self.FIELDS, []))


if __name__ == '__main__':
    unittest.main()
