"""
Internationalization (i18n) module for the LifeAid storefront.

Provides lightweight JSON-based translation support with:
- Static per-section string tables for Indonesian (id) and English (en)
- Language detection from a saved preference, timezone, browser locale
  and (optionally) IP geolocation
- Cookie-based persistence for user preference
"""

import json
import logging
import os

from api import config

logger = logging.getLogger(__name__)

# Supported languages
SUPPORTED_LANGUAGES = ['id', 'en']
FALLBACK_LANGUAGE = 'en'

# Cookie holding the visitor's explicit choice
PREFERENCE_COOKIE = 'preferred-language'

# Module directory
_MODULE_DIR = os.path.dirname(os.path.abspath(__file__))
_TRANSLATIONS_DIR = os.path.join(_MODULE_DIR, 'translations')

# Cached translations (loaded once per language)
_translations_cache = {}


def is_supported(lang):
    return lang in SUPPORTED_LANGUAGES


def default_language():
    """Configured `i18n.default_language`, or English when unset or unsupported."""
    lang = config.SITE_CONFIG['i18n'].get('default_language')
    return lang if is_supported(lang) else FALLBACK_LANGUAGE


def load_translations(lang):
    """Load translation file for the specified language.

    Args:
        lang: Language code ('id' or 'en')

    Returns:
        dict: Translation dictionary, or empty dict if file not found
    """
    if lang in _translations_cache:
        return _translations_cache[lang]

    filepath = os.path.join(_TRANSLATIONS_DIR, f'{lang}.json')
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            translations = json.load(f)
            _translations_cache[lang] = translations
            return translations
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not load translations for '%s': %s", lang, e)
        _translations_cache[lang] = {}
        return {}


def get_nested_value(d, key_path):
    """Get a value from a nested dictionary using dot notation.

    Args:
        d: Dictionary to search
        key_path: Dot-separated key path (e.g., 'hero.title')

    Returns:
        Value at the key path, or None if not found
    """
    keys = key_path.split('.')
    value = d
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return None
    return value


def translate(key, lang=None, **kwargs):
    """Get a translated string by key.

    Args:
        key: Translation key using dot notation (e.g., 'nav.products')
        lang: Language code
        **kwargs: Variables for interpolation (e.g., name='Sinta')

    Returns:
        str: Translated string with variables interpolated, or the key if not found
    """
    default = default_language()
    lang = lang or default
    translations = load_translations(lang)
    value = get_nested_value(translations, key)

    if value is None:
        # Fallback to the default language if this one lacks the key
        if lang != default:
            value = get_nested_value(load_translations(default), key)

        if value is None:
            return key

    # Handle interpolation (e.g., "Hello, {name}!")
    if kwargs and isinstance(value, str):
        try:
            return value.format(**kwargs)
        except KeyError:
            return value

    return value


def get_section(lang, keys=None):
    """Get a subset of a language's dictionary for client-side rendering.

    Args:
        lang: Language code
        keys: List of top-level keys to include, or None for all

    Returns:
        dict: Translation dictionary
    """
    translations = load_translations(lang)
    if keys is None:
        return translations
    return {k: translations[k] for k in keys if k in translations}
