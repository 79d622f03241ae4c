"""
Configuration loading for the FastAPI API server.

"""

import os
import json
import shutil
import secrets

# --- CONFIG & JWT SECRET (single parse of site_config.json) ---
_CONFIG_PATH = os.environ.get(
    'SITE_CONFIG_PATH',
    os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'site_config.json'),
)


def _load_and_ensure_jwt_secret(current_secret=None):
    """Load site_config.json, ensure jwt_secret exists. Returns (config_dict, secret).

    A missing config file is not created; the secret then lives for the process
    only, and a reload keeps `current_secret` so issued tokens stay valid.
    """
    try:
        with open(_CONFIG_PATH) as f:
            config = json.load(f)
    except FileNotFoundError:
        config = {'jwt_secret': current_secret or secrets.token_hex(32)}
        return config, config['jwt_secret']
    except json.JSONDecodeError:
        config = {}
    if 'jwt_secret' not in config or not config['jwt_secret']:
        config['jwt_secret'] = current_secret or secrets.token_hex(32)
        shutil.copy2(_CONFIG_PATH, f"{_CONFIG_PATH}.backup")
        with open(_CONFIG_PATH, 'w') as f:
            json.dump(config, f, indent=2)
    return config, config['jwt_secret']


_FULL_CONFIG, JWT_SECRET = _load_and_ensure_jwt_secret()
JWT_ALGORITHM = "HS256"


# --- SITE CONFIG ---
def load_site_config(config=None):
    """Load site settings, merging defaults with config."""
    defaults = {
        'cache_ttl_seconds': 300,
        'jwt_expiry_hours': 12,
        'cors_origins': [
            'http://localhost:5173',  # Vite dev server
            'http://localhost:5000',  # Same-port access
        ],
        'translation': {
            'primary_url': 'https://translate.googleapis.com/translate_a/single',
            'fallback_url': 'https://api.mymemory.translated.net/get',
            'request_delay_ms': 50,
            'timeout_seconds': 10,
        },
        'i18n': {
            'default_language': 'en',
            'geolocation_enabled': False,
            'geolocation_url': 'https://ipapi.co/{ip}/json/',
            'geolocation_memo_size': 1024,
            'indonesian_timezones': ['Asia/Jakarta', 'Asia/Makassar', 'Asia/Jayapura', 'Asia/Pontianak'],
        },
        'contact_defaults': {
            'email': 'sales@lifeaidstore.com',
            'phone': '+62 812-1975-1605',
            'whatsapp': '6281219751605',
            'instagram': 'https://instagram.com/lifeaidstore',
            'facebook': '',
        },
        'settings_fallback_path': 'site_settings.local.json',
    }
    if config is None:
        try:
            with open(_CONFIG_PATH) as f:
                config = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError):
            config = {}
    site = dict(config.get('site', {}))
    for key, value in defaults.items():
        if key not in site:
            site[key] = value
        elif isinstance(value, dict):
            merged = dict(value)
            merged.update(site[key])
            site[key] = merged
    return site


SITE_CONFIG = load_site_config(_FULL_CONFIG)


def reload_config():
    """Reload site_config.json from disk.

    Consumers read `config.SITE_CONFIG` at use time, so new values apply at once.
    """
    global _FULL_CONFIG, JWT_SECRET, SITE_CONFIG
    _FULL_CONFIG, JWT_SECRET = _load_and_ensure_jwt_secret(JWT_SECRET)
    SITE_CONFIG = load_site_config(_FULL_CONFIG)


def get_settings_fallback_path():
    """Absolute path of the local settings file used when the database is unreachable."""
    path = os.environ.get('SETTINGS_FALLBACK_PATH', SITE_CONFIG['settings_fallback_path'])
    if os.path.isabs(path):
        return path
    return os.path.join(os.path.dirname(_CONFIG_PATH), path)
