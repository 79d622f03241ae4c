"""
i18n router: translation dictionaries, language detection and the saved preference.
"""

from typing import Optional

from fastapi import APIRouter, Cookie, Header, HTTPException, Request, Response

from api.models.content import LanguagePreferenceRequest
from i18n import (
    PREFERENCE_COOKIE, SUPPORTED_LANGUAGES,
    default_language, get_section, is_supported,
)
from i18n.detection import detect_country, detect_language

router = APIRouter(tags=["i18n"])

_PREFERENCE_MAX_AGE = 365 * 24 * 60 * 60  # one year


@router.get("/api/i18n/languages")
async def get_languages():
    """List supported languages."""
    return {'languages': SUPPORTED_LANGUAGES, 'default': default_language()}


@router.get("/api/i18n/detect")
async def detect(
    request: Request,
    timezone: Optional[str] = None,
    full: bool = True,
    accept_language: Optional[str] = Header(default=None),
    preferred_language: Optional[str] = Cookie(default=None, alias=PREFERENCE_COOKIE),
):
    """Detect the visitor's language.

    With full=false only the saved preference and browser language are used
    (no timezone or geolocation), matching the initial server render.
    """
    if not full:
        language = detect_language(preferred_language, accept_language)
    else:
        client_ip = request.client.host if request.client else None
        language = await detect_country(
            preferred=preferred_language,
            timezone=timezone,
            accept_language=accept_language,
            client_ip=client_ip,
        )
    return {'language': language, 'saved': bool(preferred_language and is_supported(preferred_language))}


@router.post("/api/i18n/preference")
async def set_preference(body: LanguagePreferenceRequest, response: Response):
    """Persist the visitor's explicit language choice in a cookie."""
    response.set_cookie(
        PREFERENCE_COOKIE, body.language,
        max_age=_PREFERENCE_MAX_AGE, samesite='lax', path='/',
    )
    return {'language': body.language}


@router.get("/api/i18n/{lang}")
async def get_translations(lang: str, keys: Optional[str] = None):
    """Serve translation JSON for the specified language.

    keys: comma-separated top-level sections to return (e.g. "nav,footer"); all when omitted.
    """
    if not is_supported(lang):
        raise HTTPException(status_code=404, detail=f"Language '{lang}' not supported")
    sections = [k.strip() for k in keys.split(',') if k.strip()] if keys else None
    return get_section(lang, sections)
