"""Machine translation for bilingual (id/en) content."""

from translation.service import (
    SUPPORTED_LANGUAGES, TranslationError, TranslationService, get_translation_service,
)
