"""
Admin content editor: machine translation between id/en and markdown preview.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.auth import CurrentUser, require_admin
from api.models.content import AutoTranslateRequest, PreviewRequest, TranslateRequest
from markup import parse_markdown, parse_preview_markdown
from translation import TranslationError, TranslationService, get_translation_service

router = APIRouter(prefix="/api/admin/editor", tags=["admin"])


@router.post("/translate")
async def editor_translate(
    body: TranslateRequest,
    user: CurrentUser = Depends(require_admin),
    service: TranslationService = Depends(get_translation_service),
):
    """Translate a single text, or a dict of texts (failed items keep their original)."""
    if body.texts is not None:
        translations = await service.translate_multiple(body.texts, body.source, body.target)
        return {'translations': translations}
    if body.text is None:
        raise HTTPException(status_code=400, detail="Provide 'text' or 'texts'")
    try:
        translated = await service.translate_text(body.text, body.source, body.target)
    except TranslationError as e:
        raise HTTPException(status_code=502, detail=f"Translation failed: {e}")
    return {'translated': translated}


@router.post("/auto-translate")
async def editor_auto_translate(
    body: AutoTranslateRequest,
    user: CurrentUser = Depends(require_admin),
    service: TranslationService = Depends(get_translation_service),
):
    """Fill the target-language fields of a bilingual form from the source-language ones."""
    if body.source == body.target:
        raise HTTPException(status_code=400, detail="Source and target languages must differ")
    fields, translated = await service.auto_translate_fields(
        body.fields, body.source, body.target, overwrite=body.overwrite,
    )
    return {'fields': fields, 'translated': translated}


@router.get("/translate/status")
async def editor_translate_status(
    user: CurrentUser = Depends(require_admin),
    service: TranslationService = Depends(get_translation_service),
):
    return {'available': await service.check_available()}


@router.post("/preview")
async def editor_preview(body: PreviewRequest, user: CurrentUser = Depends(require_admin)):
    """Render markdown the way the editor preview (or the storefront) shows it."""
    if body.flavor == 'storefront':
        return {'html': parse_markdown(body.markdown)}
    return {'html': parse_preview_markdown(body.markdown)}
