# quotebook/api/routes.py
# JSON endpoints mirroring the index page, for live-search clients.

from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, Dict, Optional
import logging

# Local imports
from quotebook.core.config import settings
from quotebook.models.dto import ErrorResponse, LanguagesResponse, QuoteListView
from quotebook.api.deps import get_quote_service, get_translator, resolve_view_state
from quotebook.services.i18n import Translator
from quotebook.services.quote_service import QuoteService
from quotebook.services.renderer import render_quote_list

router = APIRouter()
logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
# Quote list
# ----------------------------------------------------------------------
@router.get("/quotes", response_model=QuoteListView)
async def list_quotes(
    lang: Optional[str] = None,
    q: Optional[str] = None,
    translator: Translator = Depends(get_translator),
    quote_service: QuoteService = Depends(get_quote_service),
):
    """Filtered quotes of one language, as the index page would show them."""
    view_state = resolve_view_state(lang, q, translator, quote_service)
    quotes = quote_service.search(view_state)
    return render_quote_list(quotes, view_state, translator)

# ----------------------------------------------------------------------
# Languages & translations
# ----------------------------------------------------------------------
@router.get("/languages", response_model=LanguagesResponse)
async def list_languages(
    translator: Translator = Depends(get_translator),
    quote_service: QuoteService = Depends(get_quote_service),
):
    languages = sorted(set(translator.languages()) | set(quote_service.languages()))
    return LanguagesResponse(languages=languages, default=settings.DEFAULT_LANG)


@router.get(
    "/translations/{lang}",
    responses={404: {"model": ErrorResponse}},
)
async def get_translations(
    lang: str,
    translator: Translator = Depends(get_translator),
) -> Dict[str, Any]:
    """Raw translation mapping of one language."""
    if not translator.has_language(lang):
        logger.info(f"Translations requested for unknown language: {lang}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ErrorResponse(
                error="UNKNOWN_LANGUAGE",
                detail=f"No translations available for '{lang}'.",
            ).model_dump(),
        )
    return translator.table_for(lang)
