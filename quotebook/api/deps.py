"""
API Dependencies

Accessors for the services loaded on startup, and view-state resolution
shared by the pages and the JSON API.
"""

from typing import Optional

from fastapi import Request

from quotebook.core.config import settings
from quotebook.models.dto import ViewState
from quotebook.services.i18n import Translator
from quotebook.services.quote_service import QuoteService
from quotebook.services.renderer import PageRenderer


def get_translator(request: Request) -> Translator:
    return request.app.state.translator


def get_quote_service(request: Request) -> QuoteService:
    return request.app.state.quote_service


def get_page_renderer(request: Request) -> PageRenderer:
    return request.app.state.page_renderer


def resolve_view_state(
    lang: Optional[str],
    q: Optional[str],
    translator: Translator,
    quote_service: QuoteService,
) -> ViewState:
    """Build the view state for one request.

    An unknown or missing language falls back to the default one. The keyword
    is truncated to MAX_QUERY_LEN.
    """
    known = set(translator.languages()) | set(quote_service.languages())
    current_lang = lang if lang in known else settings.DEFAULT_LANG
    keyword = (q or "")[: settings.MAX_QUERY_LEN]
    return ViewState(lang=current_lang, keyword=keyword)
