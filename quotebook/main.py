# Application entry point: startup loading, pages, static assets and API wiring.

from fastapi import FastAPI, Request, status, Depends
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from contextlib import asynccontextmanager
from typing import Optional
import logging
import uuid

# Local imports
from quotebook.core.config import settings
from quotebook.logging import configure_logging
from quotebook.middleware.logging import LoggingMiddleware
from quotebook.api.routes import router as api_router
from quotebook.api.deps import get_page_renderer, get_quote_service, get_translator, resolve_view_state
from quotebook.services.fragment_service import FragmentService
from quotebook.services.i18n import Translator
from quotebook.services.quote_service import QuoteService
from quotebook.services.renderer import PageRenderer, render_quote_list

configure_logging()
logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Static sources are read once, in order. Each loader logs its own
    # failures and hands back empty state, so startup always completes.
    logger.info(f"Application startup: v{settings.VERSION}")
    translator = Translator.from_file(settings.TRANSLATIONS_PATH)
    quote_service = QuoteService.from_file(settings.QUOTES_PATH)
    fragments = FragmentService.from_directory(settings.FRAGMENTS_DIR)

    app.state.translator = translator
    app.state.quote_service = quote_service
    app.state.fragments = fragments
    app.state.page_renderer = PageRenderer(templates.env, translator, fragments)
    logger.info(
        f"Loaded {quote_service.total()} quotes in {len(quote_service.languages())} languages, "
        f"translations for {len(translator.languages())} languages."
    )

    yield

    logger.info("Application shutdown.")

# --- FastAPI Application Initialization ---
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.BRIEF_DESCRIPTION,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
)

app.add_middleware(LoggingMiddleware)

# --- Static Files ---
app.mount("/static", StaticFiles(directory=str(settings.STATIC_DIR), check_dir=False), name="static")

# --- API Routes ---
app.include_router(api_router, prefix="/api")

# --- Pages ---
@app.get("/", response_class=HTMLResponse)
async def index(
    lang: Optional[str] = None,
    q: Optional[str] = None,
    translator: Translator = Depends(get_translator),
    quote_service: QuoteService = Depends(get_quote_service),
    page_renderer: PageRenderer = Depends(get_page_renderer),
):
    """Searchable quote list for the selected language."""
    view_state = resolve_view_state(lang, q, translator, quote_service)
    view = render_quote_list(quote_service.search(view_state), view_state, translator)
    return HTMLResponse(page_renderer.render_index(view, view_state))


@app.get("/about", response_class=HTMLResponse)
async def about(
    lang: Optional[str] = None,
    translator: Translator = Depends(get_translator),
    quote_service: QuoteService = Depends(get_quote_service),
    page_renderer: PageRenderer = Depends(get_page_renderer),
):
    view_state = resolve_view_state(lang, None, translator, quote_service)
    return HTMLResponse(page_renderer.render_about(view_state))

# --- Health Check Endpoint ---
@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check(
    translator: Translator = Depends(get_translator),
    quote_service: QuoteService = Depends(get_quote_service),
):
    return {
        "status": "ok",
        "quotes": quote_service.total(),
        "languages": sorted(set(translator.languages()) | set(quote_service.languages())),
    }

# --- Global Exception Handler (for unhandled errors) ---
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    error_id = str(uuid.uuid4())
    logger.error(f"Unhandled exception (ID: {error_id}): {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": {
                "error": "INTERNAL_SERVER_ERROR",
                "detail": "An unexpected error occurred. Please report this error ID.",
                "error_id": error_id
            }
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("quotebook.main:app", host="0.0.0.0", port=8000, reload=settings.ENV == "development")
