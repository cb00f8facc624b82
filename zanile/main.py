"""
zanile clipboard - Main FastAPI application.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from zanile.config import Settings, settings as default_settings
from zanile.database import NoteStore
from zanile.exceptions import ClipboardError, NotFound
from zanile.notes import NoteService
from zanile.routes import health, notes, pages

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def clipboard_error_handler(request: Request, exc: ClipboardError):
    """Render application errors as ``{"error": message}``."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def not_found_handler(request: Request, exc: Exception):
    """Missing notes, unknown paths and wrong methods all answer a plain 404."""
    return PlainTextResponse(NotFound.default_message, status_code=404)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return await not_found_handler(request, exc)
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)


def create_app(settings: Optional[Settings] = None, store: Optional[NoteStore] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration; defaults to the environment-derived settings
        store: Note store; defaults to one built from ``settings.redis_url``

    Returns:
        Configured FastAPI app with its NoteService on ``app.state.notes``
    """
    settings = settings or default_settings
    if store is None:
        store = NoteStore.from_url(settings.redis_url, key_prefix=settings.note_key_prefix)

    app = FastAPI(
        title="zanile clipboard",
        description="A minimalist text clipboard: paste text, get a shareable link",
        version="1.0.0",
        redirect_slashes=False,
    )
    app.state.notes = NoteService(store, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(ClipboardError, clipboard_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Order matters: /{note_id} in notes must come after the fixed paths
    app.include_router(pages.router)
    app.include_router(health.router)
    app.include_router(notes.router)

    if store.using_fallback:
        logger.warning("DATABASE: Using IN-MEMORY storage. Notes will NOT persist across restarts!")
    logger.info(f"zanile clipboard ready: {settings!r}")
    return app


setup_logging(default_settings)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "zanile.main:app",
        host="0.0.0.0",
        port=8000,
        reload=default_settings.debug,
    )
