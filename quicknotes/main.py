"""
QuickNotes Backend - FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() builds the app, its NoteStore, middleware,
       exception handlers and routes.
Who:   uvicorn (`quicknotes.main:app` or `python -m quicknotes`) and the tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────────┐ ┌────────┐  │
    │  │  Req ID  │→│   CORS   │→│ Logging  │→│  GZip  │  │
    │  └──────────┘ └──────────┘ └──────────┘ └────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌───────────────────────┐ ┌──────────────────────┐ │
    │  │ /api/notes[/{id}]     │ │ /healthz, /health    │ │
    │  └───────────────────────┘ └──────────────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ Validation→400 │ Bad body→400 │ NotFound→404  │  │
    │  └───────────────────────────────────────────────┘  │
    │                                                     │
    │  State: app.state.note_store (one NoteStore per app)│
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, Response

from quicknotes import __version__
from quicknotes.config import Settings, settings as default_settings
from quicknotes.exceptions import (
    QuickNotesError,
    ValidationError,
    InvalidRequestBodyError,
    NotFoundError,
)
from quicknotes.middleware.cors import CORSAllowListMiddleware
from quicknotes.middleware.logging import RequestLoggingMiddleware
from quicknotes.middleware.request_id import RequestIDMiddleware, request_id_var
from quicknotes.routes import health, notes
from quicknotes.store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout.
    Called once from the app lifespan (and from the CLI entry point before
    uvicorn starts).
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)

    logger.info("QuickNotes Backend %s starting up...", __version__)
    logger.info("CORS allow-list: %s", ", ".join(app_settings.cors_origins_list) or "(empty)")
    logger.info("API docs at /docs")

    yield

    # In-memory notes are discarded with the process
    logger.info(
        "QuickNotes Backend shutting down, dropping %d in-memory notes",
        len(app.state.note_store),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP responses.

    Handler hierarchy:
        ValidationError          → 400 {"error": "validation_error", ...}
        RequestValidationError   → 400 {"error": "invalid_json", ...}
        InvalidRequestBodyError  → 400 {"error": "invalid_json", ...}
        NotFoundError            → 404, empty body
        QuickNotesError (base)   → 500 generic envelope
        Exception (fallback)     → 500 generic envelope, traceback logged

    405 (known path, wrong method) and 404 (unknown path) come from the router.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        """Client sent a field out of bounds; tell them which one."""
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Malformed JSON or wrong field types; FastAPI would answer 422."""
        errors = [
            {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
            for e in exc.errors()
        ]
        return await handle_invalid_body(
            request, InvalidRequestBodyError(context={"errors": errors})
        )

    @app.exception_handler(InvalidRequestBodyError)
    async def handle_invalid_body(request: Request, exc: InvalidRequestBodyError):
        rid = request_id_var.get("")
        logger.warning("[%s] Invalid request body: %s", rid, exc.context)
        return JSONResponse(
            status_code=400,
            content={
                "error": "invalid_json",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        """Unknown note id. The body stays empty."""
        logger.debug("[%s] %s", request_id_var.get(""), exc.message)
        return Response(status_code=404)

    @app.exception_handler(QuickNotesError)
    async def handle_app_error(request: Request, exc: QuickNotesError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all. Stack trace is logged server-side only."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[NoteStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the environment-loaded ones)
        store: NoteStore to serve (defaults to a new, empty one)

    Returns:
        Fully configured FastAPI instance that owns its store.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="QuickNotes API",
        description="Create, list, fetch, update and delete short text notes.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
        # /api/notes/ is an empty id: 404, not a redirect to /api/notes
        redirect_slashes=False,
    )
    app.state.settings = app_settings
    app.state.note_store = store if store is not None else NoteStore()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → CORS → Logging → GZip → routes
    # RequestID is outermost so short-circuited preflights carry the header too
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSAllowListMiddleware,
        allow_origins=app_settings.cors_origins_list,
    )
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


# uvicorn expects `quicknotes.main:app` to be importable
app = create_app()
