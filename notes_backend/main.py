"""
Simple Notes Backend: FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own empty NotesStore.
Who:   uvicorn (`uvicorn notes_backend.main:app`), `python -m notes_backend`,
       and the test suite (one create_app() per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌─────────────┐   │
    │  │ Req ID   │→│  Logging        │→│  CORS       │   │
    │  └──────────┘ └─────────────────┘ └─────────────┘   │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────────────────┐ ┌────────────────┐  │
    │  │ /notes, /notes/{id}  CRUD  │ │ /  and /health │  │
    │  └────────────────────────────┘ └────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ ValidationError→400 │ NotFound→404 │ *→500   │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  app.state.notes_store → NotesStore (in memory)     │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notes_backend import __version__
from notes_backend.config import settings
from notes_backend.exceptions import NotesError, NotFoundError, ValidationError
from notes_backend.middleware.logging import RequestLoggingMiddleware
from notes_backend.middleware.request_id import RequestIDMiddleware, request_id_var
from notes_backend.routes import health, notes
from notes_backend.services.note_service import NoteService
from notes_backend.store.notes_store import NotesStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the entire application.

    Called once during app startup, before anything else logs.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, level or settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,  # Override any existing logging config
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, log where the API and docs are served.
    Shutdown: log how many notes are discarded (nothing is persisted).
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("%s %s starting up...", settings.app_name, __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    store: NotesStore = app.state.notes_store
    logger.info("Shutting down; discarding %d in-memory notes.", store.count())


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(
    error: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "error": error,
        "message": message,
        "request_id": request_id if request_id is not None else request_id_var.get(""),
    }
    if details:
        body["details"] = details
    return body


def _invalid_fields(exc: RequestValidationError) -> List[str]:
    """Field names from FastAPI's error locations, e.g. ("body", "title") → "title"."""
    fields = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        if loc:
            fields.append(".".join(loc))
    return fields


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request (empty title after trimming)
        RequestValidationError  → 400 Bad Request (missing title, bad JSON, wrong type)
        NotFoundError           → 404 Not Found
        NotesError (base)       → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Responses never include stack traces; those are logged server-side.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", exc.message, exc.context),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        fields = _invalid_fields(exc)
        message = "Invalid request body"
        if fields:
            message = f"Invalid or missing field(s): {', '.join(fields)}"
        logger.warning("[%s] Request validation error: %s", request_id_var.get(""), message)
        details: Dict[str, Any] = {"fields": fields}
        if len(fields) == 1:
            details["field"] = fields[0]
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", message, details),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content=_error_body("not_found", exc.message, exc.context),
        )

    @app.exception_handler(NotesError)
    async def handle_notes_error(request: Request, exc: NotesError):
        logger.error("[%s] Application error: %s | Context: %s",
                     request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("internal_server_error", exc.message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs in ServerErrorMiddleware, outside RequestIDMiddleware, after the
        # ContextVar has been reset; request.state shares the scope and keeps the id.
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "internal_server_error",
                "An unexpected error occurred. Please try again or contact support.",
                request_id=rid,
            ),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[NotesStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: NotesStore to serve. Defaults to a new, empty store; tests pass
               one built with a controllable clock.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.notes_store = store if store is not None else NotesStore()
    app.state.note_service = NoteService(app.state.notes_store)

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → routes

    # Credentials are allowed, so "*" is expressed as a regex: the browser
    # rejects a literal "*" Access-Control-Allow-Origin on credentialed calls.
    if settings.cors_allow_any_origin:
        cors_origins = {"allow_origin_regex": ".*"}
    else:
        cors_origins = {"allow_origins": settings.cors_origins_list}
    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
        **cors_origins,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(notes.router)

    return app


# uvicorn expects `notes_backend.main:app` to be importable
app = create_app()
