"""
Snippr - FastAPI Application Factory
======================================

What:  Builds the FastAPI application and owns process bootstrap.
How:   create_app() constructs the SnippetStore, attaches it to app.state,
       registers middleware, exception handlers and routers, and returns the
       app. run() starts uvicorn with the configured host and port.
Who:   uvicorn (`uvicorn snippr.main:app`), the `snippr` console script, tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────┐ ┌──────┐ │
    │  │ Req ID   │→│  Logging        │→│ GZip │→│ CORS │ │
    │  └──────────┘ └─────────────────┘ └──────┘ └──────┘ │
    │                                                     │
    │  Routes:                                            │
    │  ┌─────────────────────────────┐ ┌────────────────┐ │
    │  │ GET/POST /snippets[/{id}]   │ │ GET /health    │ │
    │  └─────────────────────────────┘ └────────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ ValidationError→400 │ NotFound→404 │ else→500 │  │
    │  └───────────────────────────────────────────────┘  │
    │                                                     │
    │  app.state.store: SnippetStore (one per app)        │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from snippr import __version__
from snippr.config import settings
from snippr.exceptions import NotFoundError, SnipprError, ValidationError
from snippr.middleware.logging import RequestLoggingMiddleware
from snippr.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from snippr.routes import health, snippets
from snippr.store import SnippetStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (container runtimes collect it)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # snippr.access already records every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report the store and listen address.
    Shutdown: log only. The store is in memory and goes away with the process.
    """
    setup_logging()
    store: SnippetStore = app.state.store
    logger.info("Snippr %s starting up with %d snippets", __version__, store.count())
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Snippr shutting down (%d snippets discarded)", store.count())


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or request_id_var.get("")


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: Optional[dict] = None,
) -> JSONResponse:
    # The Exception fallback runs outside RequestIDMiddleware, so the header is set here too
    rid = _request_id(request)
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "details": details,
            "request_id": rid,
        },
        headers={REQUEST_ID_HEADER: rid} if rid else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP responses.

    Handler hierarchy:
        ValidationError          → 400 validation_error
        RequestValidationError   → 400 validation_error (bad JSON, wrong types, bad path id)
        NotFoundError            → 404 not_found
        SnipprError (base)       → 500 internal_server_error
        Exception (fallback)     → 500 internal_server_error

    500 responses never include exception details; those go to the log.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", _request_id(request), exc.message)
        return _error_response(request, 400, "validation_error", exc.message, exc.context)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in exc.errors()
        ]
        logger.warning("[%s] Malformed request: %s", _request_id(request), errors)
        return _error_response(
            request,
            400,
            "validation_error",
            "The request could not be parsed. Check the JSON body and parameters.",
            {"errors": errors},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(request, 404, "not_found", exc.message, exc.context)

    @app.exception_handler(SnipprError)
    async def handle_snippr_error(request: Request, exc: SnipprError):
        logger.error("[%s] Application error: %s | Context: %s", _request_id(request), exc.message, exc.context)
        return _error_response(
            request, 500, "internal_server_error", "An internal error occurred. Please try again later."
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("[%s] Unexpected error: %s", _request_id(request), str(exc), exc_info=exc)
        return _error_response(
            request, 500, "internal_server_error", "An unexpected error occurred. Please try again later."
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[SnippetStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Store to serve. Defaults to a fresh SnippetStore holding the
               eight seed snippets. Tests pass their own instance.

    Returns:
        Configured FastAPI instance with the store at app.state.store and
        its creation time at app.state.started_at.
    """
    app = FastAPI(
        title="Snippr API",
        description="List, fetch and create code snippets held in memory.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else SnippetStore()
    app.state.started_at = time.time()

    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(snippets.router)
    app.include_router(health.router)

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "message": "Snippr API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "snippets": "/snippets",
        }

    return app


app = create_app()


def run() -> None:
    """Entry point of the `snippr` console script."""
    import uvicorn

    uvicorn.run(
        "snippr.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
