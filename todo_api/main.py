"""
Todo API — FastAPI Application Factory
=======================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, exception handling, route
       mounting and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn todo_api.main:app) or by the `todo-api`
       console script (run()).

Application Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │                      FastAPI App                        │
    │                                                         │
    │  Middleware Chain:                                      │
    │  ┌──────────────┐ ┌─────────────────┐                   │
    │  │   Req ID     │→│    Logging      │                   │
    │  └──────────────┘ └─────────────────┘                   │
    │                                                         │
    │  Routes:                                                │
    │  ┌──────────────────────┐ ┌───────────────────────────┐ │
    │  │ /todos, /todos/{id}  │ │ /explorer/swagger.json    │ │
    │  │                      │ │ /explorer/{path}          │ │
    │  └──────────────────────┘ └───────────────────────────┘ │
    │                                                         │
    │  Exception Handlers:                                    │
    │  ┌───────────────────────────────────────────────────┐  │
    │  │ Validation→400 │ NotFound→404 │ Internal→500      │  │
    │  │ unmatched method/path → 404, empty body           │  │
    │  └───────────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────────┘

Per-application state (app.state):
    todo_store       InMemoryTodoStore shared by every request
    swagger_config   SwaggerUIConfig, built once and never mutated
    openapi_document Generated lazily by the explorer on first request
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api import __version__
from todo_api.config import Settings, settings
from todo_api.exceptions import TodoApiError, ValidationError
from todo_api.middleware.logging import RequestLoggingMiddleware
from todo_api.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from todo_api.routes import explorer, todos
from todo_api.schemas.error import HttpError
from todo_api.schemas.explorer import SwaggerUIConfig
from todo_api.store import InMemoryTodoStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Called once from the lifespan, before anything else logs.
    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,  # Override any existing logging config
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: configure logging and announce the explorer URL. Shutdown: log it."""
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("%s %s starting up", app.title, app.version)
    logger.info(
        "API explorer: http://%s:%d%s/",
        app_settings.backend_host,
        app_settings.backend_port,
        app_settings.explorer_prefix,
    )

    yield

    logger.info("%s shutting down", app.title)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI's error list into "loc: msg; loc: msg"."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Validation failed"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        RequestValidationError  → 400 HttpError (body or path failed the schema)
        TodoApiError (family)   → its own status, HttpError body
        404/405 from routing    → 404, empty body (catch-all)
        Exception (fallback)    → 500 HttpError, details logged only
    """

    @app.exception_handler(TodoApiError)
    async def handle_app_error(request: Request, exc: TodoApiError):
        rid = request_id_var.get("")
        if exc.status >= 500:
            logger.error("[%s] %s | Context: %s", rid, exc, exc.context)
        else:
            logger.warning("[%s] %s", rid, exc)
        return exc.to_http_error().to_response()

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        error = ValidationError(message=describe_validation_errors(exc))
        logger.warning("[%s] %s", request_id_var.get(""), error)
        return error.to_http_error().to_response()

    @app.exception_handler(StarletteHTTPException)
    async def handle_unmatched_route(request: Request, exc: StarletteHTTPException):
        """Unregistered path, or registered path with an unregistered method."""
        if exc.status_code in (404, 405):
            return Response(status_code=404)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Stack trace is logged server-side only."""
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        response = HttpError(msg="An unexpected error occurred").to_response()
        # Runs outside RequestIDMiddleware, which never sees this response
        if rid:
            response.headers[REQUEST_ID_HEADER] = rid
        return response


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Every call returns an independent application with its own empty store,
    which is what the test suite relies on.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.app_name,
        version=__version__,
        # The explorer replaces FastAPI's built-in documentation routes
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.todo_store = InMemoryTodoStore()
    app.state.swagger_config = SwaggerUIConfig.for_prefix(
        app_settings.explorer_prefix, title=app_settings.app_name
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(todos.router)
    app.include_router(explorer.router, prefix=app_settings.explorer_prefix)

    return app


def run() -> None:
    """Console entry point: serve the application with uvicorn."""
    uvicorn.run(
        app,
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# uvicorn expects `todo_api.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    run()
