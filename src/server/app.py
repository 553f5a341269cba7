"""FastAPI application bootstrap."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from src.todo import ConnectionPool, TodoAppError, TodoRepository

from .config import Config
from .routes import register_todo_routes

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Map application errors to opaque plain-text responses."""

    @app.exception_handler(TodoAppError)
    async def handle_app_error(request: Request, exc: TodoAppError) -> PlainTextResponse:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.detail, exc_info=exc
        )
        return PlainTextResponse("Internal Server Error", status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_bad_request(
        request: Request, exc: RequestValidationError
    ) -> PlainTextResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return PlainTextResponse("Bad Request", status_code=400)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The connection pool lives for the lifetime of the application: it is
    opened, and the schema ensured, on startup and closed on shutdown.
    """
    if config is None:
        config = Config.from_yaml()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db = config.database
        pool = ConnectionPool(db.path, size=db.pool_size, timeout=db.pool_timeout)
        try:
            repository = TodoRepository(pool)
            repository.ensure_schema()
            app.state.pool = pool
            app.state.repository = repository
            yield
        finally:
            pool.close()

    app = FastAPI(title="Todo", version="1.0.0", lifespan=lifespan)
    app.state.config = config

    register_error_handlers(app)
    register_todo_routes(app)

    return app
