"""Entrypoint da aplicação Valida Biblioteca.

Expõe a aplicação ASGI (FastAPI) com o adaptador de validação.

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request

from api.routes import create_api_router
from api.validation import register_exception_handlers
from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida settings no startup."""
    logger.info("app_starting", extra={"component": "app"})
    validate_runtime_settings()
    yield
    logger.info("app_shutting_down", extra={"component": "app"})


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Define correlation_id da requisição (header ou UUID novo) e o devolve."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    initialize_app()

    fastapi_app = FastAPI(
        title="Valida Biblioteca",
        description="Validação e sanitização de payloads orientadas a schema",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.middleware("http")(correlation_middleware)
    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"component": "app"})
    return fastapi_app


app = create_app()
