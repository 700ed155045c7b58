"""Tradução de ValidationFailedError em resposta HTTP."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from validation import ValidationFailedError

if TYPE_CHECKING:
    from fastapi import FastAPI
    from starlette.requests import Request


async def validation_failed_handler(
    _request: Request, exc: ValidationFailedError
) -> JSONResponse:
    """Responde com o payload de erro e o status carregado pela exceção."""
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


def register_exception_handlers(app: FastAPI) -> None:
    """Registra os handlers de erro de validação na aplicação."""
    app.add_exception_handler(ValidationFailedError, validation_failed_handler)
