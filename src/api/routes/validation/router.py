"""Endpoints de validação sob demanda contra schemas registrados.

- POST /validate/{schema_name}: retorna o ValidationResult (200 mesmo se inválido)
- POST /validate/{schema_name}/strict: rejeita payload inválido com erro agregado
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from api.validation import merge_request_sources, read_json_object, resolve_schema, run_validation
from config.settings import get_validation_settings
from validation import DEFAULT_FAILURE_MESSAGE, Schema, ValidationFailedError, ValidationResult

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found(schema_name: str) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"status": "error", "message": f"Schema desconhecido: {schema_name}"},
    )


async def _evaluate(request: Request, schema: Schema) -> ValidationResult:
    settings = get_validation_settings()
    body = await read_json_object(request, settings.failure_status_code)
    data = merge_request_sources(body, dict(request.query_params))
    return run_validation(data, schema, sanitize=settings.sanitize_input)


def _lookup(schema_name: str) -> Schema | None:
    try:
        return resolve_schema(schema_name)
    except KeyError:
        logger.info("schema_not_found", extra={"schema": schema_name})
        return None


@router.post("/validate/{schema_name}")
async def validate_payload(schema_name: str, request: Request) -> JSONResponse:
    """Valida o payload e reporta o resultado sem rejeitar."""
    schema = _lookup(schema_name)
    if schema is None:
        return _not_found(schema_name)

    result = await _evaluate(request, schema)
    content: dict[str, Any] = jsonable_encoder(result.to_dict())
    return JSONResponse(status_code=200, content=content)


@router.post("/validate/{schema_name}/strict")
async def validate_payload_strict(schema_name: str, request: Request) -> JSONResponse:
    """Valida o payload; inválido → ValidationFailedError (tratado pelo handler)."""
    schema = _lookup(schema_name)
    if schema is None:
        return _not_found(schema_name)

    result = await _evaluate(request, schema)
    if not result.is_valid:
        raise ValidationFailedError(
            DEFAULT_FAILURE_MESSAGE,
            result.errors,
            status_code=get_validation_settings().failure_status_code,
        )
    return JSONResponse(
        status_code=200,
        content=jsonable_encoder({"status": "ok", "data": dict(result.sanitized_data)}),
    )
