"""Dependências FastAPI que validam a requisição contra um schema.

Uso:
    @router.post("/livros")
    async def create_book(
        data: dict[str, Any] = Depends(validate_request("livro")),
    ) -> ...:
        ...  # data já validado e sanitizado

Os dados validados são devolvidos explicitamente; o chamador decide
onde guardá-los.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from starlette.requests import Request

from api.validation.request_merge import collect_request_data
from config.settings import get_validation_settings
from validation import (
    DEFAULT_FAILURE_MESSAGE,
    Schema,
    ValidationFailedError,
    ValidationResult,
    Validator,
    get_schema_registry,
    sanitize_payload,
)

logger = logging.getLogger(__name__)


def run_validation(
    data: Mapping[str, Any],
    schema: Mapping[str, Any],
    *,
    sanitize: bool,
) -> ValidationResult:
    """Sanitiza (opcional) e valida o payload plano."""
    payload = sanitize_payload(data) if sanitize else dict(data)
    return Validator(payload).validate_fields(schema).get_result()


def resolve_schema(schema: Schema | str) -> Schema:
    """Aceita Schema ou nome registrado no registry padrão.

    Raises:
        KeyError: Se o nome não estiver registrado.
    """
    if isinstance(schema, Schema):
        return schema
    return get_schema_registry().get(schema)


def validate_request(
    schema: Schema | str,
    *,
    sanitize: bool | None = None,
) -> Callable[[Request], Awaitable[dict[str, Any]]]:
    """Cria dependência que valida a requisição e retorna os dados sanitizados.

    Args:
        schema: Schema ou nome registrado.
        sanitize: Força (ou desliga) o sanitizer; None usa SANITIZE_INPUT.

    Returns:
        Dependência assíncrona para `Depends`.
    """
    resolved = resolve_schema(schema)

    async def _dependency(request: Request) -> dict[str, Any]:
        settings = get_validation_settings()
        data = await collect_request_data(request, settings.failure_status_code)
        should_sanitize = settings.sanitize_input if sanitize is None else sanitize
        result = run_validation(data, resolved, sanitize=should_sanitize)

        if not result.is_valid:
            logger.info(
                "request_validation_failed",
                extra={"schema": resolved.name, "error_count": len(result.errors)},
            )
            raise ValidationFailedError(
                DEFAULT_FAILURE_MESSAGE,
                result.errors,
                status_code=settings.failure_status_code,
            )
        return dict(result.sanitized_data)

    return _dependency
