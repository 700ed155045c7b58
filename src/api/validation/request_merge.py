"""Montagem do payload plano a partir das fontes da requisição.

Precedência (a fonte posterior sobrescreve a anterior):
    body < query < path
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from validation import ErrorCode, ValidationErrorItem, ValidationFailedError

if TYPE_CHECKING:
    from starlette.requests import Request

BODY_FIELD = "body"


def merge_request_sources(
    body: Mapping[str, Any] | None = None,
    query: Mapping[str, Any] | None = None,
    path: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Une body, query e path em um único mapeamento.

    Args:
        body: Campos do corpo JSON.
        query: Parâmetros de query string.
        path: Parâmetros de rota.

    Returns:
        Novo dict; em conflito de chave vence path, depois query.
    """
    merged: dict[str, Any] = {}
    for source in (body, query, path):
        if source:
            merged.update(source)
    return merged


async def read_json_object(request: Request, status_code: int) -> dict[str, Any]:
    """Lê o corpo como objeto JSON; corpo vazio equivale a {}.

    Raises:
        ValidationFailedError: Se o corpo não for JSON ou não for um objeto.
    """
    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        parsed = json.loads(raw)
    except (ValueError, RecursionError):
        parsed = None

    if not isinstance(parsed, dict):
        raise ValidationFailedError(
            "Corpo da requisição inválido",
            [
                ValidationErrorItem(
                    field=BODY_FIELD,
                    message="Corpo da requisição deve ser um objeto JSON",
                    value=None,
                    code=ErrorCode.INVALID_JSON,
                )
            ],
            status_code=status_code,
        )
    return parsed


async def collect_request_data(request: Request, status_code: int) -> dict[str, Any]:
    """Payload plano da requisição (body, query e path, nessa precedência)."""
    body = await read_json_object(request, status_code)
    return merge_request_sources(
        body,
        dict(request.query_params),
        dict(request.path_params),
    )
