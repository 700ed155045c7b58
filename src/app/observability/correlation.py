"""correlation_id por requisição, injetado em todo log.

ContextVar mantém o valor isolado por requisição (thread/async-safe).
O middleware HTTP em app.app define e restaura o valor.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "x-correlation-id"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """correlation_id atual ou string vazia fora de requisição."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id (gera UUID v4 se ausente).

    Returns:
        Token para reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
