"""Composição explícita: valida o argumento antes de encaminhar a operação.

Uso:
    create_book = with_validation(book_schema, repository.create, name="create_book")
    create_book(payload)  # levanta ValidationFailedError se inválido
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from validation.engine import Validator
from validation.errors import DEFAULT_FAILURE_MESSAGE

T = TypeVar("T")


def with_validation(
    schema: Mapping[str, Any],
    operation: Callable[..., T],
    *,
    name: str | None = None,
) -> Callable[..., T]:
    """Envolve `operation` validando o primeiro argumento posicional.

    Em caso de sucesso, a operação recebe os dados sanitizados no lugar
    do payload original.

    Args:
        schema: Schema aplicado ao primeiro argumento.
        operation: Operação a proteger.
        name: Nome usado na mensagem de erro (padrão: __name__ da operação).

    Returns:
        Callable com a mesma assinatura de `operation`.

    Raises:
        ValidationFailedError: (na chamada) se o payload for inválido.
        TypeError: (na chamada) se nenhum argumento posicional for passado.
    """
    label = name or getattr(operation, "__name__", "operation")

    @functools.wraps(operation)
    def _wrapper(*args: Any, **kwargs: Any) -> T:
        if not args:
            raise TypeError(f"{label} requer o payload como primeiro argumento")

        validator = Validator(args[0]).validate_fields(schema)
        validator.throw_if_invalid(f"{DEFAULT_FAILURE_MESSAGE} em {label}")
        sanitized = dict(validator.get_result().sanitized_data)
        return operation(sanitized, *args[1:], **kwargs)

    return _wrapper
