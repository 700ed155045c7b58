"""Sanitização recursiva de conteúdo textual.

Responsabilidades:
- Remover trechos de tag (<...>) de strings
- Aparar espaços nas pontas e colapsar sequências de espaço
- Percorrer listas, tuplas e mapeamentos preservando a estrutura

Idempotente: sanitize_value(sanitize_value(x)) == sanitize_value(x).
Independente da avaliação de regras.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from re import Pattern
from typing import Any, Final

_TAGS: Final[Pattern[str]] = re.compile(r"<[^>]*>")
_WHITESPACE: Final[Pattern[str]] = re.compile(r"\s+")


def sanitize_string(text: str) -> str:
    """Remove tags, apara e colapsa espaços.

    Exemplos:
        >>> sanitize_string("  <b>Hello</b>   world  ")
        'Hello world'
    """
    without_tags = _TAGS.sub("", text)
    return _WHITESPACE.sub(" ", without_tags).strip()


def sanitize_value(value: Any) -> Any:
    """Sanitiza recursivamente strings dentro de sequências e mapeamentos.

    Outros tipos passam inalterados.
    """
    if isinstance(value, str):
        return sanitize_string(value)
    if isinstance(value, Mapping):
        return {key: sanitize_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [sanitize_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(sanitize_value(item) for item in value)
    return value


def sanitize_payload(payload: Mapping[str, Any] | None) -> dict[str, Any]:
    """Ponto de entrada para payloads: retorna sempre um dict novo."""
    if not payload:
        return {}
    return {key: sanitize_value(item) for key, item in payload.items()}
