"""Modelo declarativo de regra de validação.

Uma ValidationRule é um valor imutável: construída uma vez, reutilizada em
qualquer número de validações. A avaliação fica em validation.engine.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field, replace
from re import Pattern
from typing import Any

from validation.kinds import ValidationKind

_MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class ValidationRule:
    """Especificação de uma verificação para um campo.

    Attributes:
        kind: Tipo semântico verificado (string aceita e convertida).
        required: Falha com REQUIRED se o valor estiver ausente/vazio.
        min: Limite inferior (comprimento para string/password, valor para number).
        max: Limite superior (comprimento para string, valor para number).
        pattern: Regex (str ou compilada) que o valor transformado deve satisfazer.
        enum: Conjunto fechado de valores aceitos.
        custom: Predicado sobre o valor transformado.
        transform: Função aplicada ao valor bruto antes das verificações.
        message: Mensagem que substitui a padrão em qualquer falha da regra.
        default: Valor gravado nos dados sanitizados quando o campo opcional vem vazio.
    """

    kind: ValidationKind
    required: bool = False
    min: float | None = None
    max: float | None = None
    pattern: Pattern[str] | None = None
    enum: tuple[Any, ...] | None = None
    custom: Callable[[Any], bool] | None = None
    transform: Callable[[Any], Any] | None = None
    message: str | None = None
    default: Any = field(default=_MISSING, compare=False)

    def __post_init__(self) -> None:
        """Normaliza kind, pattern e enum; valida limites."""
        # Levanta ValueError para tags desconhecidas
        object.__setattr__(self, "kind", ValidationKind(self.kind))

        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))

        if self.enum is not None and not isinstance(self.enum, tuple):
            object.__setattr__(self, "enum", tuple(self.enum))

        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) não pode ser maior que max ({self.max})")

    @property
    def has_default(self) -> bool:
        """True se a regra declara valor padrão."""
        return self.default is not _MISSING

    def as_optional(self) -> ValidationRule:
        """Cópia da regra com required=False (usada em schemas de atualização)."""
        return replace(self, required=False)


RuleSpec = ValidationRule | Sequence[ValidationRule]


def as_rule_tuple(rules: RuleSpec | Iterable[ValidationRule]) -> tuple[ValidationRule, ...]:
    """Normaliza regra única ou sequência para tupla ordenada.

    Raises:
        TypeError: Se algum item não for ValidationRule.
    """
    if isinstance(rules, ValidationRule):
        return (rules,)

    normalized = tuple(rules)
    for item in normalized:
        if not isinstance(item, ValidationRule):
            raise TypeError(f"Esperado ValidationRule, recebido {type(item).__name__}")
    return normalized
