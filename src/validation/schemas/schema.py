"""Schema nomeado e imutável: campo → regras ordenadas."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from validation.rules import RuleSpec, ValidationRule, as_rule_tuple


@dataclass(frozen=True, slots=True, eq=False)
class Schema(Mapping[str, tuple[ValidationRule, ...]]):
    """Mapeamento somente leitura de campo para tupla de regras.

    Regra única é normalizada para tupla de um elemento.

    Attributes:
        name: Identificador do schema no registry.
        fields: Campo → regras (normalizado em MappingProxyType).
    """

    name: str
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("name do schema não pode ser vazio")
        normalized = {key: as_rule_tuple(rules) for key, rules in self.fields.items()}
        object.__setattr__(self, "fields", MappingProxyType(normalized))

    def __getitem__(self, key: str) -> tuple[ValidationRule, ...]:
        return self.fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @classmethod
    def of(cls, name: str, **fields: RuleSpec) -> Schema:
        """Atalho: Schema.of("nome", campo=regra, ...)."""
        return cls(name=name, fields=fields)


def derive_update_schema(base: Schema, payload: Mapping[str, Any]) -> Schema:
    """Schema de atualização parcial derivado de `base`.

    Apenas campos presentes no payload e no schema base são mantidos;
    todas as regras ficam com required=False. Campos ausentes do payload
    não são avaliados.
    """
    fields = {
        key: tuple(rule.as_optional() for rule in rules)
        for key, rules in base.items()
        if key in payload
    }
    return Schema(name=f"{base.name}_update", fields=fields)
