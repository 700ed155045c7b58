"""Resultado imutável de uma validação."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from validation.errors import ValidationErrorItem


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Veredito, erros e dados sanitizados de uma validação.

    `is_valid` é derivado de `errors`, então nunca diverge deles.
    `sanitized_data` contém todos os campos da entrada, transformados
    quando a regra tinha transform, independentemente da validade.
    """

    errors: tuple[ValidationErrorItem, ...] = ()
    sanitized_data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))
        object.__setattr__(
            self, "sanitized_data", MappingProxyType(dict(self.sanitized_data))
        )

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def errors_for(self, field_name: str) -> tuple[ValidationErrorItem, ...]:
        """Erros de um campo específico."""
        return tuple(item for item in self.errors if item.field == field_name)

    def to_dict(self) -> dict[str, Any]:
        """Formato de saída: isValid, errors, sanitizedData."""
        return {
            "isValid": self.is_valid,
            "errors": [item.to_dict() for item in self.errors],
            "sanitizedData": dict(self.sanitized_data),
        }

    @classmethod
    def from_items(
        cls,
        errors: Iterable[ValidationErrorItem],
        sanitized_data: Mapping[str, Any],
    ) -> ValidationResult:
        return cls(errors=tuple(errors), sanitized_data=sanitized_data)
