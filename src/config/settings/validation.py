"""Settings do motor de validação e da camada de entrada."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class ValidationSettings:
    """Configurações de validação.

    Attributes:
        sanitize_input: Aplica o sanitizer ao payload antes das regras
        failure_status_code: Status sugerido para falhas agregadas
    """

    sanitize_input: bool = True
    failure_status_code: int = 422

    def validate(self) -> list[str]:
        """Valida configurações de validação.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not 400 <= self.failure_status_code <= 499:
            errors.append(
                f"VALIDATION_FAILURE_STATUS deve ser 4xx, recebido: {self.failure_status_code}"
            )

        return errors


def _load_validation_from_env() -> ValidationSettings:
    """Carrega ValidationSettings de variáveis de ambiente."""
    return ValidationSettings(
        sanitize_input=os.getenv("SANITIZE_INPUT", "true").lower() in ("true", "1", "yes"),
        failure_status_code=int(os.getenv("VALIDATION_FAILURE_STATUS", "422")),
    )


@lru_cache(maxsize=1)
def get_validation_settings() -> ValidationSettings:
    """Retorna instância cacheada de ValidationSettings."""
    return _load_validation_from_env()
