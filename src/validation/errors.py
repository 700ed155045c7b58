"""Modelo de erro: item por campo e falha agregada.

Falhas por campo são dados (ValidationErrorItem). Apenas chamadores que
pedem comportamento estrito recebem ValidationFailedError.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from validation.clock import system_clock
from validation.kinds import ErrorCategory, ErrorCode

if TYPE_CHECKING:
    from validation.clock import Clock

DEFAULT_FAILURE_MESSAGE: Final = "Erro de validação"
UNPROCESSABLE_STATUS: Final = 422


@dataclass(frozen=True, slots=True)
class ValidationErrorItem:
    """Descritor de uma violação em um campo.

    Attributes:
        field: Nome do campo.
        message: Mensagem legível.
        value: Valor (transformado, quando houve transform) que falhou.
        code: Código estável da violação.
    """

    field: str
    message: str
    value: Any = None
    code: ErrorCode = ErrorCode.VALIDATION_FAILED

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", ErrorCode(self.code))

    @property
    def category(self) -> ErrorCategory:
        return self.code.category

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "message": self.message,
            "value": self.value,
            "code": str(self.code),
        }


class ValidationFailedError(Exception):
    """Falha agregada: carrega a lista completa de erros.

    É um objeto de dados; a camada de transporte decide como usar
    `status_code` (422 por padrão, "unprocessable").

    Args:
        message: Mensagem geral da falha.
        errors: Erros por campo.
        status_code: Severidade sugerida para o transporte.
    """

    is_operational = True

    def __init__(
        self,
        message: str = DEFAULT_FAILURE_MESSAGE,
        errors: Iterable[ValidationErrorItem] = (),
        status_code: int = UNPROCESSABLE_STATUS,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.errors: tuple[ValidationErrorItem, ...] = tuple(errors)
        self.status_code = status_code

    def to_dict(self, clock: Clock = system_clock) -> dict[str, Any]:
        """Representação para resposta de API.

        Args:
            clock: Fonte do timestamp.

        Returns:
            Dict JSON-serializável no formato de erro da API.
        """
        return {
            "status": "error",
            "message": self.message,
            "statusCode": self.status_code,
            "errors": [item.to_dict() for item in self.errors],
            "timestamp": clock().isoformat(),
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"errors={len(self.errors)}, status_code={self.status_code})"
        )
