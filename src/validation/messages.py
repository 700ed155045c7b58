"""Mensagens padrão e códigos por etapa de verificação."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final

from validation.kinds import ErrorCode, ValidationKind

# Código e template da falha de tipo (etapa 4)
TYPE_FAILURES: Final[dict[ValidationKind, tuple[ErrorCode, str]]] = {
    ValidationKind.STRING: (ErrorCode.VALIDATION_FAILED, "{field} deve ser uma string válida"),
    ValidationKind.NUMBER: (ErrorCode.VALIDATION_FAILED, "{field} deve ser um número válido"),
    ValidationKind.BOOLEAN: (ErrorCode.VALIDATION_FAILED, "{field} deve ser verdadeiro ou falso"),
    ValidationKind.EMAIL: (ErrorCode.INVALID_EMAIL, "{field} deve ser um email válido"),
    ValidationKind.URL: (ErrorCode.INVALID_URL, "{field} deve ser uma URL válida"),
    ValidationKind.DATE: (ErrorCode.INVALID_DATE, "{field} deve ser uma data válida"),
    ValidationKind.CPF: (ErrorCode.INVALID_CPF, "{field} deve ser um CPF válido"),
    ValidationKind.CNPJ: (ErrorCode.INVALID_CNPJ, "{field} deve ser um CNPJ válido"),
    ValidationKind.CEP: (ErrorCode.INVALID_CEP, "{field} deve ser um CEP válido"),
    ValidationKind.PHONE: (ErrorCode.INVALID_PHONE, "{field} deve ser um telefone válido"),
    ValidationKind.ISBN: (ErrorCode.INVALID_ISBN, "{field} deve ser um ISBN válido"),
    ValidationKind.UUID: (ErrorCode.INVALID_UUID, "{field} deve ser um UUID válido"),
    ValidationKind.JSON: (ErrorCode.INVALID_JSON, "{field} deve ser um JSON válido"),
    ValidationKind.BASE64: (
        ErrorCode.INVALID_BASE64,
        "{field} deve ser uma string base64 válida",
    ),
    ValidationKind.PASSWORD: (ErrorCode.WEAK_PASSWORD, "{field} deve ser uma senha forte"),
}

REQUIRED_MESSAGE: Final = "{field} é obrigatório"
GENERIC_MESSAGE: Final = "Validação falhou para {field}"
CUSTOM_MESSAGE: Final = "{field} não passou na validação customizada"
ENUM_MESSAGE: Final = "{field} deve ser um dos valores: {allowed}"
PATTERN_MESSAGE: Final = "{field} não corresponde ao padrão esperado"


def format_allowed(values: Iterable[Any]) -> str:
    """Lista de valores aceitos, separados por vírgula."""
    return ", ".join(str(value) for value in values)
