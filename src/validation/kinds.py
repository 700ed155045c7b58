"""Tipos semânticos suportados e códigos de erro de validação.

Conjuntos fechados: adicionar um tipo novo exige um checker correspondente
em validation.checkers.dispatcher (o match termina em assert_never).
"""

from __future__ import annotations

from enum import StrEnum


class ValidationKind(StrEnum):
    """Tipo semântico verificado por uma regra."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    EMAIL = "email"
    URL = "url"
    DATE = "date"
    CPF = "cpf"
    CNPJ = "cnpj"
    CEP = "cep"
    PHONE = "phone"
    ISBN = "isbn"
    UUID = "uuid"
    JSON = "json"
    BASE64 = "base64"
    PASSWORD = "password"


class ErrorCategory(StrEnum):
    """Taxonomia de falhas por campo."""

    REQUIRED_FIELD_MISSING = "required_field_missing"
    TYPE_MISMATCH = "type_mismatch"
    PATTERN_MISMATCH = "pattern_mismatch"
    ENUM_VIOLATION = "enum_violation"
    CUSTOM_RULE_VIOLATION = "custom_rule_violation"


class ErrorCode(StrEnum):
    """Código estável reportado em cada ValidationErrorItem."""

    REQUIRED = "REQUIRED"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_URL = "INVALID_URL"
    INVALID_DATE = "INVALID_DATE"
    INVALID_CPF = "INVALID_CPF"
    INVALID_CNPJ = "INVALID_CNPJ"
    INVALID_CEP = "INVALID_CEP"
    INVALID_PHONE = "INVALID_PHONE"
    INVALID_ISBN = "INVALID_ISBN"
    INVALID_UUID = "INVALID_UUID"
    INVALID_JSON = "INVALID_JSON"
    INVALID_BASE64 = "INVALID_BASE64"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    INVALID_ENUM_VALUE = "INVALID_ENUM_VALUE"
    PATTERN_MISMATCH = "PATTERN_MISMATCH"
    CUSTOM_VALIDATION_FAILED = "CUSTOM_VALIDATION_FAILED"
    VALIDATION_FAILED = "VALIDATION_FAILED"

    @property
    def category(self) -> ErrorCategory:
        """Categoria da taxonomia à qual o código pertence."""
        return _CATEGORY_BY_CODE.get(self, ErrorCategory.TYPE_MISMATCH)


_CATEGORY_BY_CODE: dict[ErrorCode, ErrorCategory] = {
    ErrorCode.REQUIRED: ErrorCategory.REQUIRED_FIELD_MISSING,
    ErrorCode.INVALID_ENUM_VALUE: ErrorCategory.ENUM_VIOLATION,
    ErrorCode.PATTERN_MISMATCH: ErrorCategory.PATTERN_MISMATCH,
    ErrorCode.CUSTOM_VALIDATION_FAILED: ErrorCategory.CUSTOM_RULE_VIOLATION,
}
