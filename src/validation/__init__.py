"""Motor de validação e sanitização orientado a schema.

Re-exporta a API pública do pacote.

Uso:
    from validation import Validator, ValidationRule, ValidationKind

    rule = ValidationRule(kind=ValidationKind.CPF, required=True)
    result = Validator({"cpf": "529.982.247-25"}).validate_field("cpf", rule).get_result()
    result.is_valid  # True
"""

from validation.clock import Clock, fixed_clock, system_clock
from validation.composition import with_validation
from validation.engine import SCHEMA_FIELD, Validator, is_empty_value
from validation.errors import (
    DEFAULT_FAILURE_MESSAGE,
    UNPROCESSABLE_STATUS,
    ValidationErrorItem,
    ValidationFailedError,
)
from validation.kinds import ErrorCategory, ErrorCode, ValidationKind
from validation.result import ValidationResult
from validation.rules import ValidationRule
from validation.sanitizer import sanitize_payload, sanitize_string, sanitize_value
from validation.schemas import (
    Schema,
    SchemaRegistry,
    create_default_registry,
    date_range,
    derive_update_schema,
    get_schema_registry,
)

__all__ = [
    "DEFAULT_FAILURE_MESSAGE",
    "SCHEMA_FIELD",
    "UNPROCESSABLE_STATUS",
    "Clock",
    "ErrorCategory",
    "ErrorCode",
    "Schema",
    "SchemaRegistry",
    "ValidationErrorItem",
    "ValidationFailedError",
    "ValidationKind",
    "ValidationResult",
    "ValidationRule",
    "Validator",
    "create_default_registry",
    "date_range",
    "derive_update_schema",
    "fixed_clock",
    "get_schema_registry",
    "is_empty_value",
    "sanitize_payload",
    "sanitize_string",
    "sanitize_value",
    "system_clock",
    "with_validation",
]
