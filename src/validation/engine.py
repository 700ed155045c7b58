"""Motor de validação orientado a regras.

Ordem de avaliação de uma regra:
1. required
2. vazio e opcional → sucesso (aplica default, se houver)
3. transform (registrado em sanitized_data)
4. checker do tipo
5. predicado custom
6. enum
7. pattern

A primeira etapa que falhar (4–7) define código e mensagem; as seguintes
não são avaliadas. Em uma lista de regras, a primeira regra que falhar
encerra a avaliação do campo.

Uso:
    from validation import Validator

    result = Validator(payload).validate_fields(schema).get_result()
    if not result.is_valid:
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Final

from validation.checkers import check_value
from validation.errors import DEFAULT_FAILURE_MESSAGE, ValidationErrorItem, ValidationFailedError
from validation.kinds import ErrorCode
from validation.messages import (
    CUSTOM_MESSAGE,
    ENUM_MESSAGE,
    GENERIC_MESSAGE,
    PATTERN_MESSAGE,
    REQUIRED_MESSAGE,
    TYPE_FAILURES,
    format_allowed,
)
from validation.result import ValidationResult
from validation.rules import RuleSpec, ValidationRule, as_rule_tuple

logger = logging.getLogger(__name__)

# Campo usado em erros de predicados sobre o payload inteiro
SCHEMA_FIELD: Final = "_schema"

DataPredicate = Callable[[Mapping[str, Any]], ValidationErrorItem | None]


def is_empty_value(value: Any) -> bool:
    """Ausente, None ou string vazia."""
    return value is None or (isinstance(value, str) and value == "")


class Validator:
    """Avalia regras contra um payload e acumula erros e dados sanitizados.

    Cada instância serve a uma única validação: possui cópia própria da
    entrada, lista de erros e mapa sanitizado. Nada é compartilhado.

    Args:
        data: Mapeamento campo → valor bruto (None equivale a vazio).
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})
        self._sanitized: dict[str, Any] = dict(self._data)
        self._errors: list[ValidationErrorItem] = []

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    def validate_field(self, field_name: str, rules: RuleSpec) -> Validator:
        """Avalia as regras do campo em ordem, parando na primeira falha."""
        value = self._data.get(field_name)

        for rule in as_rule_tuple(rules):
            error = self._check_rule(field_name, value, rule)
            if error is not None:
                self._errors.append(error)
                break

        return self

    def validate_fields(self, schema: Mapping[str, RuleSpec]) -> Validator:
        """Aplica validate_field a cada entrada do schema."""
        for field_name, rules in schema.items():
            self.validate_field(field_name, rules)

        logger.debug(
            "validation_completed",
            extra={
                "fields_checked": len(schema),
                "error_count": len(self._errors),
            },
        )
        return self

    def custom(self, predicate: DataPredicate) -> Validator:
        """Aplica predicado sobre o payload inteiro (invariantes entre campos).

        O predicado retorna um ValidationErrorItem ou None. Exceções e
        qualquer outro retorno são convertidos em CUSTOM_VALIDATION_FAILED
        no campo `_schema`.
        """
        try:
            error = predicate(self._data)
        except Exception as exc:
            logger.warning(
                "custom_predicate_failed",
                extra={"field": SCHEMA_FIELD, "error_type": type(exc).__name__},
            )
            error = self._schema_error()
        else:
            if error is not None and not isinstance(error, ValidationErrorItem):
                logger.warning(
                    "custom_predicate_invalid_return",
                    extra={"field": SCHEMA_FIELD, "return_type": type(error).__name__},
                )
                error = self._schema_error()

        if error is not None:
            self._errors.append(error)
        return self

    def get_result(self) -> ValidationResult:
        """Snapshot imutável do estado atual."""
        return ValidationResult(errors=tuple(self._errors), sanitized_data=self._sanitized)

    def throw_if_invalid(self, message: str = DEFAULT_FAILURE_MESSAGE) -> None:
        """Levanta ValidationFailedError com todos os erros, se houver algum."""
        result = self.get_result()
        if not result.is_valid:
            raise ValidationFailedError(message, result.errors)

    def _check_rule(
        self,
        field_name: str,
        value: Any,
        rule: ValidationRule,
    ) -> ValidationErrorItem | None:
        if is_empty_value(value):
            if rule.required:
                return self._error(
                    field_name, rule, REQUIRED_MESSAGE, value, ErrorCode.REQUIRED
                )
            if rule.has_default:
                self._sanitized[field_name] = rule.default
            return None

        transformed = value
        if rule.transform is not None:
            try:
                transformed = rule.transform(value)
            except Exception as exc:
                logger.warning(
                    "transform_failed",
                    extra={"field": field_name, "error_type": type(exc).__name__},
                )
                return self._error(
                    field_name, rule, GENERIC_MESSAGE, value, ErrorCode.VALIDATION_FAILED
                )
            self._sanitized[field_name] = transformed

        if not check_value(transformed, rule):
            code, template = TYPE_FAILURES[rule.kind]
            return self._error(field_name, rule, template, transformed, code)

        custom_ok = rule.custom is None or self._run_custom(field_name, rule.custom, transformed)
        if not custom_ok:
            return self._error(
                field_name,
                rule,
                CUSTOM_MESSAGE,
                transformed,
                ErrorCode.CUSTOM_VALIDATION_FAILED,
            )

        if rule.enum is not None and transformed not in rule.enum:
            return self._error(
                field_name,
                rule,
                ENUM_MESSAGE,
                transformed,
                ErrorCode.INVALID_ENUM_VALUE,
                allowed=format_allowed(rule.enum),
            )

        if rule.pattern is not None and rule.pattern.search(str(transformed)) is None:
            return self._error(
                field_name, rule, PATTERN_MESSAGE, transformed, ErrorCode.PATTERN_MISMATCH
            )

        return None

    @staticmethod
    def _run_custom(field_name: str, predicate: Callable[[Any], Any], value: Any) -> bool:
        try:
            return bool(predicate(value))
        except Exception as exc:
            logger.warning(
                "custom_predicate_failed",
                extra={"field": field_name, "error_type": type(exc).__name__},
            )
            return False

    @staticmethod
    def _schema_error() -> ValidationErrorItem:
        return ValidationErrorItem(
            field=SCHEMA_FIELD,
            message=CUSTOM_MESSAGE.format(field=SCHEMA_FIELD),
            value=None,
            code=ErrorCode.CUSTOM_VALIDATION_FAILED,
        )

    @staticmethod
    def _error(
        field_name: str,
        rule: ValidationRule,
        template: str,
        value: Any,
        code: ErrorCode,
        **params: Any,
    ) -> ValidationErrorItem:
        message = rule.message or template.format(field=field_name, **params)
        return ValidationErrorItem(field=field_name, message=message, value=value, code=code)
