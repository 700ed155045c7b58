"""Funções utilitárias de validação de uso avulso.

Inclui atalhos sobre o Validator (valor único, objeto inteiro), predicados
de data com relógio injetável, checagens textuais e validadores de livro.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Mapping
from datetime import datetime
from typing import Any, Final

from validation.checkers import parse_date
from validation.clock import Clock, system_clock
from validation.engine import Validator
from validation.kinds import ValidationKind
from validation.result import ValidationResult
from validation.rules import ValidationRule
from validation.schemas import build_book_schema, derive_update_schema
from validation.schemas.schema import Schema

_ALPHA = re.compile(r"^[A-Za-zÀ-ÿ\s]+$")
_NUMERIC = re.compile(r"^[0-9]+$")
_ALPHANUMERIC = re.compile(r"^[A-Za-zÀ-ÿ0-9\s]+$")
_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")

BYTES_PER_MB: Final = 1024 * 1024


def validate_value(value: Any, kind: ValidationKind | str, **options: Any) -> bool:
    """Validação rápida de um valor isolado.

    Args:
        value: Valor a verificar.
        kind: Tipo semântico.
        **options: Demais atributos de ValidationRule (min, max, required...).

    Returns:
        True se o valor passa na regra.
    """
    rule = ValidationRule(kind=ValidationKind(kind), **options)
    return Validator({"value": value}).validate_field("value", rule).get_result().is_valid


def validate_object(data: Mapping[str, Any] | None, schema: Mapping[str, Any]) -> ValidationResult:
    """Valida um objeto inteiro contra um schema."""
    return Validator(data).validate_fields(schema).get_result()


def is_adult(birth_date: datetime | str, min_age: int = 18, *, clock: Clock = system_clock) -> bool:
    """True se a idade completa em `clock()` é >= min_age; datas inválidas → False."""
    birth = parse_date(birth_date)
    if birth is None:
        return False

    today = clock()
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age >= min_age


def is_future_date(value: datetime | str, *, clock: Clock = system_clock) -> bool:
    moment = parse_date(value)
    return moment is not None and moment > clock()


def is_past_date(value: datetime | str, *, clock: Clock = system_clock) -> bool:
    moment = parse_date(value)
    return moment is not None and moment < clock()


def is_alpha(text: str) -> bool:
    """Apenas letras (inclui acentuadas) e espaços."""
    return bool(_ALPHA.match(text))


def is_numeric(text: str) -> bool:
    return bool(_NUMERIC.match(text))


def is_alphanumeric(text: str) -> bool:
    return bool(_ALPHANUMERIC.match(text))


def validate_file_size(file_size: int, max_size_mb: float) -> bool:
    return file_size <= max_size_mb * BYTES_PER_MB


def validate_file_extension(filename: str, allowed_extensions: Collection[str]) -> bool:
    """Extensão (após o último ponto, minúscula) pertence à lista permitida."""
    extension = filename.rsplit(".", 1)[-1].lower() if filename else ""
    return extension in allowed_extensions


def is_hex_color(color: str) -> bool:
    """#RGB ou #RRGGBB."""
    return bool(_HEX_COLOR.match(color))


def is_empty(value: Any) -> bool:
    """None, string só com espaços, coleção ou mapeamento vazios."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


# --- Livros ---


def validate_book(data: Mapping[str, Any], *, schema: Schema | None = None) -> ValidationResult:
    """Valida dados completos de um livro."""
    return validate_object(data, schema if schema is not None else build_book_schema())


def validate_book_update(
    data: Mapping[str, Any],
    *,
    schema: Schema | None = None,
) -> ValidationResult:
    """Valida atualização parcial: só campos presentes, nenhum obrigatório."""
    base = schema if schema is not None else build_book_schema()
    return validate_object(data, derive_update_schema(base, data))


def validate_isbn(isbn: str) -> bool:
    return validate_value(isbn, ValidationKind.ISBN, required=True)


def validate_publication_year(year: Any, *, clock: Clock = system_clock) -> bool:
    """Ano entre 0 e o ano atual do relógio."""
    return validate_value(year, ValidationKind.NUMBER, min=0, max=clock().year)


def validate_availability(
    available: bool,
    return_date: datetime | str | None = None,
    *,
    clock: Clock = system_clock,
) -> bool:
    """Livro disponível para empréstimo.

    Indisponível → False. Com data de devolução, ela precisa estar no passado.
    """
    if not available:
        return False
    if return_date is not None:
        return is_past_date(return_date, clock=clock)
    return True
