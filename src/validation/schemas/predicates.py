"""Predicados sobre o payload inteiro (invariantes entre campos)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from validation.checkers import parse_date
from validation.engine import DataPredicate
from validation.errors import ValidationErrorItem
from validation.kinds import ErrorCode


def date_range(
    start_field: str = "dataInicio",
    end_field: str = "dataFim",
    message: str = "Data de início deve ser menor que data de fim",
) -> DataPredicate:
    """Cria predicado que exige início <= fim quando ambas as datas são válidas.

    Datas ausentes ou inválidas não são reportadas aqui; o formato é
    responsabilidade das regras por campo.

    Args:
        start_field: Campo da data inicial.
        end_field: Campo da data final.
        message: Mensagem do erro reportado em `start_field`.

    Returns:
        Predicado para Validator.custom.
    """

    def _predicate(data: Mapping[str, Any]) -> ValidationErrorItem | None:
        start = parse_date(data.get(start_field))
        end = parse_date(data.get(end_field))
        if start is None or end is None or start <= end:
            return None
        return ValidationErrorItem(
            field=start_field,
            message=message,
            value=data.get(start_field),
            code=ErrorCode.CUSTOM_VALIDATION_FAILED,
        )

    return _predicate
