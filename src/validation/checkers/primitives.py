"""Checkers de tipos primitivos: string, number, boolean, date, json."""

from __future__ import annotations

import json
import math
import re
from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

_BOOLEAN_LITERALS = frozenset({"true", "false", "1", "0"})

# Literal decimal; sem "_" nem "inf"/"nan" que float() aceitaria
_NUMERIC_TEXT = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def _within_bounds(measure: float, lower: float | None, upper: float | None) -> bool:
    if lower is not None and measure < lower:
        return False
    return not (upper is not None and measure > upper)


def check_string(
    value: Any,
    min_length: float | None = None,
    max_length: float | None = None,
) -> bool:
    """Texto cujo comprimento (após trim) está em [min_length, max_length]."""
    if not isinstance(value, str):
        return False
    return _within_bounds(len(value.strip()), min_length, max_length)


def to_number(value: Any) -> float | None:
    """Converte valor para float; None quando não numérico.

    Aceita bool, int, float, Decimal e strings numéricas decimais (com
    espaços nas pontas; "Infinity" com sinal opcional). NaN é tratado
    como não numérico.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except (InvalidOperation, OverflowError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if _NUMERIC_TEXT.fullmatch(text) is None:
            return None
        number = float(text)
    else:
        return None
    return None if math.isnan(number) else number


def check_number(value: Any, minimum: float | None = None, maximum: float | None = None) -> bool:
    """Valor numérico (ou coercível) dentro de [minimum, maximum]."""
    number = to_number(value)
    if number is None:
        return False
    return _within_bounds(number, minimum, maximum)


def check_boolean(value: Any) -> bool:
    """Aceita bool, "true"/"false"/"1"/"0" e os inteiros 1/0."""
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return value in (0, 1)
    return isinstance(value, str) and value in _BOOLEAN_LITERALS


def parse_date(value: Any) -> datetime | None:
    """Interpreta valor como datetime; None quando inválido.

    Formas aceitas: datetime, date, epoch em milissegundos (int/float)
    e strings ISO-8601 (sufixo "Z" aceito). Resultados sem fuso são UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, bool):
        return None
    elif isinstance(value, (int, float)):
        try:
            if not math.isfinite(value):
                return None
            parsed = datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = f"{text[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def check_date(value: Any) -> bool:
    """Valor interpretável como data/hora de calendário válida."""
    return parse_date(value) is not None


def check_json(value: Any) -> bool:
    """Valores já estruturados são válidos; strings devem ser JSON sintaticamente válido."""
    if not isinstance(value, str):
        return True
    try:
        json.loads(value)
    except (ValueError, RecursionError):
        return False
    return True
