"""Formatter JSON para logs estruturados."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log; a ordem define a ordem no JSON
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com os campos obrigatórios renomeados.

    Exemplo de output:
        {"asctime": "...", "level": "WARNING", "logger": "validation.engine",
         "message": "custom_predicate_failed", "correlation_id": "abc-123",
         "service": "valida_biblioteca", "field": "isbn", "error_type": "ValueError"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
