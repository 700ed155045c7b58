"""Adaptador de fronteira: requisição HTTP → motor de validação.

Estrutura:
- request_merge.py: união de body/query/path e leitura do corpo JSON
- dependencies.py: dependência FastAPI `validate_request`
- handlers.py: ValidationFailedError → JSONResponse
"""

from api.validation.dependencies import resolve_schema, run_validation, validate_request
from api.validation.handlers import register_exception_handlers, validation_failed_handler
from api.validation.request_merge import (
    collect_request_data,
    merge_request_sources,
    read_json_object,
)

__all__ = [
    "collect_request_data",
    "merge_request_sources",
    "read_json_object",
    "register_exception_handlers",
    "resolve_schema",
    "run_validation",
    "validate_request",
    "validation_failed_handler",
]
