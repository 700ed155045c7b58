"""Agregador de settings do Valida Biblioteca.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.validation import (
    ValidationSettings,
    get_validation_settings,
)

__all__ = [
    "VALID_LOG_LEVELS",
    "BaseSettings",
    "Environment",
    "ValidationSettings",
    "get_base_settings",
    "get_validation_settings",
]
