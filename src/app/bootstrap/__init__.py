"""Bootstrap da aplicação — inicialização.

Configura logging e valida settings antes de servir requisições. O
registry de schemas é construído aqui, uma vez, e depois só lido.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_validation_settings
from validation import get_schema_registry

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado com correlation_id e aquece o registry.

    Deve ser chamada uma vez no início do serviço.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )
    registry = get_schema_registry()
    logger.info(
        "schema_registry_ready",
        extra={"component": "bootstrap", "schema_count": len(registry)},
    )


def initialize_test_app() -> None:
    """Logging em DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Erros de todas as settings, prefixados pelo grupo."""
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in get_base_settings().validate())
    errors.extend(f"validation: {error}" for error in get_validation_settings().validate())
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` apenas registra alerta.

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito.
    """
    environment = get_base_settings().environment
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
