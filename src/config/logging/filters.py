"""Filter de logging que injeta contexto da requisição.

Campos injetados:
- correlation_id: ID de rastreamento da requisição validada
- service: Nome do serviço
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Enriquece cada record com correlation_id e service.

    Args:
        service_name: Nome do serviço.
        correlation_id_getter: Função que retorna o correlation_id atual;
            sem ela, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Nunca descarta; preserva correlation_id passado via `extra`."""
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True
