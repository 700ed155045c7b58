"""Relógio injetável.

Regras cujo limite depende da data atual (ex: ano máximo de publicação)
recebem um Clock explícito, nunca consultam o relógio global diretamente.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

# Deve retornar datetime com tzinfo (comparado com datas em UTC)
Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Retorna o instante atual em UTC."""
    return datetime.now(UTC)


def fixed_clock(instant: datetime) -> Clock:
    """Cria relógio congelado em `instant` (útil em testes).

    Args:
        instant: Instante retornado em toda chamada. Sem tzinfo é tratado como UTC.

    Returns:
        Clock que sempre retorna o mesmo instante.
    """
    frozen = instant if instant.tzinfo else instant.replace(tzinfo=UTC)

    def _clock() -> datetime:
        return frozen

    return _clock
