"""Configuração do pytest para o projeto Valida Biblioteca."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import get_base_settings, get_validation_settings  # noqa: E402


@pytest.fixture
def clear_settings_cache() -> Iterator[None]:
    """Recarrega settings do ambiente (use junto de monkeypatch.setenv)."""
    get_base_settings.cache_clear()
    get_validation_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_validation_settings.cache_clear()
