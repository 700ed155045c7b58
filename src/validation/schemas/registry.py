"""Registry de schemas nomeados.

Construído uma vez na inicialização do processo e somente leitura depois
disso, pode ser compartilhado entre threads sem lock.

Uso:
    from validation.schemas import get_schema_registry

    schema = get_schema_registry().get("livro")
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType

from validation.clock import Clock, system_clock
from validation.schemas.presets import (
    build_address_schema,
    build_book_schema,
    build_id_param_schema,
    build_pagination_schema,
    build_period_schema,
    build_search_schema,
    build_user_schema,
)
from validation.schemas.schema import Schema


class SchemaRegistry(Mapping[str, Schema]):
    """Mapeamento somente leitura nome → Schema.

    Raises:
        ValueError: Se dois schemas tiverem o mesmo nome.
    """

    __slots__ = ("_schemas",)

    def __init__(self, schemas: Iterable[Schema]) -> None:
        collected: dict[str, Schema] = {}
        for schema in schemas:
            if schema.name in collected:
                raise ValueError(f"Schema duplicado: {schema.name}")
            collected[schema.name] = schema
        self._schemas = MappingProxyType(collected)

    def __getitem__(self, name: str) -> Schema:
        try:
            return self._schemas[name]
        except KeyError:
            known = ", ".join(sorted(self._schemas))
            raise KeyError(f"Schema desconhecido: {name}. Disponíveis: {known}") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)

    def get(self, name: str) -> Schema:  # type: ignore[override]
        """Como [], levanta KeyError com os nomes disponíveis."""
        return self[name]


def create_default_registry(clock: Clock = system_clock) -> SchemaRegistry:
    """Registry com todos os presets; o clock fixa o ano máximo de publicação."""
    return SchemaRegistry(
        [
            build_book_schema(clock),
            build_user_schema(),
            build_address_schema(),
            build_pagination_schema(),
            build_search_schema(),
            build_id_param_schema(),
            build_period_schema(),
        ]
    )


@lru_cache(maxsize=1)
def get_schema_registry() -> SchemaRegistry:
    """Instância cacheada do registry padrão (relógio do sistema)."""
    return create_default_registry()
