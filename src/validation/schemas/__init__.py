"""Schemas nomeados e reutilizáveis.

Estrutura:
- schema.py: tipo Schema e derivação de schema de atualização
- presets.py: livro, usuario, endereco, paginacao, busca, id_param, periodo
- predicates.py: predicados entre campos (ex: intervalo de datas)
- registry.py: registry somente leitura
"""

from validation.schemas.predicates import date_range
from validation.schemas.presets import (
    ADDRESS,
    BOOK,
    ID_PARAM,
    PAGINATION,
    PERIOD,
    SEARCH,
    USER,
    build_address_schema,
    build_book_schema,
    build_id_param_schema,
    build_pagination_schema,
    build_period_schema,
    build_search_schema,
    build_user_schema,
    parse_int_or,
)
from validation.schemas.registry import (
    SchemaRegistry,
    create_default_registry,
    get_schema_registry,
)
from validation.schemas.schema import Schema, derive_update_schema

__all__ = [
    "ADDRESS",
    "BOOK",
    "ID_PARAM",
    "PAGINATION",
    "PERIOD",
    "SEARCH",
    "USER",
    "Schema",
    "SchemaRegistry",
    "build_address_schema",
    "build_book_schema",
    "build_id_param_schema",
    "build_pagination_schema",
    "build_period_schema",
    "build_search_schema",
    "build_user_schema",
    "create_default_registry",
    "date_range",
    "derive_update_schema",
    "get_schema_registry",
    "parse_int_or",
]
