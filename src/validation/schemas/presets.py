"""Schemas pré-definidos para formatos recorrentes de registro.

Puro dado: nenhum preset executa lógica própria além de transforms e
predicados declarados nas regras. Limites dependentes de data recebem
um Clock explícito.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import Any, Final

from validation.checkers import to_number
from validation.clock import Clock, system_clock
from validation.kinds import ValidationKind
from validation.rules import ValidationRule
from validation.schemas.schema import Schema

BOOK: Final = "livro"
USER: Final = "usuario"
ADDRESS: Final = "endereco"
PAGINATION: Final = "paginacao"
SEARCH: Final = "busca"
ID_PARAM: Final = "id_param"
PERIOD: Final = "periodo"

TITLE_PATTERN: Final = r"""^[a-zA-ZÀ-ÿ0-9\s\-_,.:;!?'"()]+$"""
AUTHOR_PATTERN: Final = r"^[a-zA-ZÀ-ÿ\s.]+$"
PERSON_NAME_PATTERN: Final = r"^[a-zA-ZÀ-ÿ\s]+$"
SORT_FIELDS: Final = ("titulo", "autor", "anoPublicacao", "dataCriacao")
SORT_ORDERS: Final = ("ASC", "DESC", "asc", "desc")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_or(default: int) -> Callable[[Any], int]:
    """Transform: inteiro do prefixo numérico; `default` se ausente ou zero.

    Segue a semântica de parseInt(value) || default.
    """

    def _transform(value: Any) -> int:
        if isinstance(value, bool):
            return default
        if isinstance(value, int):
            parsed = value
        elif isinstance(value, float):
            parsed = int(value) if math.isfinite(value) else 0
        else:
            match = _LEADING_INT.match(str(value))
            parsed = int(match.group(1)) if match else 0
        return parsed or default

    return _transform


def _upper(value: Any) -> Any:
    return value.upper() if isinstance(value, str) else value


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    number = to_number(value)
    return number is not None and number.is_integer()


def _to_int_if_integral(value: Any) -> Any:
    number = to_number(value)
    if isinstance(value, bool) or number is None or not number.is_integer():
        return value
    return int(number)


def build_book_schema(clock: Clock = system_clock) -> Schema:
    """Schema de livro; ano máximo de publicação = ano atual do `clock`."""
    current_year = clock().year
    return Schema.of(
        BOOK,
        titulo=ValidationRule(
            kind=ValidationKind.STRING,
            required=True,
            min=2,
            max=200,
            pattern=TITLE_PATTERN,
            message=(
                "Título deve ter entre 2 e 200 caracteres e conter apenas letras, "
                "números e pontuação básica"
            ),
        ),
        autor=ValidationRule(
            kind=ValidationKind.STRING,
            required=True,
            min=3,
            max=100,
            pattern=AUTHOR_PATTERN,
            message="Autor deve ter entre 3 e 100 caracteres e conter apenas letras e pontos",
        ),
        isbn=ValidationRule(
            kind=ValidationKind.ISBN,
            required=True,
            message=(
                "ISBN inválido. Use ISBN-10 (ex: 85-359-0277-5) "
                "ou ISBN-13 (ex: 978-85-359-0277-3)"
            ),
        ),
        anoPublicacao=ValidationRule(
            kind=ValidationKind.NUMBER,
            required=True,
            min=0,
            max=current_year,
            message=f"Ano de publicação deve estar entre 0 e {current_year}",
        ),
        disponivel=ValidationRule(kind=ValidationKind.BOOLEAN, default=True),
    )


def build_user_schema() -> Schema:
    return Schema.of(
        USER,
        nome=ValidationRule(
            kind=ValidationKind.STRING,
            required=True,
            min=3,
            max=100,
            pattern=PERSON_NAME_PATTERN,
            message="Nome deve ter entre 3 e 100 caracteres e conter apenas letras",
        ),
        email=ValidationRule(kind=ValidationKind.EMAIL, required=True, message="Email inválido"),
        senha=ValidationRule(
            kind=ValidationKind.PASSWORD,
            required=True,
            min=8,
            max=100,
            message=(
                "Senha deve ter pelo menos 8 caracteres, incluindo maiúsculas, "
                "minúsculas, números e caracteres especiais"
            ),
        ),
        telefone=ValidationRule(
            kind=ValidationKind.PHONE,
            message="Telefone inválido. Use o formato (00) 00000-0000",
        ),
    )


def build_address_schema() -> Schema:
    return Schema.of(
        ADDRESS,
        cep=ValidationRule(
            kind=ValidationKind.CEP,
            required=True,
            message="CEP inválido. Use o formato 00000-000",
        ),
        logradouro=ValidationRule(kind=ValidationKind.STRING, required=True, min=3, max=200),
        numero=ValidationRule(
            kind=ValidationKind.STRING,
            required=True,
            pattern=r"^[0-9]+[a-zA-Z]?$",
            message="Número deve começar com dígitos e pode conter uma letra no final",
        ),
        cidade=ValidationRule(kind=ValidationKind.STRING, required=True, min=2, max=100),
        estado=ValidationRule(
            kind=ValidationKind.STRING,
            required=True,
            pattern=r"^[A-Z]{2}$",
            message="Estado deve ser uma sigla de 2 letras maiúsculas",
        ),
    )


def _page_rules() -> dict[str, ValidationRule]:
    return {
        "pagina": ValidationRule(
            kind=ValidationKind.NUMBER,
            min=1,
            default=1,
            transform=parse_int_or(1),
        ),
        "limite": ValidationRule(
            kind=ValidationKind.NUMBER,
            min=1,
            max=100,
            default=10,
            transform=parse_int_or(10),
        ),
    }


def build_pagination_schema() -> Schema:
    return Schema(
        name=PAGINATION,
        fields={
            **_page_rules(),
            "ordenarPor": ValidationRule(
                kind=ValidationKind.STRING,
                enum=SORT_FIELDS,
                message="Campo de ordenação inválido",
            ),
            "ordem": ValidationRule(
                kind=ValidationKind.STRING,
                enum=SORT_ORDERS,
                transform=_upper,
                message="Ordem deve ser ASC ou DESC",
            ),
        },
    )


def build_search_schema() -> Schema:
    return Schema(
        name=SEARCH,
        fields={
            **_page_rules(),
            "autor": ValidationRule(
                kind=ValidationKind.STRING,
                min=2,
                max=100,
                message="Autor deve ter entre 2 e 100 caracteres",
            ),
            "titulo": ValidationRule(
                kind=ValidationKind.STRING,
                min=2,
                max=200,
                message="Título deve ter entre 2 e 200 caracteres",
            ),
            "disponivel": ValidationRule(
                kind=ValidationKind.BOOLEAN,
                message="Disponível deve ser verdadeiro ou falso",
            ),
        },
    )


def build_id_param_schema() -> Schema:
    return Schema.of(
        ID_PARAM,
        id=ValidationRule(
            kind=ValidationKind.NUMBER,
            required=True,
            min=1,
            custom=_is_integer,
            transform=_to_int_if_integral,
            message="ID deve ser um número inteiro positivo",
        ),
    )


def build_period_schema() -> Schema:
    """Filtro de período; a ordem entre as datas é checada por date_range."""
    return Schema.of(
        PERIOD,
        dataInicio=ValidationRule(
            kind=ValidationKind.DATE,
            message="Data de início deve estar no formato ISO 8601 (YYYY-MM-DD)",
        ),
        dataFim=ValidationRule(
            kind=ValidationKind.DATE,
            message="Data de fim deve estar no formato ISO 8601 (YYYY-MM-DD)",
        ),
    )
