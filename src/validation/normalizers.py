"""Normalização e formatação de valores individuais.

Usados como `transform` em regras ou diretamente pela camada de entrada
antes de persistir dados aceitos.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from validation.checkers import check_url, clean_isbn, only_digits, parse_date, to_number
from validation.sanitizer import sanitize_string

_SPECIAL_CHARACTERS = re.compile(r"""[`~!@#$%^&*()_|+\-=?;:'",.<>{}\[\]\\/]""")


def sanitize_digits(value: Any) -> str:
    """Mantém apenas dígitos (CPF, CNPJ, CEP, telefone)."""
    return only_digits(value) or ""


def sanitize_isbn(value: str) -> str:
    """Remove hífens e espaços do ISBN."""
    return clean_isbn(value)


def format_isbn(value: str) -> str:
    """Formata ISBN com hífens.

    ISBN-10 → X-XXX-XXXXX-X; ISBN-13 → XXX-X-XX-XXXXXX-X.
    Outros comprimentos retornam o valor original.

    Exemplos:
        >>> format_isbn("8535902775")
        '8-535-90277-5'
        >>> format_isbn("9788535902778")
        '978-8-53-590277-8'
    """
    isbn = clean_isbn(value)
    if len(isbn) == 10:
        return f"{isbn[0]}-{isbn[1:4]}-{isbn[4:9]}-{isbn[9]}"
    if len(isbn) == 13:
        return f"{isbn[:3]}-{isbn[3]}-{isbn[4:6]}-{isbn[6:12]}-{isbn[12]}"
    return value


def sanitize_email(email: str) -> str:
    return email.strip().lower()


def sanitize_url(url: str) -> str:
    """URL em forma canônica (esquema e host minúsculos); "" se inválida."""
    if not check_url(url):
        return ""
    parts = urlsplit(url)
    userinfo, at, host = parts.netloc.rpartition("@")
    netloc = f"{userinfo}{at}{host.lower()}"
    path = parts.path or ("/" if netloc else "")
    return urlunsplit((parts.scheme.lower(), netloc, path, parts.query, parts.fragment))


def sanitize_number(value: Any) -> float | None:
    return to_number(value)


def sanitize_date(value: Any) -> datetime | None:
    return parse_date(value)


def strip_special_characters(text: str) -> str:
    """Sanitização agressiva: tags, espaços e caracteres especiais removidos."""
    return _SPECIAL_CHARACTERS.sub("", sanitize_string(text))
