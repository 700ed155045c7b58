"""Checkers por tipo semântico — funções puras e totais.

Estrutura:
- primitives.py: string, number, boolean, date, json
- documents.py: CPF, CNPJ, CEP, telefone
- isbn.py: ISBN-10/13
- formats.py: email, URL, UUID, base64, senha
- dispatcher.py: seleção do checker pelo ValidationKind
"""

from validation.checkers.dispatcher import check_value
from validation.checkers.documents import (
    check_cep,
    check_cnpj,
    check_cpf,
    check_phone,
    only_digits,
)
from validation.checkers.formats import (
    DEFAULT_PASSWORD_MIN_LENGTH,
    PASSWORD_SYMBOLS,
    check_base64,
    check_email,
    check_password,
    check_url,
    check_uuid,
)
from validation.checkers.isbn import check_isbn, check_isbn10, check_isbn13, clean_isbn
from validation.checkers.primitives import (
    check_boolean,
    check_date,
    check_json,
    check_number,
    check_string,
    parse_date,
    to_number,
)

__all__ = [
    "DEFAULT_PASSWORD_MIN_LENGTH",
    "PASSWORD_SYMBOLS",
    "check_base64",
    "check_boolean",
    "check_cep",
    "check_cnpj",
    "check_cpf",
    "check_date",
    "check_email",
    "check_isbn",
    "check_isbn10",
    "check_isbn13",
    "check_json",
    "check_number",
    "check_password",
    "check_phone",
    "check_string",
    "check_url",
    "check_uuid",
    "check_value",
    "clean_isbn",
    "only_digits",
    "parse_date",
    "to_number",
]
