"""Checkers de documentos brasileiros: CPF, CNPJ, CEP e telefone.

Os dígitos verificadores de CPF e CNPJ usam soma ponderada reduzida
módulo 11: resto < 2 gera dígito 0, caso contrário 11 - resto.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, Final

_NON_DIGITS = re.compile(r"\D")

CPF_LENGTH: Final = 11
CNPJ_LENGTH: Final = 14
CEP_LENGTH: Final = 8
PHONE_LENGTHS: Final = frozenset({10, 11})

_CPF_FIRST_WEIGHTS: Final = tuple(range(10, 1, -1))
_CPF_SECOND_WEIGHTS: Final = tuple(range(11, 1, -1))
_CNPJ_FIRST_WEIGHTS: Final = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_SECOND_WEIGHTS: Final = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def only_digits(value: Any) -> str | None:
    """Remove tudo que não é dígito ASCII; None para tipos não textuais."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str):
        return None
    return _NON_DIGITS.sub("", value.encode("ascii", "ignore").decode("ascii"))


def _check_digit(digits: str, weights: Sequence[int]) -> int:
    total = sum(int(digit) * weight for digit, weight in zip(digits, weights, strict=True))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _is_repeated(digits: str) -> bool:
    return digits == digits[0] * len(digits)


def check_cpf(value: Any) -> bool:
    """CPF com 11 dígitos e ambos os dígitos verificadores corretos."""
    cpf = only_digits(value)
    if cpf is None or len(cpf) != CPF_LENGTH or _is_repeated(cpf):
        return False

    if int(cpf[9]) != _check_digit(cpf[:9], _CPF_FIRST_WEIGHTS):
        return False
    return int(cpf[10]) == _check_digit(cpf[:10], _CPF_SECOND_WEIGHTS)


def check_cnpj(value: Any) -> bool:
    """CNPJ com 14 dígitos e ambos os dígitos verificadores corretos."""
    cnpj = only_digits(value)
    if cnpj is None or len(cnpj) != CNPJ_LENGTH or _is_repeated(cnpj):
        return False

    if int(cnpj[12]) != _check_digit(cnpj[:12], _CNPJ_FIRST_WEIGHTS):
        return False
    return int(cnpj[13]) == _check_digit(cnpj[:13], _CNPJ_SECOND_WEIGHTS)


def check_cep(value: Any) -> bool:
    """CEP: exatamente 8 dígitos após remover pontuação."""
    cep = only_digits(value)
    return cep is not None and len(cep) == CEP_LENGTH


def check_phone(value: Any) -> bool:
    """Telefone BR: 10 (fixo) ou 11 (celular) dígitos com DDD."""
    phone = only_digits(value)
    return phone is not None and len(phone) in PHONE_LENGTHS
