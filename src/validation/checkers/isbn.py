"""Checker de ISBN-10 e ISBN-13."""

from __future__ import annotations

import re
from typing import Any

_SEPARATORS = re.compile(r"[-\s]")
_ISBN10_SHAPE = re.compile(r"[0-9]{9}[0-9Xx]")
_ISBN13_SHAPE = re.compile(r"[0-9]{13}")


def clean_isbn(value: str) -> str:
    """Remove hífens e espaços."""
    return _SEPARATORS.sub("", value)


def check_isbn10(isbn: str) -> bool:
    """Pesos 10..1 sobre as 10 posições (X final vale 10); soma mod 11 == 0."""
    if not _ISBN10_SHAPE.fullmatch(isbn):
        return False

    total = sum(int(digit) * (10 - index) for index, digit in enumerate(isbn[:9]))
    last = isbn[9].upper()
    total += 10 if last == "X" else int(last)
    return total % 11 == 0


def check_isbn13(isbn: str) -> bool:
    """Pesos alternados 1,3 a partir da posição 0; soma mod 10 == 0."""
    if not _ISBN13_SHAPE.fullmatch(isbn):
        return False

    total = sum(int(digit) * (1 if index % 2 == 0 else 3) for index, digit in enumerate(isbn))
    return total % 10 == 0


def check_isbn(value: Any) -> bool:
    """ISBN-10 ou ISBN-13 válido; outros comprimentos falham."""
    if not isinstance(value, str):
        return False

    isbn = clean_isbn(value)
    if len(isbn) == 10:
        return check_isbn10(isbn)
    if len(isbn) == 13:
        return check_isbn13(isbn)
    return False
