"""Checkers de formatos textuais: email, URL, UUID, base64 e senha."""

from __future__ import annotations

import base64
import binascii
import re
from typing import Any, Final
from urllib.parse import urlsplit

DEFAULT_PASSWORD_MIN_LENGTH: Final = 8
PASSWORD_SYMBOLS: Final = '!@#$%^&*(),.?":{}|<>'

_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_URL_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*$")
_UUID = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(f"[{re.escape(PASSWORD_SYMBOLS)}]")


def check_email(value: Any) -> bool:
    """Forma local@dominio.tld, sem espaços nem pontos consecutivos."""
    if not isinstance(value, str):
        return False
    email = value.lower()
    return ".." not in email and _EMAIL.match(email) is not None


def check_url(value: Any) -> bool:
    """URL absoluta: esquema válido e netloc ou path não vazios."""
    if not isinstance(value, str) or not value or value != value.strip():
        return False
    try:
        parts = urlsplit(value)
        # Acessar port força validação do número da porta
        _ = parts.port
    except ValueError:
        return False
    if not parts.scheme or not _URL_SCHEME.match(parts.scheme):
        return False
    return bool(parts.netloc or parts.path)


def check_uuid(value: Any) -> bool:
    """UUID hifenizado 8-4-4-4-12 com nibble de versão 1-5 e variante RFC 4122."""
    return isinstance(value, str) and _UUID.match(value) is not None


def check_base64(value: Any) -> bool:
    """Base64 padrão, com padding, que sobrevive a decode→encode inalterado."""
    if not isinstance(value, str):
        return False
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    return base64.b64encode(decoded).decode("ascii") == value


def check_password(value: Any, min_length: float | None = None) -> bool:
    """Senha forte: comprimento mínimo, maiúscula, minúscula, dígito e símbolo."""
    if not isinstance(value, str):
        return False
    if len(value) < (min_length or DEFAULT_PASSWORD_MIN_LENGTH):
        return False
    return all(
        pattern.search(value) for pattern in (_UPPER, _LOWER, _DIGIT, _SYMBOL)
    )
