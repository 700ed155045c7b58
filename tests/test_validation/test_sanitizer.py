"""Testes do sanitizer e dos normalizadores de valor."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from validation import sanitize_payload, sanitize_string, sanitize_value
from validation.normalizers import (
    format_isbn,
    sanitize_date,
    sanitize_digits,
    sanitize_email,
    sanitize_isbn,
    sanitize_number,
    sanitize_url,
    strip_special_characters,
)


class TestSanitizeString:
    def test_removes_tags_and_collapses_whitespace(self) -> None:
        assert sanitize_string("  <b>Dom</b>   Casmurro\n\t ") == "Dom Casmurro"

    def test_script_tags_removed(self) -> None:
        assert sanitize_string("<script>alert(1)</script>Livro") == "alert(1)Livro"

    def test_unclosed_angle_bracket_kept(self) -> None:
        assert sanitize_string("a < b") == "a < b"

    @pytest.mark.parametrize("text", ["  <i>x</i>  y ", "<<b>>z", "plain"])
    def test_idempotent(self, text: str) -> None:
        once = sanitize_string(text)
        assert sanitize_string(once) == once


class TestSanitizeValue:
    def test_recurses_preserving_structure(self) -> None:
        value = {
            "titulo": " <em>Iracema</em> ",
            "tags": ["  romance ", 1],
            "par": (" a ", None),
            "ano": 1865,
        }
        assert sanitize_value(value) == {
            "titulo": "Iracema",
            "tags": ["romance", 1],
            "par": ("a", None),
            "ano": 1865,
        }

    def test_non_text_untouched(self) -> None:
        marker = object()
        assert sanitize_value(marker) is marker


class TestSanitizePayload:
    def test_none_returns_empty_dict(self) -> None:
        assert sanitize_payload(None) == {}

    def test_returns_new_dict(self) -> None:
        payload = {"nome": " Ana "}
        sanitized = sanitize_payload(payload)
        assert sanitized == {"nome": "Ana"}
        assert payload == {"nome": " Ana "}


class TestNormalizers:
    def test_sanitize_digits(self) -> None:
        assert sanitize_digits("01310-100") == "01310100"
        assert sanitize_digits(None) == ""

    def test_isbn(self) -> None:
        assert sanitize_isbn("85-359-0277-5") == "8535902775"
        assert format_isbn("8535902775") == "8-535-90277-5"
        assert format_isbn("9788535902778") == "978-8-53-590277-8"
        assert format_isbn("123") == "123"

    def test_sanitize_email(self) -> None:
        assert sanitize_email("  Leitor@Biblioteca.COM ") == "leitor@biblioteca.com"

    def test_sanitize_url(self) -> None:
        assert sanitize_url("HTTPS://Example.COM") == "https://example.com/"
        assert sanitize_url("https://User@Example.com/Livros?q=A") == (
            "https://User@example.com/Livros?q=A"
        )
        assert sanitize_url("not a url") == ""

    def test_sanitize_number_and_date(self) -> None:
        assert sanitize_number("3.5") == 3.5
        assert sanitize_number("x") is None
        assert sanitize_date("2024-01-15") == datetime(2024, 1, 15, tzinfo=UTC)
        assert sanitize_date("ontem") is None

    def test_strip_special_characters(self) -> None:
        assert strip_special_characters(" <b>O'Brien</b>, J. (ed.)! ") == "OBrien J ed"
