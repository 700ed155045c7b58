"""Testes das funções utilitárias e da composição with_validation."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from validation import (
    ValidationFailedError,
    ValidationKind,
    ValidationRule,
    fixed_clock,
    with_validation,
)
from validation.helpers import (
    is_adult,
    is_alpha,
    is_alphanumeric,
    is_empty,
    is_future_date,
    is_hex_color,
    is_numeric,
    is_past_date,
    validate_availability,
    validate_book,
    validate_book_update,
    validate_file_extension,
    validate_file_size,
    validate_isbn,
    validate_object,
    validate_publication_year,
    validate_value,
)
from validation.schemas.presets import build_book_schema

CLOCK = fixed_clock(datetime(2026, 10, 18, 12, 0, tzinfo=UTC))


class TestValidateValue:
    def test_kind_by_enum_or_tag(self) -> None:
        assert validate_value("529.982.247-25", ValidationKind.CPF) is True
        assert validate_value("00000000000", "cpf") is False

    def test_options_forwarded(self) -> None:
        assert validate_value(None, "string", required=True) is False
        assert validate_value(None, "string") is True
        assert validate_value(5, "number", min=10) is False

    def test_validate_object(self) -> None:
        schema = {"cep": ValidationRule(kind=ValidationKind.CEP, required=True)}
        assert validate_object({"cep": "01310-100"}, schema).is_valid
        assert not validate_object(None, schema).is_valid


class TestDatePredicates:
    @pytest.mark.parametrize(
        ("birth", "expected"),
        [
            ("2008-10-18", True),  # completa 18 hoje
            ("2008-10-19", False),  # completa amanhã
            ("1990-01-01", True),
            ("data", False),
        ],
    )
    def test_is_adult(self, birth: str, expected: bool) -> None:
        assert is_adult(birth, clock=CLOCK) is expected

    def test_is_adult_custom_age(self) -> None:
        assert is_adult("2010-01-01", min_age=16, clock=CLOCK) is True

    def test_future_and_past(self) -> None:
        assert is_future_date("2026-10-19", clock=CLOCK) is True
        assert is_past_date("2026-10-17", clock=CLOCK) is True
        assert is_future_date("2026-10-17", clock=CLOCK) is False
        assert is_past_date("invalida", clock=CLOCK) is False


class TestTextPredicates:
    def test_is_alpha(self) -> None:
        assert is_alpha("José da Silva") is True
        assert is_alpha("R2D2") is False

    def test_is_numeric(self) -> None:
        assert is_numeric("0123") is True
        assert is_numeric("12.3") is False

    def test_is_alphanumeric(self) -> None:
        assert is_alphanumeric("Sala 12") is True
        assert is_alphanumeric("Sala-12") is False

    @pytest.mark.parametrize(
        ("color", "expected"),
        [("#fff", True), ("#A1B2C3", True), ("#abcd", False), ("fff", False)],
    )
    def test_is_hex_color(self, color: str, expected: bool) -> None:
        assert is_hex_color(color) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, True),
            ("  ", True),
            ([], True),
            ({}, True),
            (0, False),
            ("a", False),
            ([0], False),
        ],
    )
    def test_is_empty(self, value: Any, expected: bool) -> None:
        assert is_empty(value) is expected


class TestFiles:
    def test_file_size_in_mb(self) -> None:
        assert validate_file_size(5 * 1024 * 1024, 5) is True
        assert validate_file_size(5 * 1024 * 1024 + 1, 5) is False

    def test_file_extension(self) -> None:
        assert validate_file_extension("capa.PNG", ["png", "jpg"]) is True
        assert validate_file_extension("capa.gif", ["png", "jpg"]) is False
        assert validate_file_extension("", ["png"]) is False


class TestBookHelpers:
    def test_validate_book_with_injected_schema(self) -> None:
        book = {
            "titulo": "Iracema",
            "autor": "José de Alencar",
            "isbn": "8535902775",
            "anoPublicacao": 1865,
        }
        assert validate_book(book, schema=build_book_schema(CLOCK)).is_valid

    def test_validate_book_update_only_checks_present_fields(self) -> None:
        schema = build_book_schema(CLOCK)
        assert validate_book_update({"anoPublicacao": 2000}, schema=schema).is_valid
        result = validate_book_update({"isbn": "123"}, schema=schema)
        assert [e.field for e in result.errors] == ["isbn"]

    def test_validate_isbn(self) -> None:
        assert validate_isbn("978-0-306-40615-7") is True
        assert validate_isbn("") is False

    def test_validate_publication_year(self) -> None:
        assert validate_publication_year(2026, clock=CLOCK) is True
        assert validate_publication_year(2027, clock=CLOCK) is False
        assert validate_publication_year(-1, clock=CLOCK) is False

    def test_validate_availability(self) -> None:
        assert validate_availability(True, clock=CLOCK) is True
        assert validate_availability(False, clock=CLOCK) is False
        assert validate_availability(True, "2026-10-01", clock=CLOCK) is True
        assert validate_availability(True, "2026-11-01", clock=CLOCK) is False


class TestWithValidation:
    """with_validation: valida o primeiro argumento e encaminha sanitizado."""

    SCHEMA = {
        "pagina": ValidationRule(kind=ValidationKind.NUMBER, min=1, transform=int),
        "nome": ValidationRule(kind=ValidationKind.STRING, required=True),
    }

    def test_forwards_sanitized_payload_and_extra_args(self) -> None:
        calls: list[tuple[Any, ...]] = []

        def create(payload: dict[str, Any], owner: str, *, dry_run: bool = False) -> str:
            calls.append((payload, owner, dry_run))
            return "ok"

        wrapped = with_validation(self.SCHEMA, create)
        assert wrapped({"pagina": "2", "nome": "Ana"}, "admin", dry_run=True) == "ok"
        assert calls == [({"pagina": 2, "nome": "Ana"}, "admin", True)]
        assert wrapped.__name__ == "create"

    def test_invalid_payload_not_forwarded(self) -> None:
        calls: list[Any] = []
        wrapped = with_validation(self.SCHEMA, calls.append, name="criar_livro")

        with pytest.raises(ValidationFailedError) as exc_info:
            wrapped({"pagina": "0"})

        assert calls == []
        assert exc_info.value.message == "Erro de validação em criar_livro"
        assert {e.field for e in exc_info.value.errors} == {"pagina", "nome"}

    def test_missing_payload_raises_type_error(self) -> None:
        wrapped = with_validation(self.SCHEMA, lambda payload: payload)
        with pytest.raises(TypeError):
            wrapped()
