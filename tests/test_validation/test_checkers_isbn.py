"""Testes do checker de ISBN."""

from __future__ import annotations

import pytest

from validation.checkers import check_isbn, check_isbn10, check_isbn13, clean_isbn


def test_clean_isbn_removes_hyphens_and_spaces() -> None:
    assert clean_isbn("978-0 306-40615-7") == "9780306406157"


class TestIsbn10:
    @pytest.mark.parametrize("isbn", ["0306406152", "080442957X", "080442957x", "8535902775"])
    def test_valid(self, isbn: str) -> None:
        assert check_isbn10(isbn) is True

    @pytest.mark.parametrize(
        "isbn",
        [
            "0306406153",  # dígito final alterado
            "1306406152",  # primeiro dígito alterado
            "0306406162",  # dígitos transpostos
            "03064X6152",  # X fora da última posição
            "030640615",
        ],
    )
    def test_invalid(self, isbn: str) -> None:
        assert check_isbn10(isbn) is False


class TestIsbn13:
    @pytest.mark.parametrize("isbn", ["9780306406157", "9788535902778"])
    def test_valid(self, isbn: str) -> None:
        assert check_isbn13(isbn) is True

    @pytest.mark.parametrize("isbn", ["9780306406158", "978030640615X", "978030640615"])
    def test_invalid(self, isbn: str) -> None:
        assert check_isbn13(isbn) is False


class TestCheckIsbn:
    """check_isbn despacha por comprimento após limpeza."""

    @pytest.mark.parametrize(
        "isbn",
        ["85-359-0277-5", "978-0-306-40615-7", "978 85 359 0277 8", "0-8044-2957-X"],
    )
    def test_accepts_formatted(self, isbn: str) -> None:
        assert check_isbn(isbn) is True

    @pytest.mark.parametrize("isbn", ["12345678901", "978-0-306-40615", "", "abc"])
    def test_rejects_other_lengths(self, isbn: str) -> None:
        assert check_isbn(isbn) is False

    def test_rejects_non_string(self) -> None:
        assert check_isbn(9780306406157) is False
