"""Testes dos checkers de formato: email, URL, UUID, base64 e senha."""

from __future__ import annotations

import pytest

from validation.checkers import (
    check_base64,
    check_email,
    check_password,
    check_url,
    check_uuid,
)


class TestCheckEmail:
    @pytest.mark.parametrize(
        "email", ["leitor@biblioteca.com", "Leitor.Nome@Biblioteca.COM.br", "a+b@x.io"]
    )
    def test_valid(self, email: str) -> None:
        assert check_email(email) is True

    @pytest.mark.parametrize(
        "email",
        ["leitor@biblioteca", "leitor@@x.com", "lei tor@x.com", "leitor..nome@x.com", "@x.com"],
    )
    def test_invalid(self, email: str) -> None:
        assert check_email(email) is False

    def test_non_string(self) -> None:
        assert check_email(42) is False


class TestCheckUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://biblioteca.example.com/livros?id=1",
            "http://localhost:8080",
            "mailto:leitor@biblioteca.com",
        ],
    )
    def test_valid(self, url: str) -> None:
        assert check_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "biblioteca.example.com",
            "http://",
            "http://host:99999",
            " https://example.com",
            "1http://example.com",
        ],
    )
    def test_invalid(self, url: str) -> None:
        assert check_url(url) is False


class TestCheckUuid:
    def test_valid(self) -> None:
        assert check_uuid("123e4567-e89b-12d3-a456-426614174000") is True

    def test_case_insensitive(self) -> None:
        assert check_uuid("123E4567-E89B-12D3-A456-426614174000") is True

    @pytest.mark.parametrize(
        "value",
        [
            "123e4567-e89b-02d3-a456-426614174000",  # versão 0
            "123e4567-e89b-12d3-c456-426614174000",  # variante fora de 8-b
            "123e4567e89b12d3a456426614174000",  # sem hífens
        ],
    )
    def test_invalid(self, value: str) -> None:
        assert check_uuid(value) is False


class TestCheckBase64:
    @pytest.mark.parametrize("value", ["aGVsbG8=", "aGk=", "YWJj"])
    def test_valid(self, value: str) -> None:
        assert check_base64(value) is True

    @pytest.mark.parametrize("value", ["aGVsbG8", "aGVs bG8=", "a$==", "aGVsbG8_"])
    def test_invalid(self, value: str) -> None:
        assert check_base64(value) is False


class TestCheckPassword:
    def test_strong(self) -> None:
        assert check_password("Senha@123") is True

    @pytest.mark.parametrize(
        "password",
        [
            "senha@123",  # sem maiúscula
            "SENHA@123",  # sem minúscula
            "Senha@abc",  # sem dígito
            "Senha1234",  # sem símbolo
            "Se@1",  # curta
        ],
    )
    def test_weak(self, password: str) -> None:
        assert check_password(password) is False

    def test_custom_min_length(self) -> None:
        assert check_password("Senha@123", min_length=12) is False
        assert check_password("Senha@123456", min_length=12) is True
