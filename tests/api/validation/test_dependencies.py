"""Testes da dependência validate_request e do handler de erro."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from api.validation import (
    register_exception_handlers,
    resolve_schema,
    run_validation,
    validate_request,
)
from validation import Schema, ValidationKind, ValidationRule

pytestmark = pytest.mark.usefixtures("clear_settings_cache")

TITLE_SCHEMA = Schema.of(
    "titulo_teste",
    titulo=ValidationRule(kind=ValidationKind.STRING, required=True, min=2),
)


def _build_client(schema: Schema | str, **options: Any) -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)
    dependency = validate_request(schema, **options)

    @app.post("/livros/{id}")
    async def _update_book(data: dict[str, Any] = Depends(dependency)) -> dict[str, Any]:
        return data

    @app.post("/livros")
    async def _create_book(data: dict[str, Any] = Depends(dependency)) -> dict[str, Any]:
        return data

    return TestClient(app)


class TestValidateRequest:
    def test_valid_request_returns_sanitized_data(self) -> None:
        client = _build_client(TITLE_SCHEMA)
        response = client.post("/livros", json={"titulo": "  <b>Dom</b>   Casmurro "})
        assert response.status_code == 200
        assert response.json() == {"titulo": "Dom Casmurro"}

    def test_sanitize_can_be_disabled(self) -> None:
        client = _build_client(TITLE_SCHEMA, sanitize=False)
        response = client.post("/livros", json={"titulo": "<b>Dom</b>"})
        assert response.json() == {"titulo": "<b>Dom</b>"}

    def test_sanitize_follows_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SANITIZE_INPUT", "false")
        client = _build_client(TITLE_SCHEMA)
        response = client.post("/livros", json={"titulo": " Dom "})
        assert response.json() == {"titulo": " Dom "}

    def test_path_param_wins_over_query_and_body(self) -> None:
        client = _build_client("id_param")
        response = client.post("/livros/5?id=9", json={"id": 1})
        assert response.status_code == 200
        assert response.json() == {"id": 5}

    def test_invalid_request_rejected_with_error_payload(self) -> None:
        client = _build_client(TITLE_SCHEMA)
        response = client.post("/livros", json={"titulo": "A"})

        assert response.status_code == 422
        payload = response.json()
        assert payload["status"] == "error"
        assert payload["message"] == "Erro de validação"
        assert payload["statusCode"] == 422
        assert payload["errors"] == [
            {
                "field": "titulo",
                "message": "titulo deve ser uma string válida",
                "value": "A",
                "code": "VALIDATION_FAILED",
            }
        ]
        assert "timestamp" in payload

    def test_failure_status_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VALIDATION_FAILURE_STATUS", "400")
        client = _build_client(TITLE_SCHEMA)
        response = client.post("/livros", json={})
        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "REQUIRED"

    def test_non_object_body_rejected(self) -> None:
        client = _build_client(TITLE_SCHEMA)
        response = client.post(
            "/livros",
            content=b"[1, 2]",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "body"

    def test_unknown_schema_name_fails_at_definition(self) -> None:
        with pytest.raises(KeyError, match="revista"):
            validate_request("revista")


class TestHelpers:
    def test_resolve_schema(self) -> None:
        assert resolve_schema(TITLE_SCHEMA) is TITLE_SCHEMA
        assert resolve_schema("livro").name == "livro"

    def test_run_validation_sanitize_flag(self) -> None:
        data = {"titulo": " <i>Ok</i> "}
        assert run_validation(data, TITLE_SCHEMA, sanitize=True).sanitized_data["titulo"] == "Ok"
        raw = run_validation(data, TITLE_SCHEMA, sanitize=False)
        assert raw.sanitized_data["titulo"] == " <i>Ok</i> "
