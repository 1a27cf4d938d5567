from __future__ import annotations

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from core import errors


@pytest.fixture
def failing_client() -> TestClient:
    app = FastAPI()
    errors.register_exception_handlers(app)

    @app.get("/boom")
    async def boom() -> dict:
        raise RuntimeError("kaboom")

    @app.get("/teapot")
    async def teapot() -> dict:
        raise HTTPException(status_code=418, detail="Short and stout")

    # The catch-all handler answers, then Starlette re-raises for the server log.
    return TestClient(app, raise_server_exceptions=False)


def test_unknown_api_route(client):
    resp = client.get("/api/does-not-exist")

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "API route not found"}


def test_health(client, monkeypatch):
    monkeypatch.setenv("APP_ENV", "staging")

    body = client.get("/api/health").json()

    assert body["success"] is True
    assert body["message"] == "Marigold Catering API is running"
    assert body["environment"] == "staging"
    assert body["timestamp"]


def test_malformed_json_body_is_a_validation_failure(client, store):
    resp = client.post(
        "/api/contacts",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation failed"
    assert store.all("contacts") == []


def test_validation_field_names():
    assert errors._field_name(("body", "capacity", "seated")) == "capacity.seated"
    assert errors._field_name(("query", "limit")) == "limit"
    assert errors._field_name(("body",)) == "body"


def test_unhandled_error_hides_details_in_production(failing_client, monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")

    resp = failing_client.get("/boom")

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Something went wrong!"}


def test_unhandled_error_includes_stack_outside_production(failing_client, monkeypatch):
    monkeypatch.setenv("APP_ENV", "development")

    body = failing_client.get("/boom").json()

    assert body["message"] == "kaboom"
    assert "RuntimeError" in body["stack"]


def test_http_errors_use_envelope(failing_client):
    resp = failing_client.get("/teapot")

    assert resp.status_code == 418
    assert resp.json() == {"success": False, "message": "Short and stout"}
