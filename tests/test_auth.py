from __future__ import annotations

import jwt
import pytest

from auth import security


def test_login_returns_token_for_admin(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "s3cret-pass"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Login successful"
    assert body["data"]["user"] == {"id": "admin-1", "username": "admin", "role": "admin"}

    payload = security.decode_access_token(body["data"]["token"])
    assert payload["sub"] == "admin-1"
    assert payload["role"] == "admin"
    assert payload["exp"] > payload["iat"]


def test_login_username_is_case_insensitive(client):
    resp = client.post("/api/auth/login", json={"username": " Admin ", "password": "s3cret-pass"})
    assert resp.status_code == 200


def test_login_rejects_wrong_password_and_unknown_user_alike(client):
    wrong_password = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})
    unknown_user = client.post("/api/auth/login", json={"username": "someone", "password": "s3cret-pass"})

    for resp in (wrong_password, unknown_user):
        assert resp.status_code == 401
        assert resp.json() == {"success": False, "message": "Invalid credentials"}


def test_login_validation_errors(client):
    resp = client.post("/api/auth/login", json={"username": "   "})

    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed"
    fields = {err["field"]: err["message"] for err in body["errors"]}
    assert fields["username"] == "Username is required"
    assert "password" in fields


def test_verify_echoes_identity(client, admin_headers):
    resp = client.post("/api/auth/verify", headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json()["data"]["user"] == {"id": "admin-1", "username": "admin", "role": "admin"}


def test_verify_without_token(client):
    resp = client.post("/api/auth/verify")

    assert resp.status_code == 401
    assert resp.json()["message"] == "Access denied. No token provided."


def test_malformed_authorization_header(client):
    resp = client.post("/api/auth/verify", headers={"Authorization": "Token abc"})
    assert resp.status_code == 401


def test_expired_token_is_rejected(client):
    token = jwt.encode(
        {"sub": "admin-1", "username": "admin", "role": "admin", "type": "access", "iat": 1, "exp": 2},
        security.jwt_secret(),
        algorithm=security.jwt_algorithm(),
    )
    resp = client.post("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 401
    assert resp.json()["message"] == "Token has expired."


def test_token_signed_with_other_secret_is_rejected(client):
    token = jwt.encode({"sub": "admin-1", "role": "admin", "type": "access"}, "other-secret", algorithm="HS256")
    resp = client.post("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_admin_route_requires_admin_role(client, editor_headers):
    resp = client.get("/api/contacts", headers=editor_headers)

    assert resp.status_code == 403
    assert resp.json()["success"] is False


def test_admin_route_with_admin_and_missing_id(client, admin_headers, missing_id):
    assert client.get(f"/api/contacts/{missing_id}").status_code == 401
    assert client.get(f"/api/contacts/{missing_id}", headers=admin_headers).status_code == 404


def test_production_requires_jwt_secret(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.delenv("JWT_SECRET", raising=False)

    with pytest.raises(security.AuthSecurityError, match="JWT_SECRET"):
        security.jwt_secret()


def test_password_hash_roundtrip():
    hashed = security.hash_password("pa55word")
    assert security.verify_password("pa55word", hashed)
    assert not security.verify_password("other", hashed)
    assert not security.verify_password("pa55word", "not-a-hash")


def test_production_startup_fails_without_jwt_secret(monkeypatch):
    from fastapi.testclient import TestClient

    from core import db
    from main import app

    opened = []

    async def fake_init_pool():
        opened.append(True)

    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.delenv("JWT_SECRET", raising=False)
    monkeypatch.setattr(db, "init_pool", fake_init_pool)

    with pytest.raises(security.AuthSecurityError, match="JWT_SECRET"):
        with TestClient(app):
            pass
    assert opened == []
