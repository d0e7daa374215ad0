"""Tests for the authentication endpoints."""

from __future__ import annotations

from datetime import timedelta

from portal.infrastructure.security import create_access_token


def test_login_returns_token_and_user(client) -> None:
    response = client.post(
        "/api/auth/login", json={"username": "budisantoso", "password": "password123"}
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["token_type"] == "bearer"
    assert payload["access_token"]
    assert payload["user"]["username"] == "budisantoso"
    assert payload["user"]["fullName"] == "Budi Santoso"
    assert "password" not in payload["user"]


def test_login_rejects_bad_credentials(client) -> None:
    for body in (
        {"username": "budisantoso", "password": "nope"},
        {"username": "ghost", "password": "password123"},
    ):
        response = client.post("/api/auth/login", json=body)
        assert response.status_code == 401


def test_me_requires_a_valid_token(client, auth_headers) -> None:
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/auth/me", headers={"Authorization": "Bearer junk"}).status_code == 401

    response = client.get("/api/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["nik"] == "1234567890123456"


def test_logout_revokes_the_token(client, auth_headers) -> None:
    response = client.post("/api/auth/logout", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}
    assert client.get("/api/auth/me", headers=auth_headers).status_code == 401
    assert client.post("/api/auth/logout", headers=auth_headers).status_code == 401


def test_token_for_unknown_or_expired_user_is_rejected(client) -> None:
    ghost = create_access_token({"sub": "99"})
    expired = create_access_token({"sub": "1"}, expires_delta=timedelta(minutes=-1))

    for token in (ghost, expired):
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
