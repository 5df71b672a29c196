"""
Test suite for the account routes.

Runs the full app with the in-memory user store. The session cookie set by
register and login is carried between requests by the TestClient.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from carfinder.adapters.pbkdf2_password_hasher import Pbkdf2PasswordHasher
from carfinder.entrypoints.http.app import build_app
from carfinder.entrypoints.http.config import SESSION_COOKIE
from carfinder.entrypoints.http.dependencies import get_password_hasher

JANE = {"username": "jdoe", "password": "secret123", "firstName": "Jane", "lastName": "Doe"}


@pytest.fixture
def app() -> FastAPI:
    test_app = build_app()
    # Low iteration count keeps the suite fast
    test_app.dependency_overrides[get_password_hasher] = lambda: Pbkdf2PasswordHasher(
        iterations=1000
    )
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def registered(client: TestClient) -> dict:
    response = client.post("/api/register", json=JANE)
    assert response.status_code == 201
    return response.json()


# ==============================================================================
# POST /api/register
# ==============================================================================


def test_register_returns_user_and_logs_in(client: TestClient) -> None:
    response = client.post("/api/register", json=JANE)

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "jdoe"
    assert body["firstName"] == "Jane"
    assert body["lastName"] == "Doe"
    assert "password" not in body
    assert "passwordHash" not in body
    assert SESSION_COOKIE in response.cookies

    assert client.get("/api/user").json() == body


def test_register_duplicate_username(client: TestClient, registered: dict) -> None:
    response = client.post("/api/register", json=JANE)

    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"


def test_register_short_password(client: TestClient) -> None:
    response = client.post("/api/register", json={"username": "jdoe", "password": "123"})

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "password"
    assert SESSION_COOKIE not in response.cookies


def test_register_requires_username(client: TestClient) -> None:
    response = client.post("/api/register", json={"password": "secret123"})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "username"


# ==============================================================================
# POST /api/login and /api/logout
# ==============================================================================


def test_login_with_valid_credentials(app: FastAPI, registered: dict) -> None:
    fresh = TestClient(app, raise_server_exceptions=False)

    response = fresh.post("/api/login", json={"username": "jdoe", "password": "secret123"})

    assert response.status_code == 200
    assert response.json() == registered
    assert fresh.get("/api/user").status_code == 200


@pytest.mark.parametrize(
    "credentials",
    [
        {"username": "jdoe", "password": "wrong-password"},
        {"username": "nobody", "password": "secret123"},
    ],
)
def test_login_failures_look_the_same(
    app: FastAPI, registered: dict, credentials: dict
) -> None:
    fresh = TestClient(app, raise_server_exceptions=False)

    response = fresh.post("/api/login", json=credentials)

    assert response.status_code == 401
    assert response.json() == {
        "detail": "Invalid username or password",
        "code": "UNAUTHORIZED",
    }
    assert fresh.get("/api/user").status_code == 401


def test_logout_ends_session(client: TestClient, registered: dict) -> None:
    response = client.post("/api/logout")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/api/user").status_code == 401


def test_replayed_cookie_after_logout_is_rejected(
    app: FastAPI, client: TestClient, registered: dict
) -> None:
    """Logging out revokes the session server-side, not just the client's copy."""
    old_cookie = client.cookies.get(SESSION_COOKIE)

    client.post("/api/logout")

    replay = TestClient(app, raise_server_exceptions=False, cookies={SESSION_COOKIE: old_cookie})
    assert replay.get("/api/user").status_code == 401


def test_logout_ends_sessions_on_other_clients(
    app: FastAPI, client: TestClient, registered: dict
) -> None:
    other = TestClient(app, raise_server_exceptions=False)
    other.post("/api/login", json={"username": "jdoe", "password": "secret123"})
    assert other.get("/api/user").status_code == 200

    client.post("/api/logout")

    assert other.get("/api/user").status_code == 401


def test_login_after_logout(client: TestClient, registered: dict) -> None:
    client.post("/api/logout")

    response = client.post("/api/login", json={"username": "jdoe", "password": "secret123"})

    assert response.status_code == 200
    assert client.get("/api/user").json() == registered


def test_logout_without_session(client: TestClient) -> None:
    assert client.post("/api/logout").status_code == 204


# ==============================================================================
# GET / DELETE /api/user
# ==============================================================================


def test_current_user_requires_session(client: TestClient) -> None:
    response = client.get("/api/user")

    assert response.status_code == 401
    assert response.json() == {"detail": "Not authenticated", "code": "UNAUTHORIZED"}


def test_tampered_cookie_is_ignored(client: TestClient) -> None:
    client.cookies.set(SESSION_COOKIE, "not-a-signed-session")

    assert client.get("/api/user").status_code == 401


def test_delete_account(app: FastAPI, client: TestClient, registered: dict) -> None:
    """A session issued before deletion no longer authenticates."""
    old_cookie = client.cookies.get(SESSION_COOKIE)

    response = client.delete("/api/user")

    assert response.status_code == 204
    assert client.get("/api/user").status_code == 401

    replay = TestClient(app, raise_server_exceptions=False, cookies={SESSION_COOKIE: old_cookie})
    assert replay.get("/api/user").status_code == 401

    login = replay.post("/api/login", json={"username": "jdoe", "password": "secret123"})
    assert login.status_code == 401


def test_delete_requires_session(client: TestClient) -> None:
    assert client.delete("/api/user").status_code == 401


def test_username_is_free_again_after_deletion(client: TestClient, registered: dict) -> None:
    client.delete("/api/user")

    assert client.post("/api/register", json=JANE).status_code == 201
