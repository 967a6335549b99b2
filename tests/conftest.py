"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.main import create_app


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's details."""

    def __init__(self, *args, username: str = "", email: str = "", token: str = "", **kwargs):
        super().__init__(*args, **kwargs)
        self.username = username
        self.email = email
        self.token = token


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        database_path=str(tmp_path / "conduit.db"),
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        log_level="WARNING",
        _env_file=None,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create a test client; entering it runs the migrations."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_factory(app, client):
    """Session factory for direct database assertions.

    The engine pool holds a single connection, so sessions opened from this
    must be closed before the next request is made.
    """
    return app.state.session_factory


@pytest.fixture
def register_user(client):
    """Register a user and return auth headers carrying their token."""

    def _register(
        username: str = "alice", email: str | None = None, password: str = "secret1"
    ) -> AuthHeaders:
        email = email or f"{username}@example.com"
        response = client.post(
            "/api/users",
            json={"user": {"username": username, "email": email, "password": password}},
        )
        assert response.status_code == 201, response.text
        token = response.json()["user"]["token"]
        return AuthHeaders(
            {"Authorization": f"Token {token}"}, username=username, email=email, token=token
        )

    return _register


@pytest.fixture
def auth_headers(register_user):
    """Create a user and return auth headers with user info."""
    return register_user("alice", "a@x.com", "secret1")


@pytest.fixture
def create_article(client):
    """Post an article as the given user and return the response JSON."""

    def _create(headers, title="Hello, World!", description="A greeting", body="Hi there"):
        response = client.post(
            "/api/articles",
            headers=headers,
            json={"article": {"title": title, "description": description, "body": body}},
        )
        assert response.status_code == 201, response.text
        return response.json()["article"]

    return _create
