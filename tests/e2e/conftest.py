"""Fixtures for end-to-end API tests."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from ballot.config import Settings
from ballot.interface.api.app import create_app
from ballot.util.di.container import setup_di
from ballot.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def make_user():
    """Mint a signed-in user: returns (user_id, Authorization headers)."""

    def _make_user(email: str = "voter@example.com") -> tuple[str, dict[str, str]]:
        user_id = str(uuid4())
        token = create_token(user_id, email, Settings().auth)
        return user_id, {"Authorization": f"Bearer {token}"}

    return _make_user


@pytest.fixture
def make_admin(client, make_user, operator_token):
    """Mint a signed-in user and promote them through the claim endpoint."""

    def _make_admin() -> tuple[str, dict[str, str]]:
        user_id, headers = make_user("admin@example.com")
        response = client.post(
            "/api/auth/claim-admin",
            json={"operatorToken": operator_token},
            headers=headers,
        )
        assert response.status_code == 200
        return user_id, headers

    return _make_admin


@pytest.fixture
def make_poll(client, make_user):
    """Create a poll through the API and return its payload."""

    def _make_poll(
        headers: dict[str, str] | None = None,
        title: str = "Best language?",
        options: list[str] | None = None,
    ) -> dict:
        if headers is None:
            _, headers = make_user()
        response = client.post(
            "/api/polls",
            json={"title": title, "options": options or ["Python", "Rust", "Go"]},
            headers=headers,
        )
        assert response.status_code == 201
        return response.json()["poll"]

    return _make_poll
