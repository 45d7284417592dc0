"""Fixtures for the HTTP API tests."""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from shop.application.access import Identity, Role
from shop.config import Settings
from shop.infrastructure.api.app import create_app
from shop.infrastructure.auth.jwt_tokens import JwtTokenCodec

SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path / "data", jwt_secret=SECRET, password_iterations=1000)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def _bearer(user_id: str, role: Role) -> dict[str, str]:
    token = JwtTokenCodec(SECRET, timedelta(days=1)).issue(Identity(user_id, role))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    return _bearer("user-1", Role.USER)


@pytest.fixture
def other_user_headers():
    return _bearer("user-2", Role.USER)


@pytest.fixture
def admin_headers():
    return _bearer("admin-1", Role.ADMIN)


@pytest.fixture
def create_product(client, admin_headers):
    """Create a product through the API and return its JSON."""

    def _create(name="Widget", price=10.0, stock=5, description="A widget"):
        response = client.post(
            "/products",
            json={"name": name, "price": price, "stock": stock, "description": description},
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]["product"]

    return _create
