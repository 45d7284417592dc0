"""HTTP tests for registration and login."""

from fastapi.testclient import TestClient

from shop.application.access import Role
from shop.infrastructure.api.app import create_app
from shop.infrastructure.bootstrap import Services


def _register(client, email="ann@example.com", password="hunter22", name="Ann"):
    return client.post(
        "/auth/register", json={"name": name, "email": email, "password": password}
    )


class TestRegisterApi:

    def test_created(self, client):
        response = _register(client)
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        user = body["data"]["user"]
        assert user["email"] == "ann@example.com"
        assert user["role"] == "user"
        assert "password" not in user and "passwordHash" not in user

    def test_duplicate_email(self, client):
        _register(client)
        response = _register(client, email="ANN@example.com")
        assert response.status_code == 409
        assert response.json() == {"success": False, "message": "Email is already registered"}

    def test_short_password(self, client):
        response = _register(client, password="123")
        assert response.status_code == 400
        assert "at least 6" in response.json()["message"]

    def test_missing_field(self, client):
        response = client.post("/auth/register", json={"email": "ann@example.com"})
        assert response.status_code == 400


class TestLoginApi:

    def test_token_opens_user_endpoints(self, client):
        _register(client)
        response = client.post(
            "/auth/login", json={"email": "ann@example.com", "password": "hunter22"}
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["user"]["email"] == "ann@example.com"

        me = client.get("/me", headers={"Authorization": f"Bearer {data['token']}"})
        assert me.status_code == 200
        assert me.json()["data"] == {"userId": data["user"]["id"], "role": "user"}

    def test_wrong_password(self, client):
        _register(client)
        response = client.post(
            "/auth/login", json={"email": "ann@example.com", "password": "nope-nope"}
        )
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid email or password"}

    def test_unknown_email(self, client):
        response = client.post(
            "/auth/login", json={"email": "ghost@example.com", "password": "hunter22"}
        )
        assert response.status_code == 401

    def test_admin_account_reaches_admin_endpoints(self, settings):
        services = Services.open(settings)
        services.register_user().handle(
            name="Root", email="root@example.com", password="hunter22", role=Role.ADMIN.value
        )

        with TestClient(create_app(settings, services)) as client:
            login = client.post(
                "/auth/login", json={"email": "root@example.com", "password": "hunter22"}
            )
            token = login.json()["data"]["token"]
            report = client.get(
                "/reports/summary", headers={"Authorization": f"Bearer {token}"}
            )
        assert login.json()["data"]["user"]["role"] == "admin"
        assert report.status_code == 200
