from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from payroll_app.core.config import Settings
from payroll_app.main import create_app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"
SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'payroll_test.db'}")
    monkeypatch.setenv("APP_SECRET_KEY", SECRET)
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("ADMIN_USERNAME", ADMIN_USERNAME)
    monkeypatch.setenv("ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    return Settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client) -> dict[str, str]:
    res = client.post("/admin/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert res.status_code == 200
    return bearer(res.json()["token"])


def signup_and_login(client, email: str, password: str = "pw", name: str = "Emp", phone: str = "555") -> dict:
    res = client.post(
        "/employee/signup",
        json={"name": name, "email": email, "password": password, "phone": phone},
    )
    assert res.status_code == 201, res.text
    emp_id = res.json()["employee"]["id"]

    res = client.post("/employee/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return {"id": emp_id, "headers": bearer(res.json()["token"])}


@pytest.fixture
def employee(client) -> dict:
    return signup_and_login(client, "worker@example.com")
