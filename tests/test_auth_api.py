from __future__ import annotations

from conftest import ADMIN_PASSWORD, ADMIN_USERNAME


def test_liveness(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.text == "Payroll Management System API is running"


def test_db_check(client):
    res = client.get("/test-db")
    assert res.status_code == 200
    assert res.json()["dbTime"]


def test_seeded_admin_can_log_in(client):
    res = client.post("/admin/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert res.status_code == 200
    body = res.json()
    assert body["role"] == "admin"
    assert body["user"]["username"] == ADMIN_USERNAME
    assert body["token"]


def test_bad_admin_password_and_unknown_admin_look_identical(client):
    wrong = client.post("/admin/login", json={"username": ADMIN_USERNAME, "password": "nope"})
    missing = client.post("/admin/login", json={"username": "ghost", "password": "nope"})
    assert wrong.status_code == missing.status_code == 401
    assert wrong.json() == missing.json() == {"error": "Invalid credentials"}


def test_signup_returns_employee_without_password(client):
    res = client.post(
        "/employee/signup",
        json={"name": "A", "email": "a@x.com", "password": "p", "phone": "1"},
    )
    assert res.status_code == 201
    emp = res.json()["employee"]
    assert emp["id"] > 0
    assert emp["email"] == "a@x.com"
    assert "password" not in emp
    assert "password_hash" not in emp


def test_duplicate_signup_is_rejected_once(client, admin_headers):
    payload = {"name": "A", "email": "a@x.com", "password": "p", "phone": "1"}
    assert client.post("/employee/signup", json=payload).status_code == 201

    res = client.post("/employee/signup", json=payload)
    assert res.status_code == 409
    assert res.json()["error"] == "Email already registered"

    # email comparison ignores case
    res = client.post("/employee/signup", json={**payload, "email": "A@X.com"})
    assert res.status_code == 409

    count = client.get("/api/employees/count", headers=admin_headers).json()["count"]
    assert count == 1


def test_signup_validation_errors_are_400(client):
    res = client.post("/employee/signup", json={"name": "A", "email": "not-an-email", "password": "p"})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request"

    res = client.post("/employee/signup", json={"name": "A", "email": "a@x.com", "password": "x" * 73})
    assert res.status_code == 400


def test_employee_login(client):
    client.post("/employee/signup", json={"name": "Bo", "email": "bo@x.com", "password": "pw", "phone": "7"})

    res = client.post("/employee/login", json={"email": "bo@x.com", "password": "pw"})
    assert res.status_code == 200
    body = res.json()
    assert body["role"] == "employee"
    assert body["employee"]["name"] == "Bo"
    assert body["employee"]["phone"] == "7"

    res = client.post("/employee/login", json={"email": "bo@x.com", "password": "bad"})
    assert res.status_code == 401
    assert res.json() == {"error": "Invalid credentials"}
