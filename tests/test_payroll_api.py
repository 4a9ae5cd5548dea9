from __future__ import annotations

import pytest


def test_process_payroll_reference_figures(client, admin_headers, employee):
    res = client.post(
        "/payroll",
        json={"employeeId": employee["id"], "basicSalary": 1000, "bonus": 100, "deductions": 50, "taxPercent": 10},
        headers=admin_headers,
    )
    assert res.status_code == 201
    row = res.json()
    assert row["employee_id"] == employee["id"]
    assert row["tax_amount"] == 110
    assert row["net_salary"] == 940
    assert row["payment_date"]


def test_optional_fields_default_to_zero(client, admin_headers, employee):
    res = client.post(
        "/payroll",
        json={"employeeId": employee["id"], "basicSalary": "1500.75"},
        headers=admin_headers,
    )
    row = res.json()
    assert row["bonus"] == 0
    assert row["deductions"] == 0
    assert row["tax_percent"] == 0
    assert row["net_salary"] == 1500.75


def test_payroll_requires_basic_salary(client, admin_headers, employee):
    res = client.post("/payroll", json={"employeeId": employee["id"]}, headers=admin_headers)
    assert res.status_code == 400


def test_payroll_for_unknown_employee_is_404(client, admin_headers):
    res = client.post("/payroll", json={"employeeId": 999, "basicSalary": 10}, headers=admin_headers)
    assert res.status_code == 404


def test_only_admin_processes_payroll(client, employee):
    res = client.post(
        "/payroll",
        json={"employeeId": employee["id"], "basicSalary": 10},
        headers=employee["headers"],
    )
    assert res.status_code == 403


def test_payroll_history_newest_first(client, admin_headers, employee):
    for basic in (100, 200, 300):
        client.post("/payroll", json={"employeeId": employee["id"], "basicSalary": basic}, headers=admin_headers)

    rows = client.get(f"/payroll/{employee['id']}", headers=employee["headers"]).json()
    assert [r["basic_salary"] for r in rows] == [300, 200, 100]


def test_payroll_history_rejects_non_positive_id(client, admin_headers):
    res = client.get("/payroll/0", headers=admin_headers)
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid employee ID"}

    res = client.get("/payroll/abc", headers=admin_headers)
    assert res.status_code == 400


@pytest.mark.parametrize(
    "overrides",
    [
        {"basicSalary": "1e30"},
        {"basicSalary": 10, "bonus": "12345678901.00"},
        {"basicSalary": 10, "taxPercent": "1000"},
        {"basicSalary": "10.001"},
    ],
)
def test_amounts_outside_column_range_are_400(client, admin_headers, employee, overrides):
    res = client.post("/payroll", json={"employeeId": employee["id"], **overrides}, headers=admin_headers)
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request"


def test_net_salary_overflowing_column_is_400(client, admin_headers, employee):
    res = client.post(
        "/payroll",
        json={"employeeId": employee["id"], "basicSalary": "9999999999.99", "bonus": "9999999999.99"},
        headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Payroll amounts exceed the supported range"}
    assert client.get(f"/payroll/{employee['id']}", headers=admin_headers).json() == []
