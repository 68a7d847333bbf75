"""HTTP surface tests with FastAPI TestClient and dependency overrides."""

from __future__ import annotations

import json
from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient

from backoffice.adapters.local_storage.local_record_store import LocalRecordStore
from backoffice.adapters.persistence.database import get_session
from backoffice.adapters.persistence.kv_repository import InMemoryKeyValueStore
from backoffice.infrastructure.api.dependencies import get_clock, get_local_store, get_record_store
from backoffice.main import app

NOW = datetime(2024, 3, 15, 10, 30)


class FakeSession:
    async def execute(self, statement):
        return None


async def fake_session():
    yield FakeSession()


@pytest.fixture
def client():
    store = LocalRecordStore(InMemoryKeyValueStore(), today=lambda: date(2024, 3, 15))
    app.dependency_overrides[get_record_store] = lambda: store
    app.dependency_overrides[get_local_store] = lambda: store
    app.dependency_overrides[get_clock] = lambda: (lambda: NOW)
    app.dependency_overrides[get_session] = fake_session
    yield TestClient(app)
    app.dependency_overrides.clear()


# ─── Health ──────────────────────────────────────────────────────────


def test_health(client):
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["storage"] == "local"


# ─── Records ─────────────────────────────────────────────────────────


def test_create_list_update_delete(client):
    created = client.post("/api/clients", json={"name": "ABC", "phone": "0181", "status": "active"}).json()
    assert created["success"]
    assert created["message"] == "Client added successfully"
    record_id = created["data"]["id"]

    listed = client.get("/api/clients").json()
    assert [r["id"] for r in listed["data"]] == [record_id]
    assert listed["summary"] == {"total": 1}

    updated = client.put(f"/api/clients/{record_id}", json={"name": "ABC", "phone": "0199"}).json()
    assert updated["success"]
    assert updated["data"]["phone"] == "0199"

    deleted = client.delete(f"/api/clients/{record_id}").json()
    assert deleted["message"] == "Client deleted successfully"
    assert client.get("/api/clients").json()["data"] == []


def test_list_filters_from_query(client):
    client.post("/api/employees", json={"name": "Karim", "phone": "1", "role": "guard", "status": "active"})
    client.post("/api/employees", json={"name": "Salma", "phone": "2", "role": "supervisor", "status": "active"})

    body = client.get("/api/employees", params={"search": "kar", "role": "guard"}).json()
    assert [r["name"] for r in body["data"]] == ["Karim"]
    assert body["total"] == 2


def test_guard_duty_listed_per_date(client):
    for day in ("2024-03-15", "2024-03-14"):
        client.post("/api/guard-duty", json={"date": day, "employeeId": "E1", "clientId": "C1", "status": "present"})

    body = client.get("/api/guard-duty", params={"date": "2024-03-15"}).json()
    assert len(body["data"]) == 1
    assert body["summary"] == {"total": 1, "present": 1, "absent": 0}


def test_validation_error_is_a_failed_response(client):
    response = client.post("/api/guard-duty", json={"clientId": "C1"})
    assert response.status_code == 200
    assert response.json() == {
        "success": False,
        "data": None,
        "message": "Please select an employee from the dropdown",
    }


def test_update_unknown_record(client):
    body = client.put("/api/clients/CLI-404", json={"name": "x", "phone": "1"}).json()
    assert not body["success"]
    assert body["message"] == "Record not found"


def test_unknown_entity_is_404(client):
    assert client.get("/api/spaceships").status_code == 404


def test_non_object_body_is_400(client):
    assert client.post("/api/clients", json=[1, 2]).status_code == 400
    response = client.post("/api/clients", content="{oops", headers={"Content-Type": "application/json"})
    assert response.status_code == 400


def test_forms(client):
    assert client.get("/api/invoices/new").json()["data"]["dueDate"] == "2024-04-14"
    assert client.get("/api/clients/CLI-404").status_code == 404


# ─── Vessel orders ───────────────────────────────────────────────────


ORDER = {
    "clientId": "CLI-1",
    "clientName": "ABC Shipping",
    "motherVessel": "MV Star",
    "workerName": "Rahim",
    "startDate": "2024-01-01",
    "startShift": "day",
    "endDate": "2024-01-03",
    "endShift": "night",
    "ratePerDay": 500,
    "conveyance": 200,
    "status": "active",
}


def test_quote(client):
    body = client.post("/api/vessel-orders/quote", json=ORDER).json()
    assert body == {"dutyDays": 2.5, "revenue": 1250.0, "totalAmount": 1450.0}


def test_report(client):
    client.post("/api/vessel-orders", json=ORDER)
    client.post("/api/vessel-orders", json={**ORDER, "clientName": "", "clientId": "CLI-2"})

    body = client.get("/api/vessel-orders/report").json()
    groups = body["data"]["groups"]
    assert [g["clientName"] for g in groups] == ["ABC Shipping", "Unknown Client"]
    assert body["data"]["summary"]["totalAmount"] == 2900

    filtered = client.get("/api/vessel-orders/report", params={"client": "CLI-2"}).json()
    assert filtered["data"]["summary"]["clientCount"] == 1


# ─── Billing helpers ─────────────────────────────────────────────────


def test_mark_salary_paid(client):
    created = client.post(
        "/api/salary",
        json={"employeeId": "E1", "month": 3, "year": 2024, "grossSalary": 10000, "advances": 1000},
    ).json()
    assert created["data"]["netPay"] == 9000

    body = client.post(f"/api/salary/{created['data']['id']}/mark-paid").json()
    assert body["success"]
    assert body["data"]["status"] == "paid"
    assert body["data"]["paidDate"] == "2024-03-15"


def test_next_invoice_number(client):
    assert client.get("/api/invoices/next-number").json()["data"]["invoiceNumber"] == "INV-0001"
    client.post("/api/invoices", json={"clientId": "C1", "amount": 100})
    assert client.get("/api/invoices/next-number").json()["data"]["invoiceNumber"] == "INV-0002"


# ─── Dashboard ───────────────────────────────────────────────────────


def test_dashboard(client):
    client.post("/api/advances", json={"employeeId": "E1", "amount": 500, "status": "pending"})
    body = client.get("/api/dashboard").json()
    assert body["success"]
    assert body["data"]["pendingAdvances"] == 1


# ─── Exec protocol ───────────────────────────────────────────────────


def test_exec_write_then_read(client):
    created = client.post(
        "/api/exec",
        content=json.dumps({"action": "addEmployee", "data": {"name": "Karim"}}),
        headers={"Content-Type": "text/plain"},
    ).json()
    assert created["success"]
    assert created["message"] == "Added successfully"

    listed = client.get("/api/exec", params={"action": "getEmployees"}).json()
    assert [r["name"] for r in listed["data"]] == ["Karim"]


def test_exec_unknown_action(client):
    body = client.get("/api/exec", params={"action": "dropEverything"}).json()
    assert body == {"success": False, "data": None, "message": "Unknown action: dropEverything"}


def test_exec_malformed_body(client):
    response = client.post("/api/exec", content="not json", headers={"Content-Type": "text/plain"})
    assert response.status_code == 400
