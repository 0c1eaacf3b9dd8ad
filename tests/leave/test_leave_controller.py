from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace

import pytest

from src.hr_portal.hr_portal.delays.detector import DelayDetector
from src.hr_portal.hr_portal.delays.service import DelayService
from src.hr_portal.hr_portal.leave.resolver import LeaveOverlapResolver
from src.hr_portal.hr_portal.leave.service import LeaveService
from src.hr_portal.hr_portal.main import create_app
from src.hr_portal.hr_portal.punches import controller as punch_controller
from src.hr_portal.hr_portal.punches.service import PunchService
from src.hr_portal.hr_portal.schedules.resolver import ScheduleResolver
from tests.fakes import STANDARD_SCHEDULE, InMemoryDelays, InMemoryLeaves, InMemoryPunches, InMemorySchedules


@pytest.fixture
def stores():
    return SimpleNamespace(leaves=InMemoryLeaves(), delays=InMemoryDelays())


@pytest.fixture
def app(monkeypatch, stores):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(punch_controller, "now_local", lambda: datetime(2026, 3, 10, 9, 20))
    detector = DelayDetector(
        ScheduleResolver(InMemorySchedules({"emp-1": STANDARD_SCHEDULE})),
        LeaveOverlapResolver(stores.leaves),
        stores.delays,
    )
    container = SimpleNamespace(
        punch_service=PunchService(InMemoryPunches(), detector),
        delay_service=DelayService(stores.delays),
        leave_service=LeaveService(stores.leaves),
    )
    return create_app(container=container)


def _client(app, employee_id, role=None):
    client = app.test_client()
    with client.session_transaction() as sess:
        sess["employee_id"] = employee_id
        if role:
            sess["role"] = role
    return client


@pytest.fixture
def client(app):
    return _client(app, "emp-1")


@pytest.fixture
def hr_client(app):
    return _client(app, "hr-1", role="hr")


def test_create_and_list_leave_requests(client):
    resp = client.post(
        "/api/leave-requests",
        json={"start_date": "2026-03-10", "day_type": "half", "period": "afternoon", "reason": "appointment"},
    )
    assert resp.status_code == 201

    leaves = client.get("/api/leave-requests").get_json()["leave_requests"]
    assert leaves[0]["period"] == "afternoon"
    assert leaves[0]["status"] == "pending"


def test_invalid_leave_request_is_bad_request(client):
    resp = client.post("/api/leave-requests", json={"start_date": "tomorrow"})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "ValidationError"


def test_employee_cannot_approve_leave(client):
    leave_id = client.post("/api/leave-requests", json={"start_date": "2026-03-10"}).get_json()["id"]

    resp = client.post(f"/api/leave-requests/{leave_id}/approve")

    assert resp.status_code == 403
    assert resp.get_json()["error"] == "AuthorizationError"


def test_decision_requires_session(app):
    resp = app.test_client().post("/api/leave-requests/1/approve")

    assert resp.status_code == 401


def test_approved_leave_suppresses_delay(client, hr_client, stores):
    leave_id = client.post("/api/leave-requests", json={"start_date": "2026-03-10"}).get_json()["id"]

    resp = hr_client.post(f"/api/leave-requests/{leave_id}/approve")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "approved"

    punch = client.post("/api/punches").get_json()
    assert punch["checkpoint"] == "morning_in"
    assert punch["delay"] is None
    assert stores.delays.all == []


def test_reject_leave_keeps_reason_and_cannot_be_decided_twice(client, hr_client):
    leave_id = client.post("/api/leave-requests", json={"start_date": "2026-03-10"}).get_json()["id"]

    resp = hr_client.post(f"/api/leave-requests/{leave_id}/reject", json={"rejection_reason": "peak week"})
    assert resp.status_code == 200

    leaves = client.get("/api/leave-requests").get_json()["leave_requests"]
    assert leaves[0]["status"] == "rejected"
    assert leaves[0]["rejection_reason"] == "peak week"

    again = hr_client.post(f"/api/leave-requests/{leave_id}/approve")
    assert again.status_code == 400
    assert again.get_json()["error"] == "ValidationError"


def test_deciding_unknown_leave_is_bad_request(hr_client):
    resp = hr_client.post("/api/leave-requests/999/reject")

    assert resp.status_code == 400
