from __future__ import annotations

from datetime import date, datetime
from types import SimpleNamespace

import pytest

from src.hr_portal.hr_portal.delays.service import DelayService
from src.hr_portal.hr_portal.leave.service import LeaveService
from src.hr_portal.hr_portal.main import create_app
from src.hr_portal.hr_portal.punches import controller as punch_controller
from src.hr_portal.hr_portal.punches.service import PunchService
from tests.fakes import STANDARD_SCHEDULE, InMemoryLeaves, InMemoryPunches, build_detector


@pytest.fixture
def clock(monkeypatch):
    state = {"now": datetime(2026, 3, 2, 9, 20)}
    monkeypatch.setattr(punch_controller, "now_local", lambda: state["now"])
    return state


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    detector, delays = build_detector(schedules={"emp-1": STANDARD_SCHEDULE})
    container = SimpleNamespace(
        punch_service=PunchService(InMemoryPunches(), detector),
        delay_service=DelayService(delays),
        leave_service=LeaveService(InMemoryLeaves()),
    )
    return create_app(container=container)


@pytest.fixture
def client(app):
    client = app.test_client()
    with client.session_transaction() as sess:
        sess["employee_id"] = "emp-1"
    return client


def test_punch_requires_session(app, clock):
    resp = app.test_client().post("/api/punches")

    assert resp.status_code == 401
    assert resp.get_json()["error"] == "NoActiveSession"


def test_first_punch_returns_record_and_delay(client, clock):
    resp = client.post("/api/punches")

    body = resp.get_json()
    assert resp.status_code == 201
    assert body["checkpoint"] == "morning_in"
    assert body["record"]["morning_in"] == "09:20"
    assert body["delay"]["duration"] == "00:20:00"

    delays = client.get("/api/delays").get_json()["delays"]
    assert [d["duration"] for d in delays] == ["00:20:00"]


def test_fifth_punch_is_conflict(client, clock):
    for hh, mm in [(9, 0), (12, 0), (13, 0), (17, 0)]:
        clock["now"] = datetime(2026, 3, 2, hh, mm)
        assert client.post("/api/punches").status_code == 201

    resp = client.post("/api/punches")

    assert resp.status_code == 409
    assert resp.get_json()["error"] == "AlreadyComplete"


def test_today_view_shows_next_action(client, clock):
    client.post("/api/punches")

    body = client.get("/api/punches/today").get_json()

    assert body["next_action"] == "lunch_out"
    assert body["next_action_label"] == "Start lunch break"
    assert body["record"]["date"] == date(2026, 3, 2).isoformat()

