from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.hr_portal.hr_portal.core.enums import Checkpoint
from src.hr_portal.hr_portal.core.exceptions import AlreadyComplete, NoActiveSession, StoreConflict
from src.hr_portal.hr_portal.delays.detector import DelayDetector
from src.hr_portal.hr_portal.leave.resolver import LeaveOverlapResolver
from src.hr_portal.hr_portal.punches.service import PunchService
from src.hr_portal.hr_portal.schedules.resolver import ScheduleResolver
from tests.fakes import STANDARD_SCHEDULE, InMemoryDelays, InMemoryPunches, InMemorySchedules, build_detector

DAY = date(2026, 3, 2)
ORDER = [Checkpoint.MORNING_IN, Checkpoint.LUNCH_OUT, Checkpoint.LUNCH_IN, Checkpoint.EVENING_OUT]


def at(hour: int, minute: int, second: int = 0) -> datetime:
    return datetime(2026, 3, 2, hour, minute, second)


def make_service(punches: InMemoryPunches | None = None, **detector_kwargs):
    punches = punches or InMemoryPunches()
    detector_kwargs.setdefault("schedules", {"emp-1": STANDARD_SCHEDULE})
    detector, delays = build_detector(**detector_kwargs)
    return PunchService(punches, detector), punches, delays


def test_full_day_scenario_records_four_punches_and_one_delay():
    svc, punches, delays = make_service()

    for hh, mm in [(9, 20), (12, 0), (13, 5), (17, 0)]:
        svc.record_punch("emp-1", now=at(hh, mm))

    rec = punches.get_for_employee_and_date("emp-1", DAY)
    assert rec.to_dict() == {
        "id": 1,
        "employee_id": "emp-1",
        "date": "2026-03-02",
        "morning_in": "09:20",
        "lunch_out": "12:00",
        "lunch_in": "13:05",
        "evening_out": "17:00",
    }
    assert len(delays.all) == 1
    assert delays.all[0].duration_text == "00:20:00"


def test_filled_fields_always_form_a_prefix():
    svc, punches, _ = make_service()

    for i, hh in enumerate([8, 12, 13, 17]):
        outcome = svc.record_punch("emp-1", now=at(hh, 0))
        assert outcome.checkpoint == ORDER[i]
        assert outcome.record.filled() == ORDER[: i + 1]


def test_punch_after_complete_day_raises_and_does_not_write():
    svc, punches, _ = make_service()
    for hh in [9, 12, 13, 17]:
        svc.record_punch("emp-1", now=at(hh, 0))
    writes = punches.writes

    with pytest.raises(AlreadyComplete):
        svc.record_punch("emp-1", now=at(18, 0))
    assert punches.writes == writes


def test_punch_uses_minute_precision():
    svc, _, _ = make_service()

    outcome = svc.record_punch("emp-1", now=at(8, 59, 48))

    assert outcome.record.morning_in == time(8, 59)


def test_only_morning_in_triggers_delay_detection():
    svc, _, delays = make_service()

    first = svc.record_punch("emp-1", now=at(8, 55))
    second = svc.record_punch("emp-1", now=at(12, 30))

    assert first.delay is None
    assert second.delay is None
    assert delays.all == []


def test_days_and_employees_are_independent():
    svc, punches, _ = make_service()

    svc.record_punch("emp-1", now=at(9, 0))
    svc.record_punch("emp-2", now=at(9, 0))
    svc.record_punch("emp-1", now=datetime(2026, 3, 3, 9, 0))

    assert punches.get_for_employee_and_date("emp-2", DAY).filled() == [Checkpoint.MORNING_IN]
    assert punches.get_for_employee_and_date("emp-1", date(2026, 3, 3)).filled() == [Checkpoint.MORNING_IN]


def test_missing_identity_raises_no_active_session():
    svc, punches, _ = make_service()

    with pytest.raises(NoActiveSession):
        svc.record_punch(None, now=at(9, 0))
    assert punches.writes == 0


def test_store_conflict_is_retried_once_with_fresh_state():
    punches = InMemoryPunches()
    punches.races_to_lose = 1
    svc, _, _ = make_service(punches)

    outcome = svc.record_punch("emp-1", now=at(9, 0))

    # The concurrent punch took morning_in, so the retry fills the next checkpoint.
    assert outcome.checkpoint == Checkpoint.LUNCH_OUT
    assert outcome.record.filled() == [Checkpoint.MORNING_IN, Checkpoint.LUNCH_OUT]


def test_second_store_conflict_surfaces():
    punches = InMemoryPunches()
    punches.races_to_lose = 2
    svc, _, _ = make_service(punches)

    with pytest.raises(StoreConflict):
        svc.record_punch("emp-1", now=at(9, 0))


class ExplodingLeaves:
    def get_approved_for_date(self, employee_id, on_date):
        raise RuntimeError("leave store unavailable")


def test_delay_detection_failure_does_not_fail_the_punch():
    punches = InMemoryPunches()
    detector = DelayDetector(
        ScheduleResolver(InMemorySchedules({"emp-1": STANDARD_SCHEDULE})),
        LeaveOverlapResolver(ExplodingLeaves()),
        InMemoryDelays(),
    )
    svc = PunchService(punches, detector)

    outcome = svc.record_punch("emp-1", now=at(9, 30))

    assert outcome.delay_check_failed is True
    assert outcome.delay is None
    assert punches.get_for_employee_and_date("emp-1", DAY).morning_in == time(9, 30)


def test_get_today_reports_next_action():
    svc, _, _ = make_service()
    svc.record_punch("emp-1", now=at(9, 0))

    view = svc.get_today("emp-1", today=DAY)

    assert view.next_checkpoint == Checkpoint.LUNCH_OUT
    assert view.to_dict()["next_action_label"] == "Start lunch break"


def test_get_today_without_record_is_empty():
    svc, _, _ = make_service()

    view = svc.get_today("emp-1", today=DAY)

    assert view.record.record_id is None
    assert view.state.value == "EMPTY"
    assert view.next_checkpoint == Checkpoint.MORNING_IN
