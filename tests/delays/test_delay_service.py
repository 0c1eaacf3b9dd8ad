from datetime import date, time, timedelta

import pytest

from src.hr_portal.hr_portal.core.enums import RequestStatus
from src.hr_portal.hr_portal.core.exceptions import StoreConflict, ValidationError
from src.hr_portal.hr_portal.delays.model import NewDelay
from src.hr_portal.hr_portal.delays.service import DelayService
from src.hr_portal.hr_portal.delays.strategies import ArrivalStrategyFactory, LateStrategy, OnTimeStrategy, compute_duration
from tests.fakes import InMemoryDelays


def _new_delay(day: date) -> NewDelay:
    return NewDelay(
        employee_id="emp-1",
        work_date=day,
        scheduled_time=time(9, 0),
        actual_time=time(9, 20),
        duration=timedelta(minutes=20),
        reason="morning check-in",
    )


def test_approve_pending_delay():
    repo = InMemoryDelays()
    delay = repo.insert(_new_delay(date(2026, 3, 2)))

    DelayService(repo).approve(delay_id=delay.delay_id)

    assert repo.get_by_id(delay.delay_id).status == RequestStatus.APPROVED


def test_cannot_decide_twice():
    repo = InMemoryDelays()
    delay = repo.insert(_new_delay(date(2026, 3, 2)))
    svc = DelayService(repo)
    svc.reject(delay_id=delay.delay_id)

    with pytest.raises(ValidationError):
        svc.approve(delay_id=delay.delay_id)
    assert repo.get_by_id(delay.delay_id).status == RequestStatus.REJECTED


def test_unknown_delay_raises():
    with pytest.raises(ValidationError):
        DelayService(InMemoryDelays()).approve(delay_id=42)


def test_list_for_employee_newest_first():
    repo = InMemoryDelays()
    repo.insert(_new_delay(date(2026, 3, 2)))
    repo.insert(_new_delay(date(2026, 3, 4)))

    rows = DelayService(repo).list_for_employee("emp-1")

    assert [r.work_date for r in rows] == [date(2026, 3, 4), date(2026, 3, 2)]
    assert rows[0].to_dict()["duration"] == "00:20:00"


def test_store_rejects_second_delay_for_same_day():
    repo = InMemoryDelays()
    repo.insert(_new_delay(date(2026, 3, 2)))

    with pytest.raises(StoreConflict):
        repo.insert(_new_delay(date(2026, 3, 2)))


def test_factory_uses_grace_as_gate_only():
    factory = ArrivalStrategyFactory(grace_minutes=5)
    day = date(2026, 3, 2)

    assert isinstance(factory.for_arrival(work_date=day, scheduled=time(9, 0), actual=time(9, 5)), OnTimeStrategy)
    assert isinstance(factory.for_arrival(work_date=day, scheduled=time(9, 0), actual=time(9, 6)), LateStrategy)


def test_compute_duration_is_never_negative():
    day = date(2026, 3, 2)

    assert compute_duration(work_date=day, scheduled=time(9, 0), actual=time(8, 0)) == timedelta(0)
    assert compute_duration(work_date=day, scheduled=time(9, 0), actual=time(9, 6)) == timedelta(minutes=6)
