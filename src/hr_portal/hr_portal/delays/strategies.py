from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core.constants import MORNING_CHECKIN_REASON
from .model import NewDelay


def compute_duration(*, work_date: date, scheduled: time, actual: time) -> timedelta:
    """Time elapsed since the scheduled time, never negative."""
    elapsed = datetime.combine(work_date, actual) - datetime.combine(work_date, scheduled)
    return max(elapsed, timedelta(0))


class ArrivalStrategy(ABC):
    """Strategy Pattern: decide what a morning arrival records."""

    @abstractmethod
    def decide(self, *, employee_id: str, work_date: date, scheduled: time, actual: time) -> Optional[NewDelay]:
        raise NotImplementedError


class OnTimeStrategy(ArrivalStrategy):
    """On time, or late but within the grace period."""

    def decide(self, *, employee_id: str, work_date: date, scheduled: time, actual: time) -> Optional[NewDelay]:
        return None


class LateStrategy(ArrivalStrategy):
    """Past the grace period; the delay is measured from the scheduled time itself."""

    def decide(self, *, employee_id: str, work_date: date, scheduled: time, actual: time) -> Optional[NewDelay]:
        return NewDelay(
            employee_id=employee_id,
            work_date=work_date,
            scheduled_time=scheduled,
            actual_time=actual,
            duration=compute_duration(work_date=work_date, scheduled=scheduled, actual=actual),
            reason=MORNING_CHECKIN_REASON,
        )


@dataclass
class ArrivalStrategyFactory:
    """Factory Pattern: choose the arrival strategy from the grace rule."""

    grace_minutes: int

    def for_arrival(self, *, work_date: date, scheduled: time, actual: time) -> ArrivalStrategy:
        threshold = datetime.combine(work_date, scheduled) + timedelta(minutes=self.grace_minutes)
        if datetime.combine(work_date, actual) <= threshold:
            return OnTimeStrategy()
        return LateStrategy()
