from __future__ import annotations

import logging
from datetime import date, time
from typing import Optional

from ..core.constants import DEFAULT_LATE_GRACE_MINUTES
from ..leave.resolver import LeaveOverlapResolver
from ..schedules.resolver import ScheduleResolver
from .model import DelayRecord
from .repository import DelayRepository
from .strategies import ArrivalStrategyFactory

logger = logging.getLogger(__name__)


class DelayDetector:
    """Decides, on the morning-in punch, whether a delay must be recorded."""

    def __init__(
        self,
        schedules: ScheduleResolver,
        leaves: LeaveOverlapResolver,
        delays: DelayRepository,
        *,
        grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
    ):
        self._schedules = schedules
        self._leaves = leaves
        self._delays = delays
        self._factory = ArrivalStrategyFactory(grace_minutes=int(grace_minutes))

    def evaluate_morning_arrival(self, *, employee_id: str, work_date: date, actual_time: time) -> Optional[DelayRecord]:
        coverage = self._leaves.resolve(employee_id, work_date)
        if coverage.covers_morning:
            # Afternoon-only leave does not get here: the employee is still expected at start time.
            logger.debug(
                "Employee %s is on %s leave on %s; no delay check",
                employee_id,
                "full-day" if coverage.full_day else "morning",
                work_date,
            )
            return None

        schedule = self._schedules.resolve(employee_id)
        if schedule is None:
            logger.debug("Employee %s has no work schedule; no delay check", employee_id)
            return None

        scheduled = schedule.start_time
        strategy = self._factory.for_arrival(work_date=work_date, scheduled=scheduled, actual=actual_time)
        new_delay = strategy.decide(
            employee_id=employee_id,
            work_date=work_date,
            scheduled=scheduled,
            actual=actual_time,
        )
        if new_delay is None:
            return None

        delay = self._delays.insert(new_delay)
        logger.info(
            "Delay recorded for employee %s on %s: scheduled %s, arrived %s (%s)",
            employee_id,
            work_date,
            scheduled.strftime("%H:%M"),
            actual_time.strftime("%H:%M"),
            delay.duration_text,
        )
        return delay
