from __future__ import annotations

from typing import Optional

from .model import WorkSchedule
from .repository import ScheduleRepository


class ScheduleResolver:
    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def resolve(self, employee_id: str) -> Optional[WorkSchedule]:
        return self._schedules.get_employee_schedule(employee_id)
