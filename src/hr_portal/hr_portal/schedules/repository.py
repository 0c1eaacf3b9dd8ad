from __future__ import annotations

from typing import Optional, Protocol

from .model import WorkSchedule


class ScheduleRepository(Protocol):
    def get_employee_schedule(self, employee_id: str) -> Optional[WorkSchedule]:
        """Schedule configured on the employee, None if unknown or unset."""

        raise NotImplementedError
