from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol

from ..core.enums import Checkpoint
from .model import DailyPunchRecord


class PunchRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[DailyPunchRecord]:
        raise NotImplementedError

    def upsert_punch(
        self,
        *,
        employee_id: str,
        work_date: date,
        record_id: Optional[int],
        checkpoint: Checkpoint,
        value: time,
    ) -> DailyPunchRecord:
        """Insert the day's record (record_id None) or fill one still-empty field.

        Must fill a field at most once: raises StoreConflict when the row already
        exists on insert, or the field is already set / its predecessor is unset
        on update. Returns the stored record.
        """

        raise NotImplementedError
