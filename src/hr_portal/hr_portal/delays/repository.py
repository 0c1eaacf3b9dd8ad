from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import DelayRecord, NewDelay


class DelayRepository(Protocol):
    def insert(self, delay: NewDelay) -> DelayRecord:
        """Persist a delay; StoreConflict if one already exists for (employee, date)."""

        raise NotImplementedError

    def get_by_id(self, delay_id: int) -> Optional[DelayRecord]:
        raise NotImplementedError

    def decide(self, *, delay_id: int, status: RequestStatus) -> bool:
        """Move a pending delay to approved/rejected. False if it was not pending."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, limit: int = 200) -> Sequence[DelayRecord]:
        raise NotImplementedError
