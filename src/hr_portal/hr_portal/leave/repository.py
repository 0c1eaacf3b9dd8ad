from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveDayType, LeavePeriod, RequestStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def get_approved_for_date(self, employee_id: str, on_date: date) -> Sequence[LeaveRequest]:
        """Approved leave rows with start_date <= on_date <= end_date."""

        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
        day_type: LeaveDayType,
        period: Optional[LeavePeriod],
        leave_type: str,
        reason: Optional[str],
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, leave_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def decide(
        self,
        *,
        leave_id: int,
        status: RequestStatus,
        rejection_reason: Optional[str] = None,
    ) -> bool:
        """Move a pending request to approved/rejected. False if it was not pending."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, limit: int = 200) -> Sequence[LeaveRequest]:
        raise NotImplementedError
