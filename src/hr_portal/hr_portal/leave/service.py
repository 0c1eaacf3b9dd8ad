from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import LeaveDayType, LeavePeriod, RequestStatus
from ..core.exceptions import ValidationError
from .model import LeaveRequest
from .notifier import LeaveNotifier, LoggingLeaveNotifier
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, leaves: LeaveRepository, notifier: LeaveNotifier | None = None):
        self._leaves = leaves
        self._notifier = notifier or LoggingLeaveNotifier()

    @staticmethod
    def _parse_day_type(value: str | LeaveDayType) -> LeaveDayType:
        try:
            return LeaveDayType(value)
        except ValueError:
            raise ValidationError("Day type must be 'full' or 'half'")

    @staticmethod
    def _parse_period(value: str | LeavePeriod | None) -> Optional[LeavePeriod]:
        if value in (None, ""):
            return None
        try:
            return LeavePeriod(value)
        except ValueError:
            raise ValidationError("Period must be 'morning' or 'afternoon'")

    def create(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
        day_type: str | LeaveDayType,
        period: str | LeavePeriod | None = None,
        leave_type: str = "vacation",
        reason: str | None = None,
    ) -> int:
        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")

        day_type = self._parse_day_type(day_type)
        period = self._parse_period(period)
        if day_type == LeaveDayType.HALF and period is None:
            raise ValidationError("A half-day leave needs a period (morning or afternoon)")
        if day_type == LeaveDayType.FULL:
            period = None

        leave_id = self._leaves.create(
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            day_type=day_type,
            period=period,
            leave_type=require_non_empty(leave_type, "Leave type"),
            reason=optional_text(reason),
        )

        created = self._leaves.get_by_id(leave_id)
        if created:
            try:
                self._notifier.leave_request_created(created)
            except Exception:
                logger.exception("HR notification failed for leave request %s", leave_id)
        return leave_id

    def approve(self, *, leave_id: int) -> None:
        self._decide(leave_id=leave_id, status=RequestStatus.APPROVED)

    def reject(self, *, leave_id: int, rejection_reason: str = "") -> None:
        self._decide(leave_id=leave_id, status=RequestStatus.REJECTED, rejection_reason=optional_text(rejection_reason))

    def _decide(self, *, leave_id: int, status: RequestStatus, rejection_reason: str | None = None) -> None:
        req = self._leaves.get_by_id(int(leave_id))
        if not req:
            raise ValidationError("Leave request not found")
        if req.status != RequestStatus.PENDING:
            raise ValidationError("Leave request has already been decided")

        if not self._leaves.decide(leave_id=int(leave_id), status=status, rejection_reason=rejection_reason):
            raise ValidationError("Leave request has already been decided")
        logger.info("Leave request %s %s", leave_id, status.value)

    def list_for_employee(self, employee_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[LeaveRequest]:
        return self._leaves.list_for_employee(employee_id, limit=limit)
