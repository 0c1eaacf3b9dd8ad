from __future__ import annotations

import logging
from typing import Protocol

from .model import LeaveRequest

logger = logging.getLogger(__name__)


class LeaveNotifier(Protocol):
    """Sink notified when an employee submits a leave request (e.g. HR mailbox)."""

    def leave_request_created(self, leave: LeaveRequest) -> None:
        raise NotImplementedError


class LoggingLeaveNotifier(LeaveNotifier):
    """Default sink: records the event in the application log."""

    def leave_request_created(self, leave: LeaveRequest) -> None:
        logger.info(
            "New leave request %s from employee %s: %s %s..%s (%s%s)",
            leave.leave_id,
            leave.employee_id,
            leave.leave_type,
            leave.start_date.isoformat(),
            leave.end_date.isoformat(),
            leave.day_type.value,
            f", {leave.period.value}" if leave.period else "",
        )
