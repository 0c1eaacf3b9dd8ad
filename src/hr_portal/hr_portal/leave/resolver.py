from __future__ import annotations

import logging
from datetime import date

from ..core.enums import LeaveDayType, LeavePeriod, RequestStatus
from .model import NO_COVERAGE, LeaveCoverage, LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


def coverage_of(leave: LeaveRequest) -> LeaveCoverage:
    """Halves of the day a single leave row covers, ignoring its status."""
    if leave.day_type == LeaveDayType.FULL:
        return LeaveCoverage(covers_morning=True, covers_afternoon=True)
    if leave.period == LeavePeriod.MORNING:
        return LeaveCoverage(covers_morning=True)
    if leave.period == LeavePeriod.AFTERNOON:
        return LeaveCoverage(covers_afternoon=True)

    logger.warning("Half-day leave %s has no period; it covers neither half", leave.leave_id)
    return NO_COVERAGE


class LeaveOverlapResolver:
    def __init__(self, leaves: LeaveRepository):
        self._leaves = leaves

    def resolve(self, employee_id: str, on_date: date) -> LeaveCoverage:
        coverage = NO_COVERAGE
        for leave in self._leaves.get_approved_for_date(employee_id, on_date):
            # Pending/rejected leave must never suppress anything, whatever the store returned.
            if leave.status != RequestStatus.APPROVED or not leave.includes(on_date):
                continue
            coverage = coverage | coverage_of(leave)
        return coverage
