from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveDayType, LeavePeriod, RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    leave_id: int
    employee_id: str
    start_date: date
    end_date: date
    day_type: LeaveDayType
    period: Optional[LeavePeriod]
    status: RequestStatus
    leave_type: str = "vacation"
    reason: Optional[str] = None
    rejection_reason: Optional[str] = None
    created_at: Optional[datetime] = None

    def includes(self, on_date: date) -> bool:
        return self.start_date <= on_date <= self.end_date

    def to_dict(self) -> dict:
        return {
            "id": self.leave_id,
            "employee_id": self.employee_id,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "day_type": self.day_type.value,
            "period": self.period.value if self.period else None,
            "status": self.status.value,
            "leave_type": self.leave_type,
            "reason": self.reason,
            "rejection_reason": self.rejection_reason,
        }


@dataclass(frozen=True)
class LeaveCoverage:
    """Which halves of a work day are covered by approved leave."""

    covers_morning: bool = False
    covers_afternoon: bool = False

    @property
    def full_day(self) -> bool:
        return self.covers_morning and self.covers_afternoon

    def __or__(self, other: "LeaveCoverage") -> "LeaveCoverage":
        return LeaveCoverage(
            covers_morning=self.covers_morning or other.covers_morning,
            covers_afternoon=self.covers_afternoon or other.covers_afternoon,
        )


NO_COVERAGE = LeaveCoverage()
