from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..common.datetime_utils import format_duration, format_hhmm
from ..core.enums import RequestStatus


@dataclass(frozen=True)
class NewDelay:
    employee_id: str
    work_date: date
    scheduled_time: time
    actual_time: time
    duration: timedelta
    reason: str
    status: RequestStatus = RequestStatus.PENDING


@dataclass(frozen=True)
class DelayRecord:
    delay_id: int
    employee_id: str
    work_date: date
    scheduled_time: time
    actual_time: time
    duration: timedelta
    reason: Optional[str]
    status: RequestStatus
    created_at: Optional[datetime] = None

    @property
    def duration_text(self) -> str:
        return format_duration(self.duration)

    def to_dict(self) -> dict:
        return {
            "id": self.delay_id,
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
            "scheduled_time": format_hhmm(self.scheduled_time),
            "actual_time": format_hhmm(self.actual_time),
            "duration": self.duration_text,
            "reason": self.reason,
            "status": self.status.value,
        }
