from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_hhmm


@dataclass(frozen=True)
class WorkSchedule:
    """An employee's usual working day, as local times of day."""

    start_time: time
    end_time: Optional[time] = None
    break_start_time: Optional[time] = None
    break_end_time: Optional[time] = None

    @classmethod
    def from_json(cls, doc: Optional[Mapping[str, Any]]) -> Optional["WorkSchedule"]:
        """Build from the employees.work_schedule document.

        A document without startTime carries no lateness concept and maps to None.
        """
        if not doc or not doc.get("startTime"):
            return None

        def _opt(key: str) -> Optional[time]:
            value = doc.get(key)
            return parse_hhmm(value) if value else None

        return cls(
            start_time=parse_hhmm(doc["startTime"]),
            end_time=_opt("endTime"),
            break_start_time=_opt("breakStartTime"),
            break_end_time=_opt("breakEndTime"),
        )
