from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import TYPE_CHECKING, List, Optional

from ..common.datetime_utils import format_hhmm
from ..core.enums import Checkpoint
from ..core.exceptions import ValidationError

if TYPE_CHECKING:
    from ..delays.model import DelayRecord


@dataclass(frozen=True)
class DailyPunchRecord:
    """One employee's punches for one work date.

    Filled checkpoints always form a prefix of morning_in, lunch_out, lunch_in,
    evening_out; any other shape is rejected at construction.
    """

    employee_id: str
    work_date: date
    record_id: Optional[int] = None
    morning_in: Optional[time] = None
    lunch_out: Optional[time] = None
    lunch_in: Optional[time] = None
    evening_out: Optional[time] = None

    def __post_init__(self) -> None:
        seen_gap = False
        for checkpoint in Checkpoint:
            if self.get(checkpoint) is None:
                seen_gap = True
            elif seen_gap:
                raise ValidationError(f"{checkpoint.value} cannot be set before the earlier checkpoints")

    @classmethod
    def empty(cls, employee_id: str, work_date: date) -> "DailyPunchRecord":
        return cls(employee_id=employee_id, work_date=work_date)

    def get(self, checkpoint: Checkpoint) -> Optional[time]:
        return getattr(self, checkpoint.value)

    def filled(self) -> List[Checkpoint]:
        return [c for c in Checkpoint if self.get(c) is not None]

    def to_dict(self) -> dict:
        out = {
            "id": self.record_id,
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
        }
        for checkpoint in Checkpoint:
            out[checkpoint.value] = format_hhmm(self.get(checkpoint))
        return out


@dataclass(frozen=True)
class PunchOutcome:
    record: DailyPunchRecord
    checkpoint: Checkpoint
    delay: Optional["DelayRecord"] = None
    delay_check_failed: bool = False
