from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import truncate_to_minute
from ..core.enums import Checkpoint, PunchState
from ..core.exceptions import NoActiveSession, StoreConflict
from ..delays.detector import DelayDetector
from ..delays.model import DelayRecord
from .model import DailyPunchRecord, PunchOutcome
from .repository import PunchRepository
from .state import advance, next_action_label, next_checkpoint, state_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TodayView:
    record: DailyPunchRecord
    state: PunchState
    next_checkpoint: Optional[Checkpoint]
    next_action_label: str

    def to_dict(self) -> dict:
        return {
            "record": self.record.to_dict(),
            "state": self.state.value,
            "next_action": self.next_checkpoint.value if self.next_checkpoint else None,
            "next_action_label": self.next_action_label,
        }


class PunchService:
    """Records the day's punches in order and triggers delay detection on arrival."""

    def __init__(self, punches: PunchRepository, detector: DelayDetector | None = None):
        self._punches = punches
        self._detector = detector

    def record_punch(self, employee_id: Optional[str], *, now: datetime) -> PunchOutcome:
        if not employee_id:
            raise NoActiveSession("You must be signed in to punch")

        work_date = now.date()
        punch_time = truncate_to_minute(now)

        try:
            record, checkpoint = self._fill_next(employee_id, work_date, punch_time)
        except StoreConflict:
            # A concurrent punch won the race; retry once against the re-read state.
            # The retry fills whichever checkpoint is next, so a duplicate clock-in becomes lunch_out.
            logger.warning("Punch conflict for employee %s on %s; retrying", employee_id, work_date)
            record, checkpoint = self._fill_next(employee_id, work_date, punch_time)

        logger.info("Employee %s punched %s at %s on %s", employee_id, checkpoint.value, punch_time.strftime("%H:%M"), work_date)

        delay: Optional[DelayRecord] = None
        delay_check_failed = False
        if checkpoint == Checkpoint.MORNING_IN and self._detector is not None:
            try:
                delay = self._detector.evaluate_morning_arrival(
                    employee_id=employee_id,
                    work_date=work_date,
                    actual_time=punch_time,
                )
            except Exception:
                # The punch is already committed; detection failures are reported, never rolled back.
                logger.exception("Delay detection failed for employee %s on %s", employee_id, work_date)
                delay_check_failed = True

        return PunchOutcome(record=record, checkpoint=checkpoint, delay=delay, delay_check_failed=delay_check_failed)

    def _fill_next(self, employee_id: str, work_date: date, punch_time: time) -> tuple[DailyPunchRecord, Checkpoint]:
        existing = self._punches.get_for_employee_and_date(employee_id, work_date)
        checkpoint, _ = advance(state_of(existing))

        record = self._punches.upsert_punch(
            employee_id=employee_id,
            work_date=work_date,
            record_id=existing.record_id if existing else None,
            checkpoint=checkpoint,
            value=punch_time,
        )
        return record, checkpoint

    def get_today(self, employee_id: Optional[str], *, today: date) -> TodayView:
        if not employee_id:
            raise NoActiveSession("You must be signed in")

        record = self._punches.get_for_employee_and_date(employee_id, today) or DailyPunchRecord.empty(employee_id, today)
        state = state_of(record)
        checkpoint = next_checkpoint(record)
        return TodayView(
            record=record,
            state=state,
            next_checkpoint=checkpoint,
            next_action_label=next_action_label(record),
        )
