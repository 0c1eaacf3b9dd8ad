from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import RequestStatus
from ..core.exceptions import ValidationError
from .model import DelayRecord
from .repository import DelayRepository

logger = logging.getLogger(__name__)


class DelayService:
    """HR review of detected delays."""

    def __init__(self, delays: DelayRepository):
        self._delays = delays

    def list_for_employee(self, employee_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[DelayRecord]:
        return self._delays.list_for_employee(employee_id, limit=limit)

    def approve(self, *, delay_id: int) -> None:
        self._decide(delay_id=delay_id, status=RequestStatus.APPROVED)

    def reject(self, *, delay_id: int) -> None:
        self._decide(delay_id=delay_id, status=RequestStatus.REJECTED)

    def _decide(self, *, delay_id: int, status: RequestStatus) -> None:
        delay = self._delays.get_by_id(int(delay_id))
        if not delay:
            raise ValidationError("Delay not found")
        if delay.status != RequestStatus.PENDING:
            raise ValidationError("Delay has already been reviewed")

        if not self._delays.decide(delay_id=int(delay_id), status=status):
            raise ValidationError("Delay has already been reviewed")
        logger.info("Delay %s %s", delay_id, status.value)
