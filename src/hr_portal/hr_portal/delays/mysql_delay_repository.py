from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import format_duration
from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_interval, normalize_mysql_time
from .model import DelayRecord, NewDelay
from .repository import DelayRepository

_SELECT = """
    SELECT delay_id, employee_id, work_date, scheduled_time, actual_time, duration, reason, status, created_at
    FROM delays
"""


def _row_to_delay(r: dict) -> DelayRecord:
    return DelayRecord(
        delay_id=int(r["delay_id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        scheduled_time=normalize_mysql_time(r["scheduled_time"]),
        actual_time=normalize_mysql_time(r["actual_time"]),
        duration=normalize_mysql_interval(r["duration"]),
        reason=r.get("reason"),
        status=RequestStatus(r["status"]),
        created_at=r.get("created_at"),
    )


class MySQLDelayRepository(DelayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(self, delay: NewDelay) -> DelayRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO delays(employee_id, work_date, scheduled_time, actual_time, duration, reason, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    delay.employee_id,
                    delay.work_date,
                    delay.scheduled_time,
                    delay.actual_time,
                    format_duration(delay.duration),
                    delay.reason,
                    delay.status.value,
                ),
            )
            cur.execute(_SELECT + " WHERE delay_id=%s", (int(cur.lastrowid),))
            return _row_to_delay(fetchone(cur))

    def get_by_id(self, delay_id: int) -> Optional[DelayRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE delay_id=%s", (int(delay_id),))
            r = fetchone(cur)
            return _row_to_delay(r) if r else None

    def decide(self, *, delay_id: int, status: RequestStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE delays SET status=%s WHERE delay_id=%s AND status=%s",
                (status.value, int(delay_id), RequestStatus.PENDING.value),
            )
            return cur.rowcount > 0

    def list_for_employee(self, employee_id: str, *, limit: int = 200) -> Sequence[DelayRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE employee_id=%s ORDER BY work_date DESC LIMIT %s",
                (employee_id, int(limit)),
            )
            return [_row_to_delay(r) for r in fetchall(cur)]
