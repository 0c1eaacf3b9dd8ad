from __future__ import annotations

from datetime import date, time
from typing import Optional

from ..core.enums import Checkpoint
from ..core.exceptions import StoreConflict
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_mysql_time
from .model import DailyPunchRecord
from .repository import PunchRepository
from .state import previous_checkpoint

_SELECT = """
    SELECT record_id, employee_id, work_date, morning_in, lunch_out, lunch_in, evening_out
    FROM time_records
"""


def _row_to_record(r: dict) -> DailyPunchRecord:
    return DailyPunchRecord(
        record_id=int(r["record_id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        morning_in=normalize_mysql_time(r.get("morning_in")),
        lunch_out=normalize_mysql_time(r.get("lunch_out")),
        lunch_in=normalize_mysql_time(r.get("lunch_in")),
        evening_out=normalize_mysql_time(r.get("evening_out")),
    )


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[DailyPunchRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE employee_id=%s AND work_date=%s", (employee_id, work_date))
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def upsert_punch(
        self,
        *,
        employee_id: str,
        work_date: date,
        record_id: Optional[int],
        checkpoint: Checkpoint,
        value: time,
    ) -> DailyPunchRecord:
        # Column names come from the Checkpoint enum, never from user input.
        column = checkpoint.value
        with db_cursor(self._conn_factory) as (_, cur):
            if record_id is None:
                if checkpoint != Checkpoint.MORNING_IN:
                    raise StoreConflict(f"Cannot open a day with {column}")
                # Duplicate (employee_id, work_date) raises IntegrityError -> StoreConflict.
                cur.execute(
                    f"INSERT INTO time_records(employee_id, work_date, {column}) VALUES(%s,%s,%s)",
                    (employee_id, work_date, value),
                )
                record_id = int(cur.lastrowid)
            else:
                clauses = ["record_id=%s", f"{column} IS NULL"]
                previous = previous_checkpoint(checkpoint)
                if previous is not None:
                    clauses.append(f"{previous.value} IS NOT NULL")
                cur.execute(
                    f"UPDATE time_records SET {column}=%s WHERE {' AND '.join(clauses)}",
                    (value, int(record_id)),
                )
                if cur.rowcount == 0:
                    raise StoreConflict(f"{column} was already recorded for record {record_id}")

            cur.execute(_SELECT + " WHERE record_id=%s", (int(record_id),))
            return _row_to_record(fetchone(cur))
