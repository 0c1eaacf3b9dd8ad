from __future__ import annotations

import json
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import WorkSchedule
from .repository import ScheduleRepository


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_employee_schedule(self, employee_id: str) -> Optional[WorkSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT work_schedule FROM employees WHERE employee_id=%s",
                (employee_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            doc = r.get("work_schedule")
            # JSON columns come back as str (or bytes) depending on the connector.
            if isinstance(doc, (bytes, bytearray)):
                doc = doc.decode("utf-8")
            if isinstance(doc, str):
                doc = json.loads(doc) if doc.strip() else None
            return WorkSchedule.from_json(doc)
