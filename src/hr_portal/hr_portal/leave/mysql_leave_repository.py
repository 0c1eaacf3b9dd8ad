from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import LeaveDayType, LeavePeriod, RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveRequest
from .repository import LeaveRepository

_COLUMNS = """
    leave_id, employee_id, start_date, end_date, day_type, period, status,
    leave_type, reason, rejection_reason, created_at
"""


def _row_to_leave(r: dict) -> LeaveRequest:
    return LeaveRequest(
        leave_id=int(r["leave_id"]),
        employee_id=str(r["employee_id"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        day_type=LeaveDayType(r["day_type"]),
        period=LeavePeriod(r["period"]) if r.get("period") else None,
        status=RequestStatus(r["status"]),
        leave_type=r.get("leave_type") or "vacation",
        reason=r.get("reason"),
        rejection_reason=r.get("rejection_reason"),
        created_at=r.get("created_at"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_approved_for_date(self, employee_id: str, on_date: date) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leave_requests
                WHERE employee_id=%s AND status=%s AND start_date<=%s AND end_date>=%s
                """,
                (employee_id, RequestStatus.APPROVED.value, on_date, on_date),
            )
            return [_row_to_leave(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
        day_type: LeaveDayType,
        period: Optional[LeavePeriod],
        leave_type: str,
        reason: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(employee_id, start_date, end_date, day_type, period, status, leave_type, reason)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee_id,
                    start_date,
                    end_date,
                    day_type.value,
                    period.value if period else None,
                    RequestStatus.PENDING.value,
                    leave_type,
                    reason,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, leave_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leave_requests WHERE leave_id=%s", (int(leave_id),))
            r = fetchone(cur)
            return _row_to_leave(r) if r else None

    def decide(
        self,
        *,
        leave_id: int,
        status: RequestStatus,
        rejection_reason: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s, rejection_reason=%s
                WHERE leave_id=%s AND status=%s
                """,
                (status.value, rejection_reason, int(leave_id), RequestStatus.PENDING.value),
            )
            return cur.rowcount > 0

    def list_for_employee(self, employee_id: str, *, limit: int = 200) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leave_requests
                WHERE employee_id=%s
                ORDER BY start_date DESC, leave_id DESC
                LIMIT %s
                """,
                (employee_id, int(limit)),
            )
            return [_row_to_leave(r) for r in fetchall(cur)]
