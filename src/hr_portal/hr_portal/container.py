from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_LATE_GRACE_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .delays.detector import DelayDetector
from .delays.mysql_delay_repository import MySQLDelayRepository
from .delays.service import DelayService
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .leave.notifier import LeaveNotifier, LoggingLeaveNotifier
from .leave.resolver import LeaveOverlapResolver
from .leave.service import LeaveService
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.service import PunchService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.resolver import ScheduleResolver


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    punches_repo: MySQLPunchRepository
    schedules_repo: MySQLScheduleRepository
    leaves_repo: MySQLLeaveRepository
    delays_repo: MySQLDelayRepository

    delay_detector: DelayDetector
    punch_service: PunchService
    delay_service: DelayService
    leave_service: LeaveService


def build_container(
    *,
    db_config: dict,
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
    notifier: LeaveNotifier | None = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    punches_repo = MySQLPunchRepository(conn)
    schedules_repo = MySQLScheduleRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    delays_repo = MySQLDelayRepository(conn)

    delay_detector = DelayDetector(
        ScheduleResolver(schedules_repo),
        LeaveOverlapResolver(leaves_repo),
        delays_repo,
        grace_minutes=grace_minutes,
    )
    punch_service = PunchService(punches_repo, delay_detector)
    delay_service = DelayService(delays_repo)
    leave_service = LeaveService(leaves_repo, notifier or LoggingLeaveNotifier())

    return Container(
        conn=conn,
        punches_repo=punches_repo,
        schedules_repo=schedules_repo,
        leaves_repo=leaves_repo,
        delays_repo=delays_repo,
        delay_detector=delay_detector,
        punch_service=punch_service,
        delay_service=delay_service,
        leave_service=leave_service,
    )
