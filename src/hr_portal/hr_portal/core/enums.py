from __future__ import annotations

from enum import Enum


class Checkpoint(str, Enum):
    """The four daily punches, declared in the order they must be filled."""

    MORNING_IN = "morning_in"
    LUNCH_OUT = "lunch_out"
    LUNCH_IN = "lunch_in"
    EVENING_OUT = "evening_out"


class PunchState(str, Enum):
    """Progress of an employee's day, one state per filled checkpoint."""

    EMPTY = "EMPTY"
    HAS_MORNING_IN = "HAS_MORNING_IN"
    HAS_LUNCH_OUT = "HAS_LUNCH_OUT"
    HAS_LUNCH_IN = "HAS_LUNCH_IN"
    HAS_EVENING_OUT = "HAS_EVENING_OUT"


class RequestStatus(str, Enum):
    """Approval workflow status shared by leave requests and delays."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LeaveDayType(str, Enum):
    FULL = "full"
    HALF = "half"


class LeavePeriod(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"


class Role(str, Enum):
    EMPLOYEE = "employee"
    HR = "hr"
