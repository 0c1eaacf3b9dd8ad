from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import (
    AlreadyComplete,
    AuthorizationError,
    DomainError,
    NoActiveSession,
    StoreConflict,
    ValidationError,
)

logger = logging.getLogger(__name__)

SESSION_EMPLOYEE_KEY = "employee_id"
SESSION_ROLE_KEY = "role"

_STATUS_BY_ERROR = (
    (NoActiveSession, 401),
    (AuthorizationError, 403),
    (AlreadyComplete, 409),
    (StoreConflict, 409),
    (ValidationError, 400),
)


def current_employee_id() -> Optional[str]:
    value = session.get(SESSION_EMPLOYEE_KEY)
    return str(value) if value else None


def error_response(exc: Exception):
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return jsonify({"success": False, "error": type(exc).__name__, "message": str(exc)}), status
    if isinstance(exc, DomainError):
        return jsonify({"success": False, "error": type(exc).__name__, "message": str(exc)}), 400
    logger.exception("Unhandled error", exc_info=exc)
    return jsonify({"success": False, "error": "InternalError", "message": "Internal server error"}), 500


def api_login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_employee_id():
            return error_response(NoActiveSession("You must be signed in"))
        return view(*args, **kwargs)

    return wrapper


def api_hr_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_employee_id():
            return error_response(NoActiveSession("You must be signed in"))
        if session.get(SESSION_ROLE_KEY) != Role.HR.value:
            return error_response(AuthorizationError("Only HR can review requests"))
        return view(*args, **kwargs)

    return wrapper
