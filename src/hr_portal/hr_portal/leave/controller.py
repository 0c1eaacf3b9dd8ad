from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import api_hr_required, api_login_required, current_employee_id, error_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leave-requests", methods=["POST"], endpoint="api_create_leave")
    @api_login_required
    def api_create_leave():
        data = request.get_json(silent=True) or {}
        try:
            leave_id = container.leave_service.create(
                employee_id=current_employee_id(),
                start_date=parse_iso_date(data.get("start_date")),
                end_date=parse_iso_date(data.get("end_date") or data.get("start_date")),
                day_type=data.get("day_type", "full"),
                period=data.get("period"),
                leave_type=data.get("leave_type", "vacation"),
                reason=data.get("reason"),
            )
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "id": leave_id}), 201

    @app.route("/api/leave-requests", methods=["GET"], endpoint="api_my_leaves")
    @api_login_required
    def api_my_leaves():
        try:
            leaves = container.leave_service.list_for_employee(current_employee_id())
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "leave_requests": [lv.to_dict() for lv in leaves]})

    @app.route("/api/leave-requests/<int:leave_id>/approve", methods=["POST"], endpoint="api_approve_leave")
    @api_hr_required
    def api_approve_leave(leave_id: int):
        try:
            container.leave_service.approve(leave_id=leave_id)
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "id": leave_id, "status": "approved"})

    @app.route("/api/leave-requests/<int:leave_id>/reject", methods=["POST"], endpoint="api_reject_leave")
    @api_hr_required
    def api_reject_leave(leave_id: int):
        data = request.get_json(silent=True) or {}
        try:
            container.leave_service.reject(leave_id=leave_id, rejection_reason=data.get("rejection_reason", ""))
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "id": leave_id, "status": "rejected"})
