from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import positive_int
from ..common.web import api_hr_required, api_login_required, current_employee_id, error_response
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT


def register(app: Flask, container: Container) -> None:
    @app.route("/api/delays", methods=["GET"], endpoint="api_my_delays")
    @api_login_required
    def api_my_delays():
        try:
            limit = positive_int(request.args.get("limit", DEFAULT_HISTORY_LIMIT), "limit")
            delays = container.delay_service.list_for_employee(current_employee_id(), limit=limit)
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "delays": [d.to_dict() for d in delays]})

    @app.route("/api/delays/<int:delay_id>/approve", methods=["POST"], endpoint="api_approve_delay")
    @api_hr_required
    def api_approve_delay(delay_id: int):
        try:
            container.delay_service.approve(delay_id=delay_id)
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "id": delay_id, "status": "approved"})

    @app.route("/api/delays/<int:delay_id>/reject", methods=["POST"], endpoint="api_reject_delay")
    @api_hr_required
    def api_reject_delay(delay_id: int):
        try:
            container.delay_service.reject(delay_id=delay_id)
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, "id": delay_id, "status": "rejected"})
