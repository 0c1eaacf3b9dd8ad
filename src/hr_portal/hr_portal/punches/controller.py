from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import now_local
from ..common.web import api_login_required, current_employee_id, error_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/punches", methods=["POST"], endpoint="api_record_punch")
    @api_login_required
    def api_record_punch():
        try:
            outcome = container.punch_service.record_punch(current_employee_id(), now=now_local())
        except Exception as e:
            return error_response(e)

        body = {
            "success": True,
            "checkpoint": outcome.checkpoint.value,
            "record": outcome.record.to_dict(),
            "delay": outcome.delay.to_dict() if outcome.delay else None,
        }
        if outcome.delay_check_failed:
            body["warning"] = "Punch recorded, but the lateness check could not be completed"
        return jsonify(body), 201

    @app.route("/api/punches/today", methods=["GET"], endpoint="api_today_punches")
    @api_login_required
    def api_today_punches():
        try:
            view = container.punch_service.get_today(current_employee_id(), today=now_local().date())
        except Exception as e:
            return error_response(e)
        return jsonify({"success": True, **view.to_dict()})
