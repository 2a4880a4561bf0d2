from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.responses import error_response, json_object
from ..common.validators import require_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    @app.route("/employees/<int:employee_id>/leaves", methods=["POST"], endpoint="request_leave")
    def request_leave(employee_id: int):
        payload = json_object()
        try:
            start_date = parse_iso_date(payload.get("start_date") or "")
            end_date = parse_iso_date(payload.get("end_date") or "")
        except (TypeError, ValueError):
            return error_response("Dates must be in YYYY-MM-DD format", "invalid-argument", 400)

        req = service.request_leave(employee_id=employee_id, start_date=start_date, end_date=end_date)
        return jsonify(req.to_dict()), 201

    @app.route("/leaves/<int:request_id>/approve", methods=["POST"], endpoint="approve_leave")
    def approve_leave(request_id: int):
        decisions = service.approve_leave(request_id=request_id)
        return jsonify(
            {
                "request_id": request_id,
                "decisions": [
                    {"approver": d.approver, "approved": d.approved, "message": d.message} for d in decisions
                ],
            }
        )

    @app.route("/employees/<int:employee_id>/history", methods=["GET"], endpoint="leave_history")
    def leave_history(employee_id: int):
        return jsonify(service.leave_history(employee_id=employee_id).to_dict())

    @app.route("/leaves/pending", methods=["GET"], endpoint="pending_leaves")
    def pending_leaves():
        raw_employee_id = request.args.get("employee_id")
        employee_id = require_int(raw_employee_id, "Employee ID") if raw_employee_id is not None else None
        pending = service.pending_requests(employee_id=employee_id)
        return jsonify({"requests": [r.to_dict() for r in pending]})
