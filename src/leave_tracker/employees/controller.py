from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    @app.route("/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        payload = json_object()
        employee = service.add_employee(
            employee_id=payload.get("employee_id"),
            leave_balance=payload.get("leave_balance"),
        )
        return jsonify({"employee_id": employee.employee_id, "leave_balance": employee.leave_balance}), 201
