from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import api_errors
from ..container import Container
from .model import Employee
from .service import EmployeeForm


def employee_json(e: Employee) -> dict:
    return {
        "employee_id": e.employee_id,
        "name": e.name,
        "warehouse": e.warehouse,
        "shift_name": e.shift_name,
        "daily_rate": str(e.daily_rate),
        "hourly_rate": str(e.hourly_rate),
        "uses_hourly_rate": e.uses_hourly_rate,
        "label": str(e),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @api_errors("list employees")
    def employees_list():
        return jsonify([employee_json(e) for e in container.employee_service.list_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @api_errors("add an employee")
    def employees_create():
        form = EmployeeForm.parse(request.get_json(silent=True) or request.form)
        employee = container.employee_service.create(form)
        return jsonify(employee_json(employee)), 201

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="employees_update")
    @api_errors("update an employee")
    def employees_update(employee_id: int):
        form = EmployeeForm.parse(request.get_json(silent=True) or request.form)
        employee = container.employee_service.update(employee_id, form)
        return jsonify(employee_json(employee))

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @api_errors("delete an employee")
    def employees_delete(employee_id: int):
        container.employee_service.delete(employee_id)
        return jsonify({"success": True})
