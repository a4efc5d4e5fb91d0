from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import iso, json_body, login_required, money
from ..container import Container
from .model import Employee


def employee_to_json(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "name": e.name,
        "phone": e.phone,
        "address": e.address,
        "daily_wage": money(e.daily_wage),
        "overtime_rate": money(e.overtime_rate),
        "created_at": iso(e.created_at),
    }


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    def list_employees():
        employees = service.search_employees(request.args.get("q", ""))
        return jsonify([employee_to_json(e) for e in employees])

    @app.route("/employees", methods=["POST"], endpoint="add_employee")
    @login_required
    def add_employee():
        data = json_body()
        employee_id = service.add_employee(
            name=data.get("name", ""),
            phone=data.get("phone", ""),
            daily_wage=data.get("daily_wage"),
            overtime_rate=data.get("overtime_rate"),
            address=data.get("address"),
        )
        return jsonify({"success": True, "message": "Employee added successfully", "id": employee_id}), 201
