from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import arg_date, arg_int, iso, json_body, login_required, money
from ..container import Container
from ..employees.controller import employee_to_json
from .model import EmployeeAdvance


def advance_to_json(a: EmployeeAdvance) -> dict:
    return {
        "id": a.advance_id,
        "employee_id": a.employee_id,
        "date": a.advance_date.isoformat(),
        "amount": money(a.amount),
        "transaction_type": a.transaction_type,
        "notes": a.notes,
        "created_at": iso(a.created_at),
    }


def register(app: Flask, container: Container) -> None:
    service = container.advance_service

    @app.route("/advances", methods=["GET"], endpoint="list_advances")
    @login_required
    def list_advances():
        overview = service.advance_overview(include_zero=request.args.get("all") == "1")
        return jsonify(
            {
                "totals": [
                    {"employee": employee_to_json(t.employee), "total": money(t.total)}
                    for t in overview.totals
                ],
                "advances": [advance_to_json(a) for a in overview.advances],
            }
        )

    @app.route("/advances", methods=["POST"], endpoint="record_advance")
    @login_required
    def record_advance():
        data = json_body()
        advance_id = service.record_advance(
            employee_id=arg_int(data.get("employee_id"), "employee_id"),
            advance_date=arg_date(data.get("date"), "date"),
            amount=data.get("amount"),
            transaction_type=data.get("transaction_type", "Cash"),
            notes=data.get("notes"),
        )
        return jsonify({"success": True, "message": "Advance recorded", "id": advance_id}), 201
