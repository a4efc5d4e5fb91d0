from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import arg_bool, iso, json_body, login_required, money
from ..container import Container
from .model import Customer, Payment


def customer_to_json(c: Customer) -> dict:
    return {
        "id": c.customer_id,
        "name": c.name,
        "phone": c.phone,
        "location": c.location,
        "address": c.address,
        "work_amount": money(c.work_amount),
        "advance_amount": money(c.advance_amount),
        "work_completed": c.work_completed,
        "referred_by": c.referred_by,
        "created_at": iso(c.created_at),
    }


def payment_to_json(p: Payment) -> dict:
    return {
        "id": p.payment_id,
        "customer_id": p.customer_id,
        "amount": money(p.amount),
        "payment_mode": p.payment_mode,
        "notes": p.notes,
        "created_at": iso(p.created_at),
    }


def register(app: Flask, container: Container) -> None:
    service = container.customer_service

    def _customer_fields(data: dict) -> dict:
        return {
            "name": data.get("name", ""),
            "phone": data.get("phone", ""),
            "location": data.get("location", ""),
            "work_amount": data.get("work_amount"),
            "advance_amount": data.get("advance_amount"),
            "work_completed": arg_bool(data.get("work_completed"), "work_completed"),
            "address": data.get("address"),
        }

    @app.route("/customers", methods=["GET"], endpoint="list_customers")
    @login_required
    def list_customers():
        return jsonify([customer_to_json(c) for c in service.list_customers()])

    @app.route("/customers", methods=["POST"], endpoint="add_customer")
    @login_required
    def add_customer():
        data = json_body()
        customer_id = service.add_customer(**_customer_fields(data), referred_by=data.get("referred_by"))
        return jsonify({"success": True, "message": "Customer added successfully", "id": customer_id}), 201

    @app.route("/customers/<int:customer_id>", methods=["PUT"], endpoint="update_customer")
    @login_required
    def update_customer(customer_id: int):
        customer = service.update_customer(customer_id, **_customer_fields(json_body()))
        return jsonify({"success": True, "customer": customer_to_json(customer)})

    @app.route("/customers/<int:customer_id>", methods=["DELETE"], endpoint="delete_customer")
    @login_required
    def delete_customer(customer_id: int):
        service.delete_customer(customer_id)
        return jsonify({"success": True, "message": "Customer deleted successfully"})

    @app.route("/customers/suggestions", endpoint="customer_suggestions")
    @login_required
    def customer_suggestions():
        return jsonify(service.referral_suggestions())

    @app.route("/customers/<int:customer_id>/payments", methods=["GET"], endpoint="customer_payments")
    @login_required
    def customer_payments(customer_id: int):
        history = service.payment_history(customer_id)
        return jsonify(
            {
                "customer": customer_to_json(history.customer),
                "payments": [payment_to_json(p) for p in history.payments],
                "total_paid": money(history.total_paid),
                "balance": money(history.balance),
            }
        )

    @app.route("/customers/<int:customer_id>/payments", methods=["POST"], endpoint="add_payment")
    @login_required
    def add_payment(customer_id: int):
        data = json_body()
        payment_id = service.add_payment(
            customer_id,
            amount=data.get("amount"),
            payment_mode=data.get("payment_mode", "cash"),
            notes=data.get("notes"),
        )
        return jsonify({"success": True, "message": "Payment added successfully", "id": payment_id}), 201

    @app.route("/payments/<int:payment_id>", methods=["PUT"], endpoint="update_payment")
    @login_required
    def update_payment(payment_id: int):
        data = json_body()
        payment = service.update_payment(
            payment_id,
            amount=data.get("amount"),
            payment_mode=data.get("payment_mode", ""),
            notes=data.get("notes"),
        )
        return jsonify({"success": True, "payment": payment_to_json(payment)})

    @app.route("/payments/<int:payment_id>", methods=["DELETE"], endpoint="delete_payment")
    @login_required
    def delete_payment(payment_id: int):
        service.delete_payment(payment_id)
        return jsonify({"success": True, "message": "Payment deleted successfully"})
