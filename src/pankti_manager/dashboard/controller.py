from __future__ import annotations

from flask import Flask, jsonify, request

from ..aggregation import CustomerRow
from ..common.datetime_utils import now_local
from ..common.http import login_required, money
from ..container import Container
from ..customers.controller import customer_to_json


def row_to_json(r: CustomerRow) -> dict:
    data = customer_to_json(r.customer)
    data["pending"] = money(r.pending)
    return data


def register(app: Flask, container: Container) -> None:
    service = container.dashboard_service

    def _filters() -> dict:
        return {
            "search_term": request.args.get("q", ""),
            "status": request.args.get("status", "all"),
            "sort": request.args.get("sort", "desc"),
        }

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        data = service.summary(search_term=request.args.get("q", ""))
        return jsonify(
            {
                "total_work_value": money(data.totals.total_work_value),
                "total_pending": money(data.totals.total_pending),
                "completed_work_pending": money(data.totals.completed_work_pending),
                "customers": [row_to_json(r) for r in data.customers],
            }
        )

    @app.route("/payments", endpoint="payment_tracking")
    @login_required
    def payment_tracking():
        rows = service.payment_tracking(**_filters())
        return jsonify([row_to_json(r) for r in rows])

    @app.route("/payments.csv", endpoint="payment_tracking_csv")
    @login_required
    def payment_tracking_csv():
        csv_bytes = service.payment_tracking_csv(**_filters()).encode("utf-8-sig")
        filename = f"payments_{now_local().strftime('%Y%m%d')}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
