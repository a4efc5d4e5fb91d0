from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.http import arg_date, arg_int, iso, json_body, login_required
from ..container import Container
from ..core.enums import AttendanceType
from ..core.exceptions import ValidationError
from ..employees.controller import employee_to_json
from .model import AttendanceEntry, AttendanceRecord


def record_to_json(r: AttendanceRecord) -> dict:
    return {
        "id": r.attendance_id,
        "employee_id": r.employee_id,
        "date": r.work_date.isoformat(),
        "attendance_type": r.attendance_type.value,
        "hours": r.hours,
        "created_at": iso(r.created_at),
    }


def _parse_entry(raw: dict) -> AttendanceEntry:
    employee_id = arg_int(raw.get("employee_id"), "employee_id")
    if employee_id is None:
        raise ValidationError("employee_id is required")

    type_s = raw.get("attendance_type")
    try:
        attendance_type = AttendanceType(type_s) if type_s else None
    except ValueError:
        raise ValidationError(f"Unknown attendance type: {type_s}")

    hours = raw.get("hours")
    if hours in (None, ""):
        hours = None
    else:
        try:
            hours = float(hours)
        except (TypeError, ValueError):
            raise ValidationError("hours must be a number")
    return AttendanceEntry(employee_id=employee_id, attendance_type=attendance_type, hours=hours)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/attendance", methods=["GET"], endpoint="attendance_month")
    @login_required
    def attendance_month():
        today = now_local().date()
        year = arg_int(request.args.get("year"), "year") or today.year
        month = arg_int(request.args.get("month"), "month") or today.month
        selected_s = request.args.get("employees", "")
        selected = [arg_int(s, "employees") for s in selected_s.split(",") if s.strip()]

        view = service.month_view(
            year=year,
            month=month,
            selected_employee_ids=selected,
            selected_day=arg_date(request.args.get("date"), "date"),
        )
        return jsonify(
            {
                "year": view.year,
                "month": view.month,
                "days_in_month": view.days_in_month,
                "selected_employees": view.selected_employee_ids,
                "calendar": {d.isoformat(): c.value for d, c in view.calendar.items()},
                "employees": [
                    {
                        **employee_to_json(s.employee),
                        "present_days": s.present_days,
                        "days_in_month": s.days_in_month,
                        "absences": s.absences,
                    }
                    for s in view.summaries
                ],
                "previous": {"year": view.previous[0], "month": view.previous[1]},
                "next": {"year": view.next[0], "month": view.next[1]},
                "selected_date": iso(view.selected_day),
                "details": [
                    {
                        "employee": employee_to_json(d.employee),
                        "record": record_to_json(d.record) if d.record else None,
                    }
                    for d in view.day_details
                ],
            }
        )

    @app.route("/attendance/<work_date>", methods=["GET"], endpoint="attendance_for_date")
    @login_required
    def attendance_for_date(work_date: str):
        day = arg_date(work_date, "date")
        return jsonify([record_to_json(r) for r in service.records_for_date(day)])

    @app.route("/attendance/<work_date>", methods=["POST"], endpoint="mark_attendance")
    @login_required
    def mark_attendance(work_date: str):
        day = arg_date(work_date, "date")
        raw_entries = json_body().get("entries") or []
        if not isinstance(raw_entries, list):
            raise ValidationError("entries must be a list")

        saved = service.mark_day(day, [_parse_entry(e) for e in raw_entries if isinstance(e, dict)])
        return jsonify({"success": True, "message": "Attendance saved successfully", "saved": saved})

    @app.route("/attendance/record/<int:attendance_id>", methods=["DELETE"], endpoint="delete_attendance")
    @login_required
    def delete_attendance(attendance_id: int):
        service.delete_record(attendance_id)
        return jsonify({"success": True, "message": "Attendance deleted"})
