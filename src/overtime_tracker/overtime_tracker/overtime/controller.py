from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import (
    admin_required,
    current_user,
    login_required,
    parse_bool,
    parse_date_arg,
    parse_int_arg,
    to_json,
)
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/overtime", methods=["GET"], endpoint="overtime_list")
    @login_required
    def overtime_list():
        start = request.args.get("start")
        end = request.args.get("end")
        if start and end:
            items = container.overtime_service.list_in_range(
                start=parse_date_arg(start, "start"),
                end=parse_date_arg(end, "end"),
            )
        else:
            items = container.overtime_service.list_recent()
        return jsonify({"records": to_json(list(items))})

    @app.route("/api/employees/<int:employee_id>/overtime", methods=["GET"], endpoint="overtime_for_employee")
    @login_required
    def overtime_for_employee(employee_id: int):
        items = container.overtime_service.list_for_employee(employee_id)
        return jsonify({"records": to_json(list(items))})

    @app.route("/api/overtime", methods=["POST"], endpoint="overtime_create")
    @login_required
    def overtime_create():
        data = request.get_json(silent=True) or {}
        record_id = container.overtime_service.record_entry(
            current_user=current_user(),
            employee_id=parse_int_arg(data.get("employee_id"), "employee_id"),
            work_date=parse_date_arg(data.get("work_date"), "work_date"),
            overtime_hours=data.get("overtime_hours"),
            end_time=data.get("end_time"),
            is_holiday=parse_bool(data.get("is_holiday")),
            notes=data.get("notes"),
        )
        return jsonify({"record_id": record_id}), 201

    @app.route("/api/overtime/<int:record_id>", methods=["PUT"], endpoint="overtime_update")
    @admin_required
    def overtime_update(record_id: int):
        data = dict(request.get_json(silent=True) or {})
        if "work_date" in data:
            data["work_date"] = parse_date_arg(data["work_date"], "work_date")
        if "is_holiday" in data:
            data["is_holiday"] = bool(parse_bool(data["is_holiday"]))
        container.overtime_service.update_record(current_user=current_user(), record_id=record_id, fields=data)
        return jsonify({"ok": True})

    @app.route("/api/overtime/<int:record_id>", methods=["DELETE"], endpoint="overtime_delete")
    @admin_required
    def overtime_delete(record_id: int):
        container.overtime_service.delete_record(current_user=current_user(), record_id=record_id)
        return jsonify({"ok": True})

    @app.route("/api/overtime/payment-preview", methods=["GET"], endpoint="overtime_payment_preview")
    @login_required
    def overtime_payment_preview():
        try:
            hours = float(request.args.get("hours", 0) or 0)
        except ValueError:
            raise ValidationError("hours must be a number")
        preview = container.overtime_service.payment_preview(
            base_salary=request.args.get("base_salary"),
            hours=hours,
            is_holiday=bool(parse_bool(request.args.get("is_holiday"))),
        )
        return jsonify(to_json(preview))
