from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_user, login_required, parse_date_arg, to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays", methods=["GET"], endpoint="holidays_list")
    @login_required
    def holidays_list():
        start = request.args.get("start")
        end = request.args.get("end")
        if start and end:
            items = container.holiday_service.list_in_range(
                start=parse_date_arg(start, "start"),
                end=parse_date_arg(end, "end"),
            )
        else:
            items = container.holiday_service.list_all()
        return jsonify({"holidays": to_json(list(items))})

    @app.route("/api/holidays/check", methods=["GET"], endpoint="holidays_check")
    @login_required
    def holidays_check():
        work_date = parse_date_arg(request.args.get("date"), "date")
        return jsonify({"date": work_date.isoformat(), "is_holiday": container.holiday_service.is_holiday(work_date)})

    @app.route("/api/holidays", methods=["POST"], endpoint="holidays_create")
    @admin_required
    def holidays_create():
        data = request.get_json(silent=True) or {}
        holiday_id = container.holiday_service.create(
            current_user=current_user(),
            holiday_date=parse_date_arg(data.get("holiday_date"), "holiday_date"),
            description=data.get("description"),
        )
        return jsonify({"holiday_id": holiday_id}), 201

    @app.route("/api/holidays/<int:holiday_id>", methods=["DELETE"], endpoint="holidays_delete")
    @admin_required
    def holidays_delete(holiday_id: int):
        container.holiday_service.delete(current_user=current_user(), holiday_id=holiday_id)
        return jsonify({"ok": True})
