from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_user, login_required, parse_bool, to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @login_required
    def employees_list():
        if parse_bool(request.args.get("active")):
            items = container.employee_service.list_active()
        else:
            items = container.employee_service.list_all()
        return jsonify({"employees": to_json(list(items))})

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="employees_get")
    @login_required
    def employees_get(employee_id: int):
        return jsonify({"employee": to_json(container.employee_service.get(employee_id))})

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @admin_required
    def employees_create():
        data = request.get_json(silent=True) or {}
        employee_id = container.employee_service.create(
            current_user=current_user(),
            employee_number=data.get("employee_number", ""),
            full_name=data.get("full_name", ""),
            department=data.get("department", ""),
            base_salary=data.get("base_salary"),
            user_id=data.get("user_id"),
        )
        return jsonify({"employee_id": employee_id}), 201

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="employees_update")
    @admin_required
    def employees_update(employee_id: int):
        data = request.get_json(silent=True) or {}
        container.employee_service.update(current_user=current_user(), employee_id=employee_id, fields=data)
        return jsonify({"ok": True})

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @admin_required
    def employees_delete(employee_id: int):
        container.employee_service.delete(current_user=current_user(), employee_id=employee_id)
        return jsonify({"ok": True})

    @app.route("/api/employees/<int:employee_id>/toggle-active", methods=["POST"], endpoint="employees_toggle")
    @admin_required
    def employees_toggle(employee_id: int):
        is_active = container.employee_service.toggle_active(current_user=current_user(), employee_id=employee_id)
        return jsonify({"is_active": is_active})
