from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request, session

from ..common.web import admin_required, current_user, login_required, to_json
from ..core.constants import DEFAULT_SESSION_DAYS
from ..container import Container
from .model import SessionUser


def register(app: Flask, container: Container) -> None:
    def _start_session(s_user: SessionUser, *, remember: bool) -> None:
        session.permanent = bool(remember)
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
        session["profile_id"] = s_user.profile_id
        session["username"] = s_user.username
        session["role"] = s_user.role.value

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        _start_session(s_user, remember=bool(data.get("remember_me")))
        return jsonify({"user": to_json(s_user)})

    @app.route("/api/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = request.get_json(silent=True) or {}
        s_user = container.auth_service.sign_up(data.get("username", ""), data.get("password", ""))
        _start_session(s_user, remember=False)
        return jsonify({"user": to_json(s_user)}), 201

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"ok": True})

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        s_user = current_user()
        employee = container.employee_service.get_for_user(s_user.profile_id)
        return jsonify({"user": to_json(s_user), "employee": to_json(employee)})

    @app.route("/api/profiles", methods=["GET"], endpoint="profiles")
    @admin_required
    def profiles():
        items = container.profile_service.list_all(current_user=current_user())
        return jsonify(
            {
                "profiles": [
                    {"profile_id": p.profile_id, "username": p.username, "role": p.role.value} for p in items
                ]
            }
        )

    @app.route("/api/profiles/<int:profile_id>/role", methods=["PUT"], endpoint="profile_role")
    @admin_required
    def profile_role(profile_id: int):
        data = request.get_json(silent=True) or {}
        container.profile_service.change_role(
            current_user=current_user(),
            profile_id=profile_id,
            role=str(data.get("role", "")),
        )
        return jsonify({"ok": True})
