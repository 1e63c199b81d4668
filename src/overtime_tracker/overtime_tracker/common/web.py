"""Helpers shared by the Flask controllers."""
from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from enum import Enum
from functools import wraps
from typing import Any, Optional

from flask import Flask, jsonify, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from ..users.model import SessionUser
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ValidationError, 400),
)


def to_json(value: Any) -> Any:
    """Turn dataclasses, enums and dates into JSON-friendly values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    if isinstance(value, dict):
        return {str(k): to_json(v) for k, v in value.items()}
    return value


def current_user() -> Optional[SessionUser]:
    if "profile_id" not in session:
        return None
    return SessionUser(
        profile_id=int(session["profile_id"]),
        username=str(session.get("username", "")),
        role=Role(session.get("role", Role.USER.value)),
    )


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "profile_id" not in session:
            return jsonify({"error": "Please sign in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "profile_id" not in session:
            return jsonify({"error": "Please sign in to continue"}), 401
        if session.get("role") != Role.ADMIN.value:
            return jsonify({"error": "Admin permission required"}), 403
        return view(*args, **kwargs)

    return wrapper


def parse_bool(value: Any) -> Optional[bool]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def parse_date_arg(value: Any, field_name: str) -> date:
    try:
        return parse_iso_date(str(value))
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def parse_int_arg(value: Any, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")


def register_error_handlers(app: Flask) -> None:
    def handle_domain_error(e: DomainError):
        for error_type, status in _STATUS_BY_ERROR:
            if isinstance(e, error_type):
                return jsonify({"error": str(e)}), status
        return jsonify({"error": str(e)}), 400

    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return jsonify({"error": e.description}), e.code
        logger.exception("Unhandled error")
        message = str(e) if app.config.get("DEBUG") else "Internal server error"
        return jsonify({"error": message}), 500

    app.register_error_handler(DomainError, handle_domain_error)
    app.register_error_handler(Exception, handle_unexpected)
