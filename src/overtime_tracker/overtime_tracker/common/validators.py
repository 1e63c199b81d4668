from __future__ import annotations

from typing import Any

from ..core.enums import Department
from ..core.exceptions import AuthorizationError, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_positive_number(value: Any, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if number != number or number <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return number


def require_department(value: Any) -> Department:
    try:
        return Department(value)
    except ValueError:
        raise ValidationError(f"Unknown department: {value!r}")


def require_admin(current_user) -> None:
    if current_user is None or not current_user.is_admin:
        raise AuthorizationError("Admin permission required")
