from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.validators import require_admin, require_department, require_non_empty, require_positive_number
from ..core.exceptions import NotFoundError, ValidationError
from ..users.model import SessionUser
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: maintain the employee registry (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def list_active(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def get_for_user(self, user_id: int) -> Optional[Employee]:
        return self._employees.get_by_user_id(int(user_id))

    def _clean_fields(self, fields: dict[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        if "employee_number" in fields:
            cleaned["employee_number"] = require_non_empty(fields["employee_number"], "Employee number")
        if "full_name" in fields:
            cleaned["full_name"] = require_non_empty(fields["full_name"], "Full name")
        if "department" in fields:
            cleaned["department"] = require_department(fields["department"])
        if "base_salary" in fields:
            cleaned["base_salary"] = require_positive_number(fields["base_salary"], "Base salary")
        if "user_id" in fields:
            cleaned["user_id"] = int(fields["user_id"]) if fields["user_id"] else None
        return cleaned

    def create(
        self,
        *,
        current_user: SessionUser,
        employee_number: str,
        full_name: str,
        department: str,
        base_salary: Any,
        user_id: Optional[int] = None,
    ) -> int:
        require_admin(current_user)
        data = self._clean_fields(
            {
                "employee_number": employee_number,
                "full_name": full_name,
                "department": department,
                "base_salary": base_salary,
                "user_id": user_id,
            }
        )

        if self._employees.get_by_number(data["employee_number"]):
            raise ValidationError("Employee number already exists")

        employee_id = self._employees.create(**data)
        logger.info("Employee %s created by %s", data["employee_number"], current_user.username)
        return employee_id

    def update(self, *, current_user: SessionUser, employee_id: int, fields: dict[str, Any]) -> None:
        require_admin(current_user)
        existing = self.get(employee_id)
        data = self._clean_fields(fields)
        if not data:
            raise ValidationError("Nothing to update")

        number = data.get("employee_number")
        if number and number != existing.employee_number:
            other = self._employees.get_by_number(number)
            if other and other.employee_id != existing.employee_id:
                raise ValidationError("Employee number already exists")

        self._employees.update(existing.employee_id, data)

    def delete(self, *, current_user: SessionUser, employee_id: int) -> None:
        require_admin(current_user)
        if not self._employees.delete_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")

    def toggle_active(self, *, current_user: SessionUser, employee_id: int) -> bool:
        require_admin(current_user)
        employee = self.get(employee_id)
        new_status = not employee.is_active
        self._employees.set_active(employee.employee_id, is_active=new_status)
        return new_status
