from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Department
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_number(self, employee_number: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_number: str,
        full_name: str,
        department: Department,
        base_salary: float,
        user_id: Optional[int] = None,
    ) -> int:
        raise NotImplementedError

    def update(self, employee_id: int, fields: dict) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
