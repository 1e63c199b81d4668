from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Department


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee on the payroll.

    Note: the hourly rate is always derived from base_salary, never stored.
    """

    employee_id: int
    employee_number: str
    full_name: str
    department: Department
    base_salary: float
    is_active: bool = True
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
