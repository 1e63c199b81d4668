from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Department


@dataclass(frozen=True)
class MonthlyOvertimeReport:
    """One employee's overtime for a calendar month.

    total_hours and total_amount always equal the sum of their regular and
    holiday parts.
    """

    employee_id: int
    employee_number: str
    full_name: str
    department: Department
    base_salary: float
    regular_hours: float
    holiday_hours: float
    total_hours: float
    regular_amount: float
    holiday_amount: float
    total_amount: float


@dataclass(frozen=True)
class DepartmentSummary:
    department: Department
    employee_count: int
    total_hours: float
    total_amount: float


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    total_records: int
    monthly_hours: float
    monthly_amount: float
