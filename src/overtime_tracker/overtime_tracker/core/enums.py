from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for authorization."""

    ADMIN = "admin"
    USER = "user"


class Department(str, Enum):
    """Fixed set of departments an employee can belong to."""

    FINANCE = "finance"
    ACCOUNTING = "accounting"
    SALES = "sales"
    HR = "hr"
    MAINTENANCE = "maintenance"
    SAFETY = "safety"
    WAREHOUSE = "warehouse"
    CLEANING = "cleaning"

    @property
    def label(self) -> str:
        return DEPARTMENT_LABELS[self]


DEPARTMENT_LABELS: dict[Department, str] = {
    Department.FINANCE: "قسم المالية",
    Department.ACCOUNTING: "قسم المحاسبة",
    Department.SALES: "قسم المندوبين",
    Department.HR: "قسم الموارد البشرية",
    Department.MAINTENANCE: "قسم الصيانة",
    Department.SAFETY: "قسم السلامة العامة",
    Department.WAREHOUSE: "قسم المستودعات",
    Department.CLEANING: "قسم النظافة",
}


class ImportRowStatus(str, Enum):
    """Lifecycle of a spreadsheet row between preview and commit."""

    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"
