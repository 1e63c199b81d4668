from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Department
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

EMPLOYEE_COLUMNS = (
    "employee_id, employee_number, full_name, department, base_salary, is_active, user_id, created_at, updated_at"
)
UPDATABLE_FIELDS = ("employee_number", "full_name", "department", "base_salary", "user_id")


def row_to_employee(r: dict, *, prefix: str = "") -> Employee:
    return Employee(
        employee_id=int(r[f"{prefix}employee_id"]),
        employee_number=r[f"{prefix}employee_number"],
        full_name=r[f"{prefix}full_name"],
        department=Department(r[f"{prefix}department"]),
        base_salary=float(r[f"{prefix}base_salary"]),
        is_active=as_bool(r.get(f"{prefix}is_active")),
        user_id=r.get(f"{prefix}user_id"),
        created_at=r.get(f"{prefix}created_at"),
        updated_at=r.get(f"{prefix}updated_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {EMPLOYEE_COLUMNS} FROM employees ORDER BY created_at DESC")
            return [row_to_employee(r) for r in fetchall(cur)]

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {EMPLOYEE_COLUMNS} FROM employees WHERE is_active=1 ORDER BY full_name")
            return [row_to_employee(r) for r in fetchall(cur)]

    def _get_one(self, column: str, value) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {EMPLOYEE_COLUMNS} FROM employees WHERE {column}=%s", (value,))
            r = fetchone(cur)
            return row_to_employee(r) if r else None

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._get_one("employee_id", int(employee_id))

    def get_by_number(self, employee_number: str) -> Optional[Employee]:
        return self._get_one("employee_number", employee_number)

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        return self._get_one("user_id", int(user_id))

    def create(
        self,
        *,
        employee_number: str,
        full_name: str,
        department: Department,
        base_salary: float,
        user_id: Optional[int] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_number, full_name, department, base_salary, user_id)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (employee_number, full_name, department.value, base_salary, user_id),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, fields: dict) -> bool:
        assignments = []
        params: list[object] = []
        for name in UPDATABLE_FIELDS:
            if name in fields:
                value = fields[name]
                assignments.append(f"{name}=%s")
                params.append(value.value if isinstance(value, Department) else value)
        if not assignments:
            return False
        params.append(int(employee_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE employees SET {', '.join(assignments)}, updated_at=NOW() WHERE employee_id=%s",
                tuple(params),
            )
            return cur.rowcount > 0

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET is_active=%s, updated_at=NOW() WHERE employee_id=%s",
                (1 if is_active else 0, int(employee_id)),
            )
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM employees")
            r = fetchone(cur)
            return int(r["n"]) if r else 0
