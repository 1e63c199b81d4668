from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone
from ..employees.mysql_employee_repository import row_to_employee
from .model import OvertimeRecord, OvertimeRecordWithEmployee
from .repository import OvertimeRepository

RECORD_COLUMNS = (
    "o.record_id, o.employee_id, o.work_date, o.overtime_hours, o.is_holiday, o.notes, "
    "o.created_by, o.created_at, o.updated_at"
)
JOINED_EMPLOYEE_COLUMNS = (
    "e.employee_id AS e_employee_id, e.employee_number AS e_employee_number, e.full_name AS e_full_name, "
    "e.department AS e_department, e.base_salary AS e_base_salary, e.is_active AS e_is_active, "
    "e.user_id AS e_user_id, e.created_at AS e_created_at, e.updated_at AS e_updated_at"
)
UPDATABLE_FIELDS = ("employee_id", "work_date", "overtime_hours", "is_holiday", "notes")


def _to_record(r: dict) -> OvertimeRecord:
    return OvertimeRecord(
        record_id=int(r["record_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        overtime_hours=float(r["overtime_hours"]),
        is_holiday=as_bool(r.get("is_holiday")),
        notes=r.get("notes"),
        created_by=r.get("created_by"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def _to_joined(r: dict) -> OvertimeRecordWithEmployee:
    employee = row_to_employee(r, prefix="e_") if r.get("e_employee_id") is not None else None
    return OvertimeRecordWithEmployee(record=_to_record(r), employee=employee)


class MySQLOvertimeRepository(OvertimeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_recent(self, *, limit: int) -> Sequence[OvertimeRecordWithEmployee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {RECORD_COLUMNS}, {JOINED_EMPLOYEE_COLUMNS}
                FROM overtime_records o
                LEFT JOIN employees e ON e.employee_id = o.employee_id
                ORDER BY o.work_date DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [_to_joined(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: int, *, limit: int) -> Sequence[OvertimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {RECORD_COLUMNS}
                FROM overtime_records o
                WHERE o.employee_id=%s
                ORDER BY o.work_date DESC
                LIMIT %s
                """,
                (int(employee_id), int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_in_range(self, *, start_date: date, end_date: date) -> Sequence[OvertimeRecordWithEmployee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {RECORD_COLUMNS}, {JOINED_EMPLOYEE_COLUMNS}
                FROM overtime_records o
                LEFT JOIN employees e ON e.employee_id = o.employee_id
                WHERE o.work_date BETWEEN %s AND %s
                ORDER BY o.work_date DESC, o.record_id ASC
                """,
                (start_date, end_date),
            )
            return [_to_joined(r) for r in fetchall(cur)]

    def get_by_id(self, record_id: int) -> Optional[OvertimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {RECORD_COLUMNS} FROM overtime_records o WHERE o.record_id=%s", (int(record_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        overtime_hours: float,
        is_holiday: bool,
        notes: Optional[str] = None,
        created_by: Optional[int] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO overtime_records(employee_id, work_date, overtime_hours, is_holiday, notes, created_by)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), work_date, overtime_hours, 1 if is_holiday else 0, notes, created_by),
            )
            return int(cur.lastrowid)

    def update(self, record_id: int, fields: dict) -> bool:
        assignments = []
        params: list[object] = []
        for name in UPDATABLE_FIELDS:
            if name in fields:
                value = fields[name]
                if name == "is_holiday":
                    value = 1 if value else 0
                assignments.append(f"{name}=%s")
                params.append(value)
        if not assignments:
            return False
        params.append(int(record_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE overtime_records SET {', '.join(assignments)}, updated_at=NOW() WHERE record_id=%s",
                tuple(params),
            )
            return cur.rowcount > 0

    def delete_by_id(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM overtime_records WHERE record_id=%s", (int(record_id),))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM overtime_records")
            r = fetchone(cur)
            return int(r["n"]) if r else 0
