"""In-memory repositories and record builders shared by the service tests."""
from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from src.overtime_tracker.overtime_tracker.core.enums import Department, Role
from src.overtime_tracker.overtime_tracker.employees.model import Employee
from src.overtime_tracker.overtime_tracker.holidays.model import Holiday
from src.overtime_tracker.overtime_tracker.overtime.model import OvertimeRecord, OvertimeRecordWithEmployee
from src.overtime_tracker.overtime_tracker.users.model import Profile


class InMemoryEmployees:
    def __init__(self, employees: Optional[list[Employee]] = None):
        self._by_id: dict[int, Employee] = {e.employee_id: e for e in employees or []}
        self._next_id = max(self._by_id, default=0) + 1

    def list_all(self):
        return list(self._by_id.values())

    def list_active(self):
        return sorted((e for e in self._by_id.values() if e.is_active), key=lambda e: e.full_name)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(int(employee_id))

    def get_by_number(self, employee_number: str) -> Optional[Employee]:
        return next((e for e in self._by_id.values() if e.employee_number == employee_number), None)

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        return next((e for e in self._by_id.values() if e.user_id == user_id), None)

    def create(self, *, employee_number, full_name, department, base_salary, user_id=None) -> int:
        employee_id = self._next_id
        self._next_id += 1
        self._by_id[employee_id] = Employee(
            employee_id=employee_id,
            employee_number=employee_number,
            full_name=full_name,
            department=department,
            base_salary=base_salary,
            user_id=user_id,
        )
        return employee_id

    def update(self, employee_id: int, fields: dict) -> bool:
        existing = self._by_id.get(int(employee_id))
        if not existing:
            return False
        self._by_id[existing.employee_id] = replace(existing, **fields)
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self._by_id.pop(int(employee_id), None) is not None

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        return self.update(employee_id, {"is_active": is_active})

    def count(self) -> int:
        return len(self._by_id)


class InMemoryHolidays:
    def __init__(self, dates: Optional[list[date]] = None):
        self._by_id: dict[int, Holiday] = {}
        for d in dates or []:
            self.create(holiday_date=d)

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda h: h.holiday_date, reverse=True)

    def list_in_range(self, *, start_date: date, end_date: date):
        return sorted(
            (h for h in self._by_id.values() if start_date <= h.holiday_date <= end_date),
            key=lambda h: h.holiday_date,
        )

    def get_by_date(self, holiday_date: date) -> Optional[Holiday]:
        return next((h for h in self._by_id.values() if h.holiday_date == holiday_date), None)

    def create(self, *, holiday_date: date, description=None) -> int:
        holiday_id = len(self._by_id) + 1
        self._by_id[holiday_id] = Holiday(holiday_id=holiday_id, holiday_date=holiday_date, description=description)
        return holiday_id

    def delete_by_id(self, holiday_id: int) -> bool:
        return self._by_id.pop(int(holiday_id), None) is not None


class InMemoryOvertime:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self.records: list[OvertimeRecord] = []
        self.last_range = None

    def _joined(self, record: OvertimeRecord) -> OvertimeRecordWithEmployee:
        return OvertimeRecordWithEmployee(record=record, employee=self._employees.get_by_id(record.employee_id))

    def list_recent(self, *, limit: int):
        items = sorted(self.records, key=lambda r: r.work_date, reverse=True)
        return [self._joined(r) for r in items[:limit]]

    def list_for_employee(self, employee_id: int, *, limit: int):
        return [r for r in self.records if r.employee_id == employee_id][:limit]

    def list_in_range(self, *, start_date: date, end_date: date):
        self.last_range = (start_date, end_date)
        return [self._joined(r) for r in self.records if start_date <= r.work_date <= end_date]

    def get_by_id(self, record_id: int) -> Optional[OvertimeRecord]:
        return next((r for r in self.records if r.record_id == record_id), None)

    def create(self, *, employee_id, work_date, overtime_hours, is_holiday, notes=None, created_by=None) -> int:
        record_id = len(self.records) + 1
        self.records.append(
            OvertimeRecord(
                record_id=record_id,
                employee_id=employee_id,
                work_date=work_date,
                overtime_hours=overtime_hours,
                is_holiday=is_holiday,
                notes=notes,
                created_by=created_by,
            )
        )
        return record_id

    def update(self, record_id: int, fields: dict) -> bool:
        for i, r in enumerate(self.records):
            if r.record_id == record_id:
                self.records[i] = replace(r, **fields)
                return True
        return False

    def delete_by_id(self, record_id: int) -> bool:
        before = len(self.records)
        self.records = [r for r in self.records if r.record_id != record_id]
        return len(self.records) < before

    def count(self) -> int:
        return len(self.records)


class InMemoryProfiles:
    def __init__(self, profiles: Optional[list[Profile]] = None):
        self._by_id: dict[int, Profile] = {p.profile_id: p for p in profiles or []}

    def get_by_id(self, profile_id: int) -> Optional[Profile]:
        return self._by_id.get(int(profile_id))

    def get_by_username(self, username: str) -> Optional[Profile]:
        return next((p for p in self._by_id.values() if p.username == username), None)

    def list_all(self):
        return list(self._by_id.values())

    def create(self, *, username: str, password_hash: str, role: Role) -> int:
        profile_id = max(self._by_id, default=0) + 1
        self._by_id[profile_id] = Profile(profile_id=profile_id, username=username, password_hash=password_hash, role=role)
        return profile_id

    def update_role(self, profile_id: int, *, role: Role) -> bool:
        existing = self._by_id.get(int(profile_id))
        if not existing:
            return False
        self._by_id[existing.profile_id] = replace(existing, role=role)
        return True


def make_employee(employee_id: int, *, base_salary: float = 2400.0, department: Department = Department.FINANCE) -> Employee:
    return Employee(
        employee_id=employee_id,
        employee_number=f"E-{employee_id:03d}",
        full_name=f"Employee {employee_id}",
        department=department,
        base_salary=base_salary,
    )


def make_record(
    record_id: int,
    employee: Optional[Employee],
    hours: float,
    *,
    is_holiday: bool = False,
    work_date: date = date(2026, 1, 15),
) -> OvertimeRecordWithEmployee:
    return OvertimeRecordWithEmployee(
        record=OvertimeRecord(
            record_id=record_id,
            employee_id=employee.employee_id if employee else 999,
            work_date=work_date,
            overtime_hours=hours,
            is_holiday=is_holiday,
        ),
        employee=employee,
    )
