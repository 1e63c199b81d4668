from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Sequence

from ..common.numbers import round_half_up
from ..common.validators import require_admin, require_positive_number
from ..core.constants import DEFAULT_EMPLOYEE_RECORDS_LIMIT, DEFAULT_RECENT_RECORDS_LIMIT
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..holidays.repository import HolidayRepository
from ..payroll.calculator.base import OvertimeCalculator
from ..payroll.calculator.standard_calculator import StandardOvertimeCalculator
from ..users.model import SessionUser
from .model import OvertimeRecord, OvertimeRecordWithEmployee
from .repository import OvertimeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentPreview:
    hourly_rate: float
    regular_rate: float
    holiday_rate: float
    amount: float


class OvertimeService:
    """Use case: manual overtime entry and record maintenance."""

    def __init__(
        self,
        overtime: OvertimeRepository,
        employees: EmployeeRepository,
        holidays: HolidayRepository,
        *,
        calculator: Optional[OvertimeCalculator] = None,
    ):
        self._overtime = overtime
        self._employees = employees
        self._holidays = holidays
        self._calculator = calculator or StandardOvertimeCalculator()

    def _resolve_holiday(self, work_date: date, is_holiday: Optional[bool]) -> bool:
        if is_holiday is not None:
            return bool(is_holiday)
        return self._holidays.get_by_date(work_date) is not None

    def _resolve_hours(self, *, overtime_hours: Any, end_time: Optional[str], is_holiday: bool) -> float:
        if end_time is not None and str(end_time).strip():
            hours = self._calculator.overtime_hours(str(end_time).strip(), is_holiday=is_holiday)
            if hours <= 0:
                raise ValidationError("End time gives no overtime hours")
            return hours
        return require_positive_number(overtime_hours, "Overtime hours")

    def record_entry(
        self,
        *,
        current_user: SessionUser,
        employee_id: int,
        work_date: date,
        overtime_hours: Any = None,
        end_time: Optional[str] = None,
        is_holiday: Optional[bool] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create one overtime record.

        Hours come either from ``overtime_hours`` or are computed from an
        ``end_time`` token. When ``is_holiday`` is omitted the holiday
        calendar decides.
        """
        if not employee_id:
            raise ValidationError("Employee is required")
        if not work_date:
            raise ValidationError("Work date is required")

        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")

        holiday = self._resolve_holiday(work_date, is_holiday)
        hours = self._resolve_hours(overtime_hours=overtime_hours, end_time=end_time, is_holiday=holiday)

        record_id = self._overtime.create(
            employee_id=employee.employee_id,
            work_date=work_date,
            overtime_hours=hours,
            is_holiday=holiday,
            notes=(notes or "").strip() or None,
            created_by=current_user.profile_id,
        )
        logger.info(
            "Overtime %.2fh (%s) on %s recorded for %s by %s",
            hours,
            "holiday" if holiday else "regular",
            work_date,
            employee.employee_number,
            current_user.username,
        )
        return record_id

    def update_record(self, *, current_user: SessionUser, record_id: int, fields: dict[str, Any]) -> None:
        require_admin(current_user)
        existing = self._overtime.get_by_id(int(record_id))
        if not existing:
            raise NotFoundError("Overtime record not found")

        data: dict[str, Any] = {}
        if "employee_id" in fields:
            if not self._employees.get_by_id(int(fields["employee_id"])):
                raise NotFoundError("Employee not found")
            data["employee_id"] = int(fields["employee_id"])
        if "work_date" in fields:
            data["work_date"] = fields["work_date"]
        if "is_holiday" in fields:
            data["is_holiday"] = bool(fields["is_holiday"])
        if "end_time" in fields or "overtime_hours" in fields:
            data["overtime_hours"] = self._resolve_hours(
                overtime_hours=fields.get("overtime_hours"),
                end_time=fields.get("end_time"),
                is_holiday=data.get("is_holiday", existing.is_holiday),
            )
        if "notes" in fields:
            data["notes"] = (fields["notes"] or "").strip() or None

        if not data:
            raise ValidationError("Nothing to update")
        self._overtime.update(existing.record_id, data)

    def delete_record(self, *, current_user: SessionUser, record_id: int) -> None:
        require_admin(current_user)
        if not self._overtime.delete_by_id(int(record_id)):
            raise NotFoundError("Overtime record not found")

    def list_recent(self, *, limit: int = DEFAULT_RECENT_RECORDS_LIMIT) -> Sequence[OvertimeRecordWithEmployee]:
        return self._overtime.list_recent(limit=limit)

    def list_for_employee(self, employee_id: int, *, limit: int = DEFAULT_EMPLOYEE_RECORDS_LIMIT) -> Sequence[OvertimeRecord]:
        return self._overtime.list_for_employee(int(employee_id), limit=limit)

    def list_in_range(self, *, start: date, end: date) -> Sequence[OvertimeRecordWithEmployee]:
        if end < start:
            raise ValidationError("End date must not be before start date")
        return self._overtime.list_in_range(start_date=start, end_date=end)

    def payment_preview(self, *, base_salary: Any, hours: float, is_holiday: bool) -> PaymentPreview:
        salary = require_positive_number(base_salary, "Base salary")
        calc = self._calculator
        return PaymentPreview(
            hourly_rate=round_half_up(calc.hourly_rate(salary), 3),
            regular_rate=round_half_up(calc.overtime_rate(salary, is_holiday=False), 3),
            holiday_rate=round_half_up(calc.overtime_rate(salary, is_holiday=True), 3),
            amount=calc.overtime_amount(salary, float(hours), is_holiday=is_holiday),
        )
