from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..employees.model import Employee


@dataclass(frozen=True)
class OvertimeRecord:
    """Domain entity: overtime worked by one employee on one day."""

    record_id: int
    employee_id: int
    work_date: date
    overtime_hours: float
    is_holiday: bool
    notes: Optional[str] = None
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class OvertimeRecordWithEmployee:
    """Read-model for reports: a record joined with its owning employee."""

    record: OvertimeRecord
    employee: Optional[Employee]
