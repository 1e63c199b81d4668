from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import OvertimeRecord, OvertimeRecordWithEmployee


class OvertimeRepository(Protocol):
    def list_recent(self, *, limit: int) -> Sequence[OvertimeRecordWithEmployee]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int, *, limit: int) -> Sequence[OvertimeRecord]:
        raise NotImplementedError

    def list_in_range(self, *, start_date: date, end_date: date) -> Sequence[OvertimeRecordWithEmployee]:
        """Records with start_date <= work_date <= end_date, joined with their employee."""

        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[OvertimeRecord]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update(self, record_id: int, fields: dict) -> bool:
        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
