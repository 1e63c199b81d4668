from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_admin
from ..core.exceptions import NotFoundError, ValidationError
from ..users.model import SessionUser
from .model import Holiday
from .repository import HolidayRepository


class HolidayService:
    """Use case: official holiday calendar."""

    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_all(self) -> Sequence[Holiday]:
        return self._holidays.list_all()

    def list_in_range(self, *, start: date, end: date) -> Sequence[Holiday]:
        if end < start:
            raise ValidationError("End date must not be before start date")
        return self._holidays.list_in_range(start_date=start, end_date=end)

    def is_holiday(self, work_date: date) -> bool:
        return self._holidays.get_by_date(work_date) is not None

    def create(self, *, current_user: SessionUser, holiday_date: date, description: Optional[str] = None) -> int:
        require_admin(current_user)
        if self._holidays.get_by_date(holiday_date):
            raise ValidationError("This date is already a holiday")
        return self._holidays.create(holiday_date=holiday_date, description=(description or "").strip() or None)

    def delete(self, *, current_user: SessionUser, holiday_id: int) -> None:
        require_admin(current_user)
        if not self._holidays.delete_by_id(int(holiday_id)):
            raise NotFoundError("Holiday not found")
