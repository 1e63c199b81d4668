from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def list_in_range(self, *, start_date: date, end_date: date) -> Sequence[Holiday]:
        raise NotImplementedError

    def get_by_date(self, holiday_date: date) -> Optional[Holiday]:
        raise NotImplementedError

    def create(self, *, holiday_date: date, description: Optional[str] = None) -> int:
        raise NotImplementedError

    def delete_by_id(self, holiday_id: int) -> bool:
        raise NotImplementedError
