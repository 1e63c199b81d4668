from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import ImportRowStatus


@dataclass(frozen=True)
class ImportRow:
    """One spreadsheet row waiting to become an overtime record."""

    end_time: str
    work_date: Optional[date]
    overtime_hours: float
    is_holiday: bool = False
    employee_id: Optional[int] = None
    status: ImportRowStatus = ImportRowStatus.PENDING
    error: Optional[str] = None


@dataclass(frozen=True)
class ImportPreview:
    rows: list[ImportRow]
    total_rows: int
    skipped_unparseable: int
    skipped_before_threshold: int

    @property
    def skipped(self) -> int:
        return self.skipped_unparseable + self.skipped_before_threshold


@dataclass(frozen=True)
class ImportResult:
    rows: list[ImportRow]
    success_count: int
    error_count: int
