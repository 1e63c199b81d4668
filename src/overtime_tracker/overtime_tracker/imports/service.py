from __future__ import annotations

import io
import logging
from dataclasses import replace
from datetime import date
from typing import IO, Iterable, Mapping, Optional, Sequence

import pandas as pd

from ..core.enums import ImportRowStatus
from ..core.exceptions import DomainError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..overtime.repository import OvertimeRepository
from ..payroll.calculator.base import OvertimeCalculator
from ..payroll.calculator.standard_calculator import StandardOvertimeCalculator
from ..payroll.calculator.time_parser import parse_end_time
from ..users.model import SessionUser
from .model import ImportPreview, ImportResult, ImportRow
from .spreadsheet import extract_end_time, read_rows

logger = logging.getLogger(__name__)

TEMPLATE_END_TIMES = ["6.30", "7.00", "5.15", "8.00", "4.30", "6.45", "7.30", "5.00"]


class ImportService:
    """Use case: bulk overtime entry from a spreadsheet of clock-out times.

    Rows are previewed with regular-day hours, adjusted by the user (employee,
    holiday flag) and then committed one at a time.
    """

    def __init__(
        self,
        overtime: OvertimeRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[OvertimeCalculator] = None,
    ):
        self._overtime = overtime
        self._employees = employees
        self._calculator = calculator or StandardOvertimeCalculator()

    def preview(self, rows: Iterable[Mapping[str, object]], *, work_date: Optional[date]) -> ImportPreview:
        kept: list[ImportRow] = []
        total = 0
        unparseable = 0
        before_threshold = 0

        for raw in rows:
            total += 1
            end_time = extract_end_time(raw)
            hours = self._calculator.overtime_hours(end_time, is_holiday=False)
            if hours <= 0:
                if parse_end_time(end_time) is None:
                    unparseable += 1
                else:
                    before_threshold += 1
                continue
            kept.append(ImportRow(end_time=end_time, work_date=work_date, overtime_hours=hours))

        if unparseable:
            logger.warning("Import preview: %d of %d rows had an unreadable end time", unparseable, total)
        logger.info(
            "Import preview: %d rows kept, %d before threshold, %d unreadable",
            len(kept),
            before_threshold,
            unparseable,
        )
        return ImportPreview(
            rows=kept,
            total_rows=total,
            skipped_unparseable=unparseable,
            skipped_before_threshold=before_threshold,
        )

    def preview_file(self, stream: IO[bytes], filename: str, *, work_date: Optional[date]) -> ImportPreview:
        return self.preview(read_rows(stream, filename), work_date=work_date)

    def toggle_holiday(self, row: ImportRow) -> ImportRow:
        """Flip the holiday flag; hours are recomputed with the other threshold."""
        is_holiday = not row.is_holiday
        return replace(
            row,
            is_holiday=is_holiday,
            overtime_hours=self._calculator.overtime_hours(row.end_time, is_holiday=is_holiday),
        )

    def assign_employee(self, rows: Sequence[ImportRow], index: int, employee_id: int) -> list[ImportRow]:
        """Set a row's employee. Setting the first row applies it to every pending row."""
        if not 0 <= index < len(rows):
            raise ValidationError("Row index out of range")

        out = list(rows)
        out[index] = replace(out[index], employee_id=int(employee_id))
        if index == 0:
            for i in range(1, len(out)):
                if out[i].status == ImportRowStatus.PENDING:
                    out[i] = replace(out[i], employee_id=int(employee_id))
        return out

    def _validate(self, row: ImportRow) -> None:
        if not row.employee_id:
            raise ValidationError("Employee is required")
        if not row.work_date:
            raise ValidationError("Work date is required")
        if not row.overtime_hours or row.overtime_hours <= 0:
            raise ValidationError("Overtime hours must be greater than zero")
        if not self._employees.get_by_id(int(row.employee_id)):
            raise NotFoundError("Employee not found")

    def commit(self, rows: Sequence[ImportRow], *, current_user: SessionUser) -> ImportResult:
        """Persist rows one at a time.

        A failing row is marked ``error`` and does not undo rows already saved.
        Rows already marked ``success`` are left alone.
        """
        if not rows:
            raise ValidationError("No rows to import")

        out: list[ImportRow] = []
        success = 0
        errors = 0

        for row in rows:
            if row.status == ImportRowStatus.SUCCESS:
                out.append(row)
                continue
            try:
                self._validate(row)
                self._overtime.create(
                    employee_id=int(row.employee_id),
                    work_date=row.work_date,
                    overtime_hours=row.overtime_hours,
                    is_holiday=row.is_holiday,
                    created_by=current_user.profile_id,
                )
            except DomainError as e:
                out.append(replace(row, status=ImportRowStatus.ERROR, error=str(e)))
                errors += 1
                continue
            except Exception as e:
                logger.exception("Import row %r failed to save", row.end_time)
                out.append(replace(row, status=ImportRowStatus.ERROR, error=str(e) or "Unknown error"))
                errors += 1
                continue

            out.append(replace(row, status=ImportRowStatus.SUCCESS, error=None))
            success += 1

        logger.info("Import by %s: %d saved, %d failed", current_user.username, success, errors)
        return ImportResult(rows=out, success_count=success, error_count=errors)

    def template_workbook(self) -> bytes:
        df = pd.DataFrame({"ساعة الانتهاء": TEMPLATE_END_TIMES})
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Overtime Template")
        return output.getvalue()
