from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import month_range, now_local
from ..employees.repository import EmployeeRepository
from ..overtime.repository import OvertimeRepository
from .aggregator import build_department_summary, build_monthly_report
from .calculator.base import OvertimeCalculator
from .calculator.standard_calculator import StandardOvertimeCalculator
from .model import DashboardStats, DepartmentSummary, MonthlyOvertimeReport

logger = logging.getLogger(__name__)


class OvertimeReportService:
    """Use case: monthly overtime reports, department rollups and dashboard figures."""

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

    def monthly_report(self, year: int, month: int) -> list[MonthlyOvertimeReport]:
        start, end = month_range(year, month)
        records = self._overtime.list_in_range(start_date=start, end_date=end)
        report = build_monthly_report(records, year, month, calculator=self._calculator)
        logger.info("Monthly report %04d-%02d: %d records -> %d employees", year, month, len(records), len(report))
        return report

    def department_summary(self, year: int, month: int) -> list[DepartmentSummary]:
        return build_department_summary(self.monthly_report(year, month))

    def dashboard_stats(self, *, today: Optional[date] = None) -> DashboardStats:
        today = today or now_local().date()
        report = self.monthly_report(today.year, today.month)
        return DashboardStats(
            total_employees=self._employees.count(),
            total_records=self._overtime.count(),
            monthly_hours=sum(r.total_hours for r in report),
            monthly_amount=sum(r.total_amount for r in report),
        )
