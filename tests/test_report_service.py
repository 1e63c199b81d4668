from datetime import date

import pytest

from src.overtime_tracker.overtime_tracker.common.datetime_utils import month_range
from src.overtime_tracker.overtime_tracker.core.enums import Department
from src.overtime_tracker.overtime_tracker.payroll.service import OvertimeReportService
from tests.fakes import InMemoryEmployees, InMemoryOvertime, make_employee


def _service():
    employees = InMemoryEmployees(
        [
            make_employee(1, base_salary=2400, department=Department.HR),
            make_employee(2, base_salary=4800, department=Department.SALES),
        ]
    )
    overtime = InMemoryOvertime(employees)
    overtime.create(employee_id=1, work_date=date(2024, 2, 1), overtime_hours=3, is_holiday=False)
    overtime.create(employee_id=1, work_date=date(2024, 2, 29), overtime_hours=2, is_holiday=True)
    overtime.create(employee_id=2, work_date=date(2024, 2, 10), overtime_hours=1, is_holiday=False)
    overtime.create(employee_id=2, work_date=date(2024, 3, 1), overtime_hours=8, is_holiday=False)
    return OvertimeReportService(overtime, employees), overtime


def test_month_range_handles_leap_february():
    assert month_range(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_range(2023, 2) == (date(2023, 2, 1), date(2023, 2, 28))
    assert month_range(2026, 12) == (date(2026, 12, 1), date(2026, 12, 31))


def test_monthly_report_reads_the_whole_month():
    service, overtime = _service()

    report = service.monthly_report(2024, 2)

    assert overtime.last_range == (date(2024, 2, 1), date(2024, 2, 29))
    assert [r.employee_id for r in report] == [1, 2]
    assert report[0].total_amount == pytest.approx(67.5)
    assert report[1].total_hours == 1


def test_department_summary_for_month():
    service, _ = _service()

    summary = service.department_summary(2024, 2)

    assert [(s.department, s.employee_count) for s in summary] == [(Department.HR, 1), (Department.SALES, 1)]


def test_dashboard_stats_use_current_month():
    service, _ = _service()

    stats = service.dashboard_stats(today=date(2024, 2, 15))

    assert stats.total_employees == 2
    assert stats.total_records == 4
    assert stats.monthly_hours == 6
    assert stats.monthly_amount == pytest.approx(67.5 + 25.0)
