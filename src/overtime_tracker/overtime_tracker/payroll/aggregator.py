from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import month_range
from ..overtime.model import OvertimeRecordWithEmployee
from .calculator.base import OvertimeCalculator
from .calculator.standard_calculator import StandardOvertimeCalculator
from .model import DepartmentSummary, MonthlyOvertimeReport


def build_monthly_report(
    records: Iterable[OvertimeRecordWithEmployee],
    year: Optional[int] = None,
    month: Optional[int] = None,
    *,
    calculator: Optional[OvertimeCalculator] = None,
) -> list[MonthlyOvertimeReport]:
    """Roll a month of overtime records up into one row per employee.

    Rows come out in order of each employee's first record. Records without
    a resolvable employee are skipped. Amounts are not rounded here.

    With ``year`` and ``month`` given, records dated outside that month are
    skipped as well.
    """
    month_bounds = month_range(year, month) if year is not None and month is not None else None
    calculator = calculator or StandardOvertimeCalculator()
    regular_multiplier = calculator.multiplier(is_holiday=False)
    holiday_multiplier = calculator.multiplier(is_holiday=True)

    report_map: dict[int, dict] = {}

    for item in records:
        employee = item.employee
        if employee is None:
            continue
        if month_bounds and not month_bounds[0] <= item.record.work_date <= month_bounds[1]:
            continue

        r = report_map.get(employee.employee_id)
        if not r:
            r = {
                "employee_id": employee.employee_id,
                "employee_number": employee.employee_number,
                "full_name": employee.full_name,
                "department": employee.department,
                "base_salary": employee.base_salary,
                "hourly_rate": calculator.hourly_rate(employee.base_salary),
                "regular_hours": 0.0,
                "holiday_hours": 0.0,
                "total_hours": 0.0,
                "regular_amount": 0.0,
                "holiday_amount": 0.0,
                "total_amount": 0.0,
            }
            report_map[employee.employee_id] = r

        hours = float(item.record.overtime_hours)
        if item.record.is_holiday:
            r["holiday_hours"] += hours
            r["holiday_amount"] += hours * r["hourly_rate"] * holiday_multiplier
        else:
            r["regular_hours"] += hours
            r["regular_amount"] += hours * r["hourly_rate"] * regular_multiplier

        r["total_hours"] = r["regular_hours"] + r["holiday_hours"]
        r["total_amount"] = r["regular_amount"] + r["holiday_amount"]

    return [
        MonthlyOvertimeReport(
            employee_id=r["employee_id"],
            employee_number=r["employee_number"],
            full_name=r["full_name"],
            department=r["department"],
            base_salary=r["base_salary"],
            regular_hours=r["regular_hours"],
            holiday_hours=r["holiday_hours"],
            total_hours=r["total_hours"],
            regular_amount=r["regular_amount"],
            holiday_amount=r["holiday_amount"],
            total_amount=r["total_amount"],
        )
        for r in report_map.values()
    ]


def build_department_summary(report: Sequence[MonthlyOvertimeReport]) -> list[DepartmentSummary]:
    """Group monthly report rows by department, in order of first appearance."""
    dept_map: dict[str, dict] = {}

    for row in report:
        s = dept_map.get(row.department)
        if not s:
            s = {"department": row.department, "employee_count": 0, "total_hours": 0.0, "total_amount": 0.0}
            dept_map[row.department] = s
        s["employee_count"] += 1
        s["total_hours"] += row.total_hours
        s["total_amount"] += row.total_amount

    return [DepartmentSummary(**s) for s in dept_map.values()]
