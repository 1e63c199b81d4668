from __future__ import annotations

import csv
import io
from typing import Sequence

import pandas as pd

from .model import DepartmentSummary, MonthlyOvertimeReport

REPORT_COLUMNS = [
    ("employee_number", "رقم الموظف"),
    ("full_name", "الاسم"),
    ("department", "القسم"),
    ("base_salary", "الراتب الأساسي"),
    ("regular_hours", "ساعات عادية"),
    ("holiday_hours", "ساعات عطل"),
    ("total_hours", "إجمالي الساعات"),
    ("regular_amount", "مبلغ عادي"),
    ("holiday_amount", "مبلغ عطل"),
    ("total_amount", "الإجمالي"),
]

DEPARTMENT_COLUMNS = [
    ("department", "القسم"),
    ("employee_count", "عدد الموظفين"),
    ("total_hours", "إجمالي الساعات"),
    ("total_amount", "الإجمالي"),
]

CSV_MIMETYPE = "text/csv"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def report_filename(year: int, month: int, *, extension: str = "csv") -> str:
    return f"overtime_report_{year}_{month}.{extension}"


def report_row_values(row: MonthlyOvertimeReport) -> list[str]:
    """Display values for one report row, amounts formatted to 2 places."""
    return [
        row.employee_number,
        row.full_name,
        row.department.label,
        f"{row.base_salary:.2f}",
        f"{row.regular_hours:.2f}",
        f"{row.holiday_hours:.2f}",
        f"{row.total_hours:.2f}",
        f"{row.regular_amount:.2f}",
        f"{row.holiday_amount:.2f}",
        f"{row.total_amount:.2f}",
    ]


def department_row_values(row: DepartmentSummary) -> list[str]:
    return [
        row.department.label,
        str(row.employee_count),
        f"{row.total_hours:.2f}",
        f"{row.total_amount:.2f}",
    ]


def report_to_csv_bytes(report: Sequence[MonthlyOvertimeReport]) -> bytes:
    """Serialize report rows to CSV.

    The UTF-8 BOM lets spreadsheet apps detect the encoding of Arabic headers.
    """
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow([header for _, header in REPORT_COLUMNS])
    for row in report:
        writer.writerow(report_row_values(row))
    return out.getvalue().encode("utf-8-sig")


def report_to_excel_bytes(
    report: Sequence[MonthlyOvertimeReport],
    departments: Sequence[DepartmentSummary] = (),
) -> bytes:
    df = pd.DataFrame(
        [report_row_values(r) for r in report],
        columns=[header for _, header in REPORT_COLUMNS],
    )

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Employees")
        if departments:
            dept_df = pd.DataFrame(
                [department_row_values(d) for d in departments],
                columns=[header for _, header in DEPARTMENT_COLUMNS],
            )
            dept_df.to_excel(writer, index=False, sheet_name="Departments")
    return output.getvalue()
