"""Example: use the service layer directly (without Flask).

Prints last month's overtime report and department totals.
"""

import importlib
from datetime import date

from dotenv import load_dotenv

from config import get_settings_module

from src.overtime_tracker.overtime_tracker.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    today = date.today()
    year, month = (today.year, today.month - 1) if today.month > 1 else (today.year - 1, 12)

    for row in container.report_service.monthly_report(year, month):
        print(f"{row.employee_number:<10} {row.full_name:<30} {row.total_hours:>7.2f}h {row.total_amount:>10.2f}")
    for dept in container.report_service.department_summary(year, month):
        print(f"{dept.department.label:<25} {dept.employee_count:>3} {dept.total_hours:>7.2f}h {dept.total_amount:>10.2f}")


if __name__ == "__main__":
    main()
