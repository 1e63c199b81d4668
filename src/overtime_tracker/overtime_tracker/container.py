from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.service import HolidayService
from .imports.service import ImportService
from .overtime.mysql_overtime_repository import MySQLOvertimeRepository
from .overtime.service import OvertimeService
from .payroll.calculator.standard_calculator import StandardOvertimeCalculator
from .payroll.service import OvertimeReportService
from .users.mysql_profile_repository import MySQLProfileRepository
from .users.service import AuthService, ProfileService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    profiles_repo: MySQLProfileRepository
    employees_repo: MySQLEmployeeRepository
    holidays_repo: MySQLHolidayRepository
    overtime_repo: MySQLOvertimeRepository

    auth_service: AuthService
    profile_service: ProfileService
    employee_service: EmployeeService
    holiday_service: HolidayService
    overtime_service: OvertimeService
    import_service: ImportService
    report_service: OvertimeReportService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    profiles_repo = MySQLProfileRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    overtime_repo = MySQLOvertimeRepository(conn)

    calculator = StandardOvertimeCalculator()

    return Container(
        conn=conn,
        profiles_repo=profiles_repo,
        employees_repo=employees_repo,
        holidays_repo=holidays_repo,
        overtime_repo=overtime_repo,
        auth_service=AuthService(profiles_repo),
        profile_service=ProfileService(profiles_repo),
        employee_service=EmployeeService(employees_repo),
        holiday_service=HolidayService(holidays_repo),
        overtime_service=OvertimeService(overtime_repo, employees_repo, holidays_repo, calculator=calculator),
        import_service=ImportService(overtime_repo, employees_repo, calculator=calculator),
        report_service=OvertimeReportService(overtime_repo, employees_repo, calculator=calculator),
    )
