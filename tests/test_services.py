from datetime import date

import pytest
from werkzeug.security import generate_password_hash

from src.overtime_tracker.overtime_tracker.core.enums import Department, Role
from src.overtime_tracker.overtime_tracker.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from src.overtime_tracker.overtime_tracker.employees.service import EmployeeService
from src.overtime_tracker.overtime_tracker.holidays.service import HolidayService
from src.overtime_tracker.overtime_tracker.users.model import Profile
from src.overtime_tracker.overtime_tracker.users.service import AuthService, ProfileService
from tests.fakes import InMemoryEmployees, InMemoryHolidays, InMemoryProfiles, make_employee


def test_create_employee(admin_user):
    repo = InMemoryEmployees()
    service = EmployeeService(repo)

    employee_id = service.create(
        current_user=admin_user,
        employee_number=" E-100 ",
        full_name="Sara",
        department="hr",
        base_salary="3000",
    )

    employee = service.get(employee_id)
    assert (employee.employee_number, employee.department, employee.base_salary) == ("E-100", Department.HR, 3000.0)
    assert employee.is_active


@pytest.mark.parametrize(
    "overrides",
    [
        {"employee_number": "E-001"},
        {"employee_number": "  "},
        {"full_name": ""},
        {"department": "marketing"},
        {"base_salary": 0},
        {"base_salary": "abc"},
    ],
)
def test_create_employee_validation(admin_user, overrides):
    service = EmployeeService(InMemoryEmployees([make_employee(1)]))
    fields = {"employee_number": "E-100", "full_name": "Sara", "department": "hr", "base_salary": 3000}
    fields.update(overrides)

    with pytest.raises(ValidationError):
        service.create(current_user=admin_user, **fields)


def test_employee_changes_require_admin(regular_user):
    service = EmployeeService(InMemoryEmployees([make_employee(1)]))
    with pytest.raises(AuthorizationError):
        service.create(
            current_user=regular_user,
            employee_number="E-100",
            full_name="Sara",
            department="hr",
            base_salary=3000,
        )
    with pytest.raises(AuthorizationError):
        service.toggle_active(current_user=regular_user, employee_id=1)


def test_update_rejects_taken_number(admin_user):
    service = EmployeeService(InMemoryEmployees([make_employee(1), make_employee(2)]))

    with pytest.raises(ValidationError):
        service.update(current_user=admin_user, employee_id=2, fields={"employee_number": "E-001"})

    service.update(current_user=admin_user, employee_id=2, fields={"employee_number": "E-002", "base_salary": 5000})
    assert service.get(2).base_salary == 5000.0


def test_toggle_active_and_delete(admin_user):
    service = EmployeeService(InMemoryEmployees([make_employee(1)]))

    assert service.toggle_active(current_user=admin_user, employee_id=1) is False
    assert service.list_active() == []
    assert service.toggle_active(current_user=admin_user, employee_id=1) is True

    service.delete(current_user=admin_user, employee_id=1)
    with pytest.raises(NotFoundError):
        service.get(1)


def test_holiday_calendar(admin_user, regular_user):
    service = HolidayService(InMemoryHolidays())

    service.create(current_user=admin_user, holiday_date=date(2026, 3, 20), description=" Eid ")

    assert service.is_holiday(date(2026, 3, 20))
    assert not service.is_holiday(date(2026, 3, 21))
    assert service.list_all()[0].description == "Eid"
    with pytest.raises(ValidationError):
        service.create(current_user=admin_user, holiday_date=date(2026, 3, 20))
    with pytest.raises(AuthorizationError):
        service.create(current_user=regular_user, holiday_date=date(2026, 3, 21))


def _profiles():
    return InMemoryProfiles(
        [
            Profile(profile_id=1, username="admin", password_hash=generate_password_hash("secret1"), role=Role.ADMIN),
            Profile(profile_id=2, username="clerk", password_hash="CHANGE_ME", role=Role.USER),
        ]
    )


def test_authenticate():
    service = AuthService(_profiles())

    user = service.authenticate(" admin ", "secret1")

    assert (user.profile_id, user.role, user.is_admin) == (1, Role.ADMIN, True)
    with pytest.raises(AuthenticationError):
        service.authenticate("admin", "wrong")
    with pytest.raises(AuthenticationError):
        service.authenticate("nobody", "secret1")
    with pytest.raises(AuthenticationError):
        service.authenticate("clerk", "CHANGE_ME")


def test_sign_up_creates_regular_user():
    profiles = _profiles()
    service = AuthService(profiles)

    user = service.sign_up("newbie", "longenough")

    assert user.role == Role.USER
    assert service.authenticate("newbie", "longenough").profile_id == user.profile_id
    with pytest.raises(ValidationError):
        service.sign_up("newbie", "longenough")
    with pytest.raises(ValidationError):
        service.sign_up("other", "12345")


def test_change_role(admin_user, regular_user):
    profiles = _profiles()
    service = ProfileService(profiles)

    service.change_role(current_user=admin_user, profile_id=2, role="admin")
    assert profiles.get_by_id(2).role == Role.ADMIN

    with pytest.raises(ValidationError):
        service.change_role(current_user=admin_user, profile_id=1, role="user")
    with pytest.raises(ValidationError):
        service.change_role(current_user=admin_user, profile_id=2, role="owner")
    with pytest.raises(NotFoundError):
        service.change_role(current_user=admin_user, profile_id=9, role="user")
    with pytest.raises(AuthorizationError):
        service.list_all(current_user=regular_user)
