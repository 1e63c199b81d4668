from datetime import date

import pytest

from src.overtime_tracker.overtime_tracker.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.overtime_tracker.overtime_tracker.overtime.service import OvertimeService
from tests.fakes import InMemoryEmployees, InMemoryHolidays, InMemoryOvertime, make_employee

NEW_YEAR = date(2026, 1, 1)


def _service():
    employees = InMemoryEmployees([make_employee(1, base_salary=2400)])
    overtime = InMemoryOvertime(employees)
    holidays = InMemoryHolidays([NEW_YEAR])
    return OvertimeService(overtime, employees, holidays), overtime


def test_record_entry_with_hours(regular_user):
    service, overtime = _service()

    service.record_entry(
        current_user=regular_user,
        employee_id=1,
        work_date=date(2026, 1, 5),
        overtime_hours="2.5",
        notes="  stock count ",
    )

    [rec] = overtime.records
    assert (rec.overtime_hours, rec.is_holiday, rec.notes, rec.created_by) == (2.5, False, "stock count", 2)


def test_record_entry_uses_holiday_calendar_for_end_time(regular_user):
    service, overtime = _service()

    service.record_entry(current_user=regular_user, employee_id=1, work_date=NEW_YEAR, end_time="6.30")
    service.record_entry(current_user=regular_user, employee_id=1, work_date=date(2026, 1, 2), end_time="6.30")

    assert [(r.is_holiday, r.overtime_hours) for r in overtime.records] == [(True, 10.5), (False, 2.0)]


def test_explicit_holiday_flag_overrides_calendar(regular_user):
    service, overtime = _service()

    service.record_entry(current_user=regular_user, employee_id=1, work_date=NEW_YEAR, end_time="6.30", is_holiday=False)

    assert overtime.records[0].overtime_hours == 2.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"overtime_hours": 0},
        {"overtime_hours": "-1"},
        {"overtime_hours": "lots"},
        {"end_time": "4.00"},
        {"end_time": "abc"},
    ],
)
def test_record_entry_rejects_non_positive_hours(regular_user, kwargs):
    service, overtime = _service()
    with pytest.raises(ValidationError):
        service.record_entry(current_user=regular_user, employee_id=1, work_date=date(2026, 1, 5), **kwargs)
    assert overtime.records == []


def test_record_entry_unknown_employee(regular_user):
    service, _ = _service()
    with pytest.raises(NotFoundError):
        service.record_entry(current_user=regular_user, employee_id=42, work_date=date(2026, 1, 5), overtime_hours=1)


def test_update_and_delete_require_admin(regular_user, admin_user):
    service, overtime = _service()
    record_id = service.record_entry(current_user=regular_user, employee_id=1, work_date=date(2026, 1, 5), overtime_hours=1)

    with pytest.raises(AuthorizationError):
        service.update_record(current_user=regular_user, record_id=record_id, fields={"overtime_hours": 2})
    with pytest.raises(AuthorizationError):
        service.delete_record(current_user=regular_user, record_id=record_id)

    service.update_record(current_user=admin_user, record_id=record_id, fields={"is_holiday": True, "end_time": "3.00"})
    assert (overtime.records[0].is_holiday, overtime.records[0].overtime_hours) == (True, 7.0)

    service.delete_record(current_user=admin_user, record_id=record_id)
    assert overtime.records == []
    with pytest.raises(NotFoundError):
        service.delete_record(current_user=admin_user, record_id=record_id)


def test_list_in_range_rejects_reversed_dates():
    service, _ = _service()
    with pytest.raises(ValidationError):
        service.list_in_range(start=date(2026, 2, 1), end=date(2026, 1, 1))


def test_payment_preview():
    service, _ = _service()

    preview = service.payment_preview(base_salary="2400", hours=2, is_holiday=False)

    assert preview.hourly_rate == 10.0
    assert preview.regular_rate == 12.5
    assert preview.holiday_rate == 15.0
    assert preview.amount == 25.0
    with pytest.raises(ValidationError):
        service.payment_preview(base_salary=0, hours=2, is_holiday=False)
