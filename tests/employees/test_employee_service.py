from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.warehouse_timesheet.warehouse_timesheet.core.exceptions import ValidationError
from src.warehouse_timesheet.warehouse_timesheet.employees.service import EmployeeForm


def test_form_defaults_blank_labels():
    form = EmployeeForm.parse({"name": "  Pavel ", "daily_rate": "1800.50", "warehouse": " ", "shift_name": ""})

    assert form.name == "Pavel"
    assert form.warehouse == "Main warehouse"
    assert form.shift_name == "Day"
    assert form.daily_rate == Decimal("1800.50")
    assert form.hourly_rate == Decimal("0")
    assert form.uses_hourly_rate is False


@pytest.mark.parametrize(
    "data",
    [
        {"name": ""},
        {"name": "A", "daily_rate": "-5"},
        {"name": "A", "hourly_rate": "ten"},
        {"name": "A", "daily_rate": "10.00001"},
        {"name": "A", "hourly_rate": "100000000000000"},
    ],
)
def test_form_rejects_bad_input(data):
    with pytest.raises(ValidationError):
        EmployeeForm.parse(data)


def test_create_assigns_identity(container, repo):
    form = EmployeeForm.parse({"name": "Carl", "hourly_rate": "310", "uses_hourly_rate": "on"})

    employee = container.employee_service.create(form)

    assert employee.employee_id == 3
    assert repo.employees[3]["name"] == "Carl"
    assert container.roster.get(3).uses_hourly_rate is True


def test_update_writes_all_fields(container, repo):
    form = EmployeeForm.parse({"name": "Anna K", "warehouse": "East", "shift_name": "Night", "daily_rate": "2100"})

    container.employee_service.update(1, form)

    assert repo.employees[1]["warehouse"] == "East"
    assert repo.employees[1]["daily_rate"] == Decimal("2100")
    assert str(container.roster.get(1)) == "Anna K · East · Night"


def test_delete_cascades_marks(container, repo, make_collector):
    day = date(2026, 10, 1)
    container.attendance_service.advance_mark(1, day, make_collector())
    container.attendance_service.advance_mark(2, day, make_collector())

    container.employee_service.delete(1)

    assert [k for k in repo.marks if k[0] == 1] == []
    assert (2, day) in repo.marks
    assert 1 not in container.roster
    assert [e.name for e in repo.load_all()] == ["Boris"]
