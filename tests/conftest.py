from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

import pytest

from src.warehouse_timesheet.warehouse_timesheet.attendance.model import Mark, WorkedAndExtra, WorkedHoursAndExtra
from src.warehouse_timesheet.warehouse_timesheet.container import build_services
from src.warehouse_timesheet.warehouse_timesheet.core.exceptions import StorageError
from src.warehouse_timesheet.warehouse_timesheet.employees.model import Employee


class InMemoryTimesheetRepository:
    def __init__(self, employees: Optional[List[Employee]] = None):
        self._next_id = 1
        self.employees: Dict[int, dict] = {}
        self.marks: Dict[Tuple[int, date], Mark] = {}
        self.fail_writes = False
        self.calls: List[tuple] = []
        for e in employees or []:
            e.employee_id = self.save_employee(e)
            for m in e.marks.values():
                self.save_mark(e.employee_id, m)
        self.calls.clear()

    def _check(self):
        if self.fail_writes:
            raise StorageError("database is gone")

    def load_all(self) -> List[Employee]:
        out = []
        for employee_id, fields in self.employees.items():
            e = Employee(employee_id=employee_id, **fields)
            for (owner, work_date), mark in self.marks.items():
                if owner == employee_id:
                    e.marks[work_date] = mark
            out.append(e)
        return sorted(out, key=lambda e: e.name)

    def save_employee(self, employee: Employee) -> int:
        self._check()
        self.calls.append(("save_employee", employee.employee_id))
        employee_id = employee.employee_id
        if employee_id is None:
            employee_id = self._next_id
            self._next_id += 1
        self.employees[employee_id] = {
            "name": employee.name,
            "warehouse": employee.warehouse,
            "shift_name": employee.shift_name,
            "daily_rate": employee.daily_rate,
            "hourly_rate": employee.hourly_rate,
            "uses_hourly_rate": employee.uses_hourly_rate,
        }
        return employee_id

    def delete_employee(self, employee_id: int) -> None:
        self._check()
        self.calls.append(("delete_employee", employee_id))
        self.employees.pop(employee_id, None)
        for key in [k for k in self.marks if k[0] == employee_id]:
            del self.marks[key]

    def save_mark(self, employee_id: int, mark: Mark) -> None:
        self._check()
        self.calls.append(("save_mark", employee_id, mark.work_date))
        self.marks[(employee_id, mark.work_date)] = mark

    def delete_mark(self, employee_id: int, work_date: date) -> None:
        self._check()
        self.calls.append(("delete_mark", employee_id, work_date))
        self.marks.pop((employee_id, work_date), None)


class ScriptedCollector:
    """Answers extended-input requests from a fixed script (None = cancel)."""

    def __init__(self, *answers):
        self._answers = list(answers)
        self.requests: List[tuple] = []

    def collect_worked_and_extra(self, initial_worked, initial_extra):
        self.requests.append(("worked_and_extra", initial_worked, initial_extra))
        return self._answers.pop(0) if self._answers else None

    def collect_worked_hours_and_extra(self, initial_worked, initial_hours, initial_extra):
        self.requests.append(("worked_hours_and_extra", initial_worked, initial_hours, initial_extra))
        return self._answers.pop(0) if self._answers else None


@pytest.fixture
def make_collector():
    return ScriptedCollector


@pytest.fixture
def confirming_collector():
    return ScriptedCollector(
        WorkedAndExtra(worked=True, extra=Decimal("150")),
        WorkedHoursAndExtra(worked=True, hours=6.5, extra=Decimal("-20")),
    )


@pytest.fixture
def daily_employee() -> Employee:
    return Employee(employee_id=None, name="Anna", warehouse="North", shift_name="Day", daily_rate=Decimal("2000"))


@pytest.fixture
def hourly_employee() -> Employee:
    return Employee(
        employee_id=None,
        name="Boris",
        warehouse="North",
        shift_name="Night",
        hourly_rate=Decimal("300"),
        uses_hourly_rate=True,
    )


@pytest.fixture
def repo(daily_employee, hourly_employee) -> InMemoryTimesheetRepository:
    return InMemoryTimesheetRepository([daily_employee, hourly_employee])


@pytest.fixture
def container(repo):
    return build_services(repo, default_shift_hours=8)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.warehouse_timesheet.warehouse_timesheet.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
