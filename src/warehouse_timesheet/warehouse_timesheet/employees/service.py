from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Mapping

from ..common.validators import parse_flag, parse_rate, require_non_empty
from ..core.constants import DEFAULT_SHIFT_NAME, DEFAULT_WAREHOUSE
from .model import Employee
from .repository import TimesheetRepository
from .roster import Roster

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeForm:
    """Validated employee fields coming from the UI."""

    name: str
    warehouse: str
    shift_name: str
    daily_rate: Decimal
    hourly_rate: Decimal
    uses_hourly_rate: bool

    @classmethod
    def parse(cls, data: Mapping) -> "EmployeeForm":
        name = require_non_empty(str(data.get("name") or ""), "Employee name")
        warehouse = str(data.get("warehouse") or "").strip() or DEFAULT_WAREHOUSE
        shift_name = str(data.get("shift_name") or "").strip() or DEFAULT_SHIFT_NAME
        return cls(
            name=name,
            warehouse=warehouse,
            shift_name=shift_name,
            daily_rate=parse_rate(data.get("daily_rate", "0"), "Daily rate"),
            hourly_rate=parse_rate(data.get("hourly_rate", "0"), "Hourly rate"),
            uses_hourly_rate=parse_flag(data.get("uses_hourly_rate")),
        )


class EmployeeService:
    """Use cases: add, edit and delete employees.

    The roster is updated and then written through to storage.
    """

    def __init__(self, roster: Roster, repository: TimesheetRepository):
        self._roster = roster
        self._repository = repository

    def list_employees(self) -> List[Employee]:
        return self._roster.list_by_name()

    def get(self, employee_id: int) -> Employee:
        return self._roster.get(employee_id)

    def create(self, form: EmployeeForm) -> Employee:
        employee = Employee(
            employee_id=None,
            name=form.name,
            warehouse=form.warehouse,
            shift_name=form.shift_name,
            daily_rate=form.daily_rate,
            hourly_rate=form.hourly_rate,
            uses_hourly_rate=form.uses_hourly_rate,
        )
        # Identity comes from storage, so the write happens first here.
        employee.employee_id = self._repository.save_employee(employee)
        self._roster.add(employee)
        logger.info("Employee %s created (id=%s)", employee.name, employee.employee_id)
        return employee

    def update(self, employee_id: int, form: EmployeeForm) -> Employee:
        employee = self._roster.get(employee_id)
        employee.name = form.name
        employee.warehouse = form.warehouse
        employee.shift_name = form.shift_name
        employee.daily_rate = form.daily_rate
        employee.hourly_rate = form.hourly_rate
        employee.uses_hourly_rate = form.uses_hourly_rate
        self._repository.save_employee(employee)
        return employee

    def delete(self, employee_id: int) -> None:
        employee = self._roster.remove(employee_id)
        self._repository.delete_employee(int(employee_id))
        logger.info("Employee %s deleted (id=%s)", employee.name, employee_id)
