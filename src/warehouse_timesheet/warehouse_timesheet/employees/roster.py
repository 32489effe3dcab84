from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional

from ..attendance.model import Mark
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee


class Roster:
    """In-memory set of employees and their marks.

    The roster is the authoritative copy while the app runs; storage mirrors it.
    Reads of unset dates return a transient empty mark and never add an entry.
    """

    def __init__(self, employees: Iterable[Employee] = ()):
        self._employees: Dict[int, Employee] = {}
        for employee in employees:
            self.add(employee)

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees

    def add(self, employee: Employee) -> None:
        if employee.employee_id is None:
            raise ValidationError("Employee must be saved before joining the roster")
        self._employees[int(employee.employee_id)] = employee

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get(int(employee_id))
        if employee is None:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def remove(self, employee_id: int) -> Employee:
        employee = self.get(employee_id)
        del self._employees[int(employee_id)]
        employee.marks.clear()
        return employee

    def list_by_name(self) -> List[Employee]:
        return sorted(self._employees.values(), key=lambda e: (e.name, e.employee_id))

    def find_mark(self, employee_id: int, work_date: date) -> Optional[Mark]:
        return self.get(employee_id).marks.get(work_date)

    def get_mark(self, employee_id: int, work_date: date) -> Mark:
        mark = self.find_mark(employee_id, work_date)
        return mark if mark is not None else Mark.empty(work_date)

    def put_mark(self, employee_id: int, mark: Mark) -> None:
        """Store a mark; an empty mark removes the date instead."""
        marks = self.get(employee_id).marks
        if mark.is_empty:
            marks.pop(mark.work_date, None)
        else:
            marks[mark.work_date] = mark
