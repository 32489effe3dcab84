from __future__ import annotations

from datetime import date
from typing import List, Protocol

from ..attendance.model import Mark
from .model import Employee


class TimesheetRepository(Protocol):
    """Storage gateway for employees and their marks.

    Note (DIP): services depend on this interface, not on a concrete DB.
    Every call is expected to be atomic: applied fully or not at all.
    """

    def load_all(self) -> List[Employee]:
        """Employees ordered by name, marks populated."""
        raise NotImplementedError

    def save_employee(self, employee: Employee) -> int:
        """Insert when employee_id is None, else update. Returns the id."""
        raise NotImplementedError

    def delete_employee(self, employee_id: int) -> None:
        """Delete the employee together with all of its marks."""
        raise NotImplementedError

    def save_mark(self, employee_id: int, mark: Mark) -> None:
        """Upsert keyed by (employee_id, mark date)."""
        raise NotImplementedError

    def delete_mark(self, employee_id: int, work_date: date) -> None:
        raise NotImplementedError
