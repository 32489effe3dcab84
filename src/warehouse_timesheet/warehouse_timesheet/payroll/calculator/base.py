from __future__ import annotations

from abc import ABC, abstractmethod

from ...employees.model import Employee
from ..model import Period, SalaryResult


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, employee: Employee, period: Period, default_hours: float) -> SalaryResult:
        raise NotImplementedError
