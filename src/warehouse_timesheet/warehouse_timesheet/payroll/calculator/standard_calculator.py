from __future__ import annotations

from decimal import Decimal

from ...common.formatting import hours_to_decimal
from ...employees.model import Employee
from ..model import Period, SalaryResult
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule.

    Extras of every mark in the period count, worked or not. Worked marks add
    one shift and base pay: the daily rate, or hourly rate x hours where hours
    fall back to the global default when the mark has none.
    """

    def calculate(self, employee: Employee, period: Period, default_hours: float) -> SalaryResult:
        shifts = 0
        hours_total = Decimal("0")
        base = Decimal("0")
        extras = Decimal("0")

        for mark in employee.marks_between(period.start, period.end):
            extras += mark.extra
            if not mark.worked:
                continue

            shifts += 1
            if employee.uses_hourly_rate:
                hours = mark.hours if mark.hours is not None else default_hours
                hours_total += hours_to_decimal(hours)
            else:
                base += employee.daily_rate

        if employee.uses_hourly_rate:
            base = employee.hourly_rate * hours_total

        return SalaryResult(
            shifts_worked=shifts,
            total_hours=hours_total,
            base_amount=base,
            extras_amount=extras,
            grand_total=base + extras,
        )
