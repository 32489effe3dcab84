from __future__ import annotations

import logging
from itertools import groupby
from typing import Optional

from ..common.formatting import format_number
from ..common.shift_hours import ShiftHoursSetting
from ..core.constants import REPORT_RULE_WIDTH
from ..core.exceptions import CalculationError, DomainError
from ..employees.model import Employee
from ..employees.roster import Roster
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import EmployeeLine, Period, ReportData, SalaryResult, SalarySummary, ShiftGroup, WarehouseGroup

logger = logging.getLogger(__name__)


class PayrollReportService:
    def __init__(
        self,
        roster: Roster,
        *,
        calculator: Optional[PayrollCalculator] = None,
        shift_hours: Optional[ShiftHoursSetting] = None,
    ):
        self._roster = roster
        self._calculator = calculator or StandardPayrollCalculator()
        self._shift_hours = shift_hours or ShiftHoursSetting()

    @property
    def default_shift_hours(self) -> float:
        return self._shift_hours.value

    def set_default_shift_hours(self, value) -> float:
        return self._shift_hours.update(value)

    def _calculate(self, employee: Employee, period: Period) -> SalaryResult:
        try:
            return self._calculator.calculate(employee, period, self._shift_hours.value)
        except DomainError:
            raise
        except Exception as e:
            logger.exception(
                "Salary calculation failed: employee=%s period=%s default_shift_hours=%s employees_count=%s",
                employee.name,
                period,
                self._shift_hours.value,
                len(self._roster),
            )
            raise CalculationError(f"Salary calculation failed for {employee.name}") from e

    def salary_for(self, employee_id: int, period: Period) -> SalaryResult:
        return self._calculate(self._roster.get(employee_id), period)

    def salary_summary(self, employee_id: int, period: Period) -> SalarySummary:
        employee = self._roster.get(employee_id)
        result = self._calculate(employee, period)

        parts = [f"Warehouse: {employee.warehouse} · Shift: {employee.shift_name}.", f"Shifts: {result.shifts_worked}."]
        if employee.uses_hourly_rate:
            parts.append(f"Hours: {format_number(result.total_hours)}.")
        parts.append(f"Base: {format_number(result.base_amount)}.")
        parts.append(f"Extras: {format_number(result.extras_amount)}.")

        return SalarySummary(
            headline=f"{employee.name}: {format_number(result.grand_total)}",
            details=" ".join(parts),
            result=result,
        )

    def build_report(self, period: Period) -> ReportData:
        employees = sorted(self._roster.list_by_name(), key=lambda e: (e.warehouse, e.shift_name, e.name))

        warehouses: list[WarehouseGroup] = []
        for warehouse, in_warehouse in groupby(employees, key=lambda e: e.warehouse):
            shifts: list[ShiftGroup] = []
            for shift_name, in_shift in groupby(in_warehouse, key=lambda e: e.shift_name):
                lines = [
                    EmployeeLine(
                        employee_id=int(e.employee_id),
                        name=e.name,
                        uses_hourly_rate=e.uses_hourly_rate,
                        result=self._calculate(e, period),
                    )
                    for e in in_shift
                ]
                shifts.append(ShiftGroup(shift_name=shift_name, employees=lines))
            warehouses.append(WarehouseGroup(warehouse=warehouse, shifts=shifts))

        return ReportData(period=period, warehouses=warehouses)

    def render_report(self, report: ReportData) -> str:
        out = [f"Report for period: {report.period}", "=" * REPORT_RULE_WIDTH]
        for group in report.warehouses:
            out.append("")
            out.append(f"Warehouse: {group.warehouse}")
            for shift in group.shifts:
                out.append(f"  Shift: {shift.shift_name}")
                for line in shift.employees:
                    r = line.result
                    mode = f"hourly, h: {format_number(r.total_hours)}" if line.uses_hourly_rate else "daily"
                    out.append(
                        f"    • {line.name:<16} | {mode:<20} | shifts: {r.shifts_worked:>2} "
                        f"| total: {format_number(r.grand_total):>8}"
                    )
        return "\n".join(out) + "\n"
