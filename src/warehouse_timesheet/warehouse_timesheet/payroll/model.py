from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List

from ..common.datetime_utils import format_dmy, month_bounds
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Period:
    """Inclusive date range used to filter marks."""

    start: date
    end: date

    def __post_init__(self):
        if self.end < self.start:
            raise ValidationError("Check the period: 'to' date is before 'from' date")

    @classmethod
    def for_month(cls, year: int, month: int) -> "Period":
        start, end = month_bounds(year, month)
        return cls(start=start, end=end)

    def __str__(self) -> str:
        return f"{format_dmy(self.start)} - {format_dmy(self.end)}"


@dataclass(frozen=True)
class SalaryResult:
    shifts_worked: int
    total_hours: Decimal
    base_amount: Decimal
    extras_amount: Decimal
    grand_total: Decimal


@dataclass(frozen=True)
class SalarySummary:
    headline: str
    details: str
    result: SalaryResult


@dataclass(frozen=True)
class EmployeeLine:
    employee_id: int
    name: str
    uses_hourly_rate: bool
    result: SalaryResult


@dataclass(frozen=True)
class ShiftGroup:
    shift_name: str
    employees: List[EmployeeLine]


@dataclass(frozen=True)
class WarehouseGroup:
    warehouse: str
    shifts: List[ShiftGroup]


@dataclass(frozen=True)
class ReportData:
    period: Period
    warehouses: List[WarehouseGroup]
