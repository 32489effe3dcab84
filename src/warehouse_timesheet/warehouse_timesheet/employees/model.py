from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, Iterator, Optional

from ..attendance.model import Mark
from ..core.constants import DEFAULT_SHIFT_NAME, DEFAULT_WAREHOUSE
from ..core.exceptions import ValidationError


@dataclass
class Employee:
    """Domain entity: Employee with its per-date marks.

    Note: plain data object, no DB access code here.
    """

    employee_id: Optional[int]
    name: str
    warehouse: str = DEFAULT_WAREHOUSE
    shift_name: str = DEFAULT_SHIFT_NAME
    daily_rate: Decimal = Decimal("0")
    hourly_rate: Decimal = Decimal("0")
    uses_hourly_rate: bool = False
    marks: Dict[date, Mark] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self):
        if self.daily_rate < 0 or self.hourly_rate < 0:
            raise ValidationError("Rates must not be negative")

    def __str__(self) -> str:
        return f"{self.name} · {self.warehouse} · {self.shift_name}"

    @property
    def mode_label(self) -> str:
        return "hourly" if self.uses_hourly_rate else "daily"

    def marks_between(self, start: date, end: date) -> Iterator[Mark]:
        for work_date in sorted(self.marks):
            if start <= work_date <= end:
                yield self.marks[work_date]
