from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import MarkState

ZERO = Decimal("0")


@dataclass(frozen=True)
class Mark:
    """Domain entity: attendance mark of one employee on one date.

    Tagged value: `state` decides which companion fields are meaningful.
    Use the named constructors instead of building marks field by field.
    """

    work_date: date
    state: MarkState = MarkState.EMPTY
    worked: bool = False
    extra: Decimal = ZERO
    hours: Optional[float] = None

    def __post_init__(self):
        if (self.hours is not None) != (self.state is MarkState.CUSTOM_HOURS):
            raise ValueError(f"hours must be set only for {MarkState.CUSTOM_HOURS.value}")
        if self.state is MarkState.WORKED and (not self.worked or self.extra != ZERO):
            raise ValueError("WORKED mark carries worked=True and no extra")
        if self.state in (MarkState.EMPTY, MarkState.ABSENT) and (self.worked or self.extra != ZERO):
            raise ValueError(f"{self.state.value} mark carries worked=False and no extra")

    @classmethod
    def empty(cls, work_date: date) -> "Mark":
        return cls(work_date=work_date)

    @classmethod
    def full_shift(cls, work_date: date) -> "Mark":
        return cls(work_date=work_date, state=MarkState.WORKED, worked=True)

    @classmethod
    def absent(cls, work_date: date) -> "Mark":
        return cls(work_date=work_date, state=MarkState.ABSENT)

    @classmethod
    def custom(cls, work_date: date, *, worked: bool, extra: Decimal) -> "Mark":
        return cls(work_date=work_date, state=MarkState.CUSTOM_WORKED_OR_ABSENT, worked=worked, extra=extra)

    @classmethod
    def custom_hours(cls, work_date: date, *, worked: bool, hours: float, extra: Decimal) -> "Mark":
        return cls(
            work_date=work_date,
            state=MarkState.CUSTOM_HOURS,
            worked=worked,
            extra=extra,
            hours=float(hours),
        )

    @property
    def is_empty(self) -> bool:
        return self.state is MarkState.EMPTY


@dataclass(frozen=True)
class WorkedAndExtra:
    worked: bool
    extra: Decimal


@dataclass(frozen=True)
class WorkedHoursAndExtra:
    worked: bool
    hours: float
    extra: Decimal


@dataclass(frozen=True)
class AdvanceOutcome:
    """Result of one advance request, shaped for the controller layer."""

    employee_id: int
    mark: Mark
    applied: bool
    pending_input: Optional[dict] = None


@dataclass(frozen=True)
class DayCell:
    """Read-model for one calendar day of an employee."""

    work_date: date
    state: MarkState
    title: str
    worked: bool
    hours: Optional[float]
    extra: Decimal
