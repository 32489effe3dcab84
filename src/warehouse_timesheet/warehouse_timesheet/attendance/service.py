from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from ..common.datetime_utils import month_bounds
from ..common.shift_hours import ShiftHoursSetting
from ..core.enums import MarkState
from ..core.exceptions import MissingSelectionError
from ..employees.repository import TimesheetRepository
from ..employees.roster import Roster
from .input_collector import ExtendedInputCollector
from .model import AdvanceOutcome, DayCell, Mark
from .state_machine import AttendanceStateMachine

logger = logging.getLogger(__name__)


def mark_title(mark: Mark) -> str:
    if mark.state is MarkState.WORKED:
        return "Worked"
    if mark.state is MarkState.ABSENT:
        return "Absent"
    if mark.state is MarkState.CUSTOM_WORKED_OR_ABSENT:
        return "Custom: worked" if mark.worked else "Custom: absent"
    if mark.state is MarkState.CUSTOM_HOURS:
        return "Hourly day" if mark.worked else "Hourly (day off)"
    return "Empty"


class AttendanceService:
    """Use case: advance a day mark of the selected employee.

    The roster is authoritative: a failed storage write is surfaced to the
    caller but the in-memory mark is not reverted.
    """

    def __init__(
        self,
        roster: Roster,
        repository: TimesheetRepository,
        *,
        state_machine: Optional[AttendanceStateMachine] = None,
        shift_hours: Optional[ShiftHoursSetting] = None,
    ):
        self._roster = roster
        self._repository = repository
        self._machine = state_machine or AttendanceStateMachine()
        self._shift_hours = shift_hours or ShiftHoursSetting()

    def get_mark(self, employee_id: int, work_date: date) -> Mark:
        return self._roster.get_mark(employee_id, work_date)

    def advance_mark(
        self,
        employee_id: Optional[int],
        work_date: date,
        collector: ExtendedInputCollector,
    ) -> AdvanceOutcome:
        if employee_id is None:
            raise MissingSelectionError("Select an employee first")

        current = self._roster.get_mark(employee_id, work_date)
        new_mark = self._machine.advance(current, collector, default_hours=self._shift_hours.value)
        if new_mark is None:
            return AdvanceOutcome(
                employee_id=int(employee_id),
                mark=current,
                applied=False,
                pending_input=getattr(collector, "pending", None),
            )

        self._roster.put_mark(employee_id, new_mark)
        if new_mark.is_empty:
            self._repository.delete_mark(int(employee_id), work_date)
        else:
            self._repository.save_mark(int(employee_id), new_mark)

        logger.debug("Mark %s of employee %s: %s -> %s", work_date, employee_id, current.state.value, new_mark.state.value)
        return AdvanceOutcome(employee_id=int(employee_id), mark=new_mark, applied=True)

    def month_view(self, employee_id: int, year: int, month: int) -> List[DayCell]:
        first, last = month_bounds(year, month)
        cells: List[DayCell] = []
        for day in range(first.day, last.day + 1):
            mark = self._roster.get_mark(employee_id, date(year, month, day))
            cells.append(
                DayCell(
                    work_date=mark.work_date,
                    state=mark.state,
                    title=mark_title(mark),
                    worked=mark.worked,
                    hours=mark.hours,
                    extra=mark.extra,
                )
            )
        return cells
