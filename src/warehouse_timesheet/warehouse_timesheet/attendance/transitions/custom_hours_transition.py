from __future__ import annotations

from typing import Optional

from ...core.enums import MarkState
from ..input_collector import ExtendedInputCollector
from ..model import Mark
from .base import MarkTransition


class CustomHoursTransition(MarkTransition):
    """Explicit hour count for the day, asked from the collaborator."""

    target = MarkState.CUSTOM_HOURS

    def enter(self, current: Mark, collector: ExtendedInputCollector, *, default_hours: float) -> Optional[Mark]:
        initial_hours = current.hours if current.hours is not None else default_hours
        value = collector.collect_worked_hours_and_extra(
            initial_worked=True,
            initial_hours=initial_hours,
            initial_extra=current.extra,
        )
        if value is None:
            return None
        return Mark.custom_hours(current.work_date, worked=value.worked, hours=value.hours, extra=value.extra)
