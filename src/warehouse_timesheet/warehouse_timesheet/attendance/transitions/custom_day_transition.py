from __future__ import annotations

from typing import Optional

from ...core.enums import MarkState
from ..input_collector import ExtendedInputCollector
from ..model import Mark
from .base import MarkTransition


class CustomDayTransition(MarkTransition):
    """Worked or absent with a manual bonus/deduction, asked from the collaborator."""

    target = MarkState.CUSTOM_WORKED_OR_ABSENT

    def enter(self, current: Mark, collector: ExtendedInputCollector, *, default_hours: float) -> Optional[Mark]:
        value = collector.collect_worked_and_extra(initial_worked=True, initial_extra=current.extra)
        if value is None:
            return None
        return Mark.custom(current.work_date, worked=value.worked, extra=value.extra)
