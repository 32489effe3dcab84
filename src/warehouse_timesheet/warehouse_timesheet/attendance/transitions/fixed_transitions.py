from __future__ import annotations

from typing import Optional

from ...core.enums import MarkState
from ..input_collector import ExtendedInputCollector
from ..model import Mark
from .base import MarkTransition


class ClearTransition(MarkTransition):
    """Back to no record; the caller removes the mark from storage."""

    target = MarkState.EMPTY

    def enter(self, current: Mark, collector: ExtendedInputCollector, *, default_hours: float) -> Optional[Mark]:
        return Mark.empty(current.work_date)


class FullShiftTransition(MarkTransition):
    """Full default shift."""

    target = MarkState.WORKED

    def enter(self, current: Mark, collector: ExtendedInputCollector, *, default_hours: float) -> Optional[Mark]:
        return Mark.full_shift(current.work_date)


class AbsentTransition(MarkTransition):
    target = MarkState.ABSENT

    def enter(self, current: Mark, collector: ExtendedInputCollector, *, default_hours: float) -> Optional[Mark]:
        return Mark.absent(current.work_date)
