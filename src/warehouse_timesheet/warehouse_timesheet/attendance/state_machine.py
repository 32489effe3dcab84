from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_SHIFT_HOURS
from ..core.enums import MarkState
from .factory import MarkTransitionFactory
from .input_collector import ExtendedInputCollector
from .model import Mark


class AttendanceStateMachine:
    """Cycles a day mark through its states.

    EMPTY -> WORKED -> ABSENT -> CUSTOM_WORKED_OR_ABSENT -> CUSTOM_HOURS -> EMPTY.
    The two custom states block on the collector for extended input. Values
    from the collector are trusted as-is; it validates before returning them.
    """

    def __init__(self, factory: Optional[MarkTransitionFactory] = None):
        self._factory = factory or MarkTransitionFactory()

    def next_state(self, state: MarkState) -> MarkState:
        return self._factory.next_state(state)

    def advance(
        self,
        mark: Mark,
        collector: ExtendedInputCollector,
        *,
        default_hours: float = DEFAULT_SHIFT_HOURS,
    ) -> Optional[Mark]:
        """Return the mark for the next state, or None if the input was abandoned."""
        transition = self._factory.for_advance(mark.state)
        return transition.enter(mark, collector, default_hours=default_hours)
