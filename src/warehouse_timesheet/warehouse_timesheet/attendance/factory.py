from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from ..core.enums import MarkState
from .transitions.base import MarkTransition
from .transitions.custom_day_transition import CustomDayTransition
from .transitions.custom_hours_transition import CustomHoursTransition
from .transitions.fixed_transitions import AbsentTransition, ClearTransition, FullShiftTransition

CYCLE: Tuple[MarkState, ...] = tuple(MarkState)


@dataclass
class MarkTransitionFactory:
    """Factory Pattern: choose the transition that enters the next state."""

    _transitions: Dict[MarkState, MarkTransition] = field(
        default_factory=lambda: {
            t.target: t
            for t in (
                ClearTransition(),
                FullShiftTransition(),
                AbsentTransition(),
                CustomDayTransition(),
                CustomHoursTransition(),
            )
        }
    )

    @staticmethod
    def next_state(state: MarkState) -> MarkState:
        return CYCLE[(CYCLE.index(state) + 1) % len(CYCLE)]

    def for_advance(self, current: MarkState) -> MarkTransition:
        return self._transitions[self.next_state(current)]
