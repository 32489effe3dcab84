from __future__ import annotations

from enum import Enum


class MarkState(str, Enum):
    """Attendance state of one day cell, declared in cycle order."""

    EMPTY = "EMPTY"
    WORKED = "WORKED"
    ABSENT = "ABSENT"
    CUSTOM_WORKED_OR_ABSENT = "CUSTOM_WORKED_OR_ABSENT"
    CUSTOM_HOURS = "CUSTOM_HOURS"


class InputKind(str, Enum):
    """Which extended input a transition asked the collaborator for."""

    WORKED_AND_EXTRA = "worked_and_extra"
    WORKED_HOURS_AND_EXTRA = "worked_hours_and_extra"
