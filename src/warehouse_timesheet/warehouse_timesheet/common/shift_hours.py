from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_SHIFT_HOURS
from ..core.exceptions import ValidationError
from .validators import parse_hours


@dataclass
class ShiftHoursSetting:
    """Global default shift length, used for worked days without own hours."""

    value: float = DEFAULT_SHIFT_HOURS

    def update(self, raw) -> float:
        hours = parse_hours(raw, "Shift hours")
        if hours <= 0:
            raise ValidationError("Shift hours must be greater than zero")
        self.value = hours
        return hours
