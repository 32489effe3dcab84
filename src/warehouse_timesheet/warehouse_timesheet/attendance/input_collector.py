from __future__ import annotations

from decimal import Decimal
from typing import Mapping, Optional, Protocol

from ..common.formatting import format_number
from ..common.validators import parse_amount, parse_flag, parse_hours
from ..core.enums import InputKind
from .model import WorkedAndExtra, WorkedHoursAndExtra


class ExtendedInputCollector(Protocol):
    """External collaborator asked for values the state machine cannot derive.

    Each call blocks until the user confirms (value) or abandons (None).
    Returned values are already validated.
    """

    def collect_worked_and_extra(self, initial_worked: bool, initial_extra: Decimal) -> Optional[WorkedAndExtra]:
        raise NotImplementedError

    def collect_worked_hours_and_extra(
        self,
        initial_worked: bool,
        initial_hours: float,
        initial_extra: Decimal,
    ) -> Optional[WorkedHoursAndExtra]:
        raise NotImplementedError


class FormInputCollector:
    """Collaborator backed by one HTTP request payload.

    Missing fields or a `cancel` flag count as an abandoned request. The last
    request made is kept in `pending` so the caller can describe it to the
    client, which then resubmits with the fields filled in.
    """

    def __init__(self, data: Mapping):
        self._data = data
        self.pending: Optional[dict] = None

    def _cancelled(self) -> bool:
        return parse_flag(self._data.get("cancel"))

    def _has(self, *names: str) -> bool:
        return all(self._data.get(n) not in (None, "") for n in names)

    def collect_worked_and_extra(self, initial_worked: bool, initial_extra: Decimal) -> Optional[WorkedAndExtra]:
        self.pending = {
            "kind": InputKind.WORKED_AND_EXTRA.value,
            "initial": {"worked": initial_worked, "extra": format_number(initial_extra)},
        }
        if self._cancelled() or not self._has("extra"):
            return None
        extra = parse_amount(self._data.get("extra"), "Extra amount")
        return WorkedAndExtra(worked=parse_flag(self._data.get("worked")), extra=extra)

    def collect_worked_hours_and_extra(
        self,
        initial_worked: bool,
        initial_hours: float,
        initial_extra: Decimal,
    ) -> Optional[WorkedHoursAndExtra]:
        self.pending = {
            "kind": InputKind.WORKED_HOURS_AND_EXTRA.value,
            "initial": {
                "worked": initial_worked,
                "hours": format_number(initial_hours),
                "extra": format_number(initial_extra),
            },
        }
        if self._cancelled() or not self._has("hours", "extra"):
            return None
        hours = parse_hours(self._data.get("hours"), "Hours")
        extra = parse_amount(self._data.get("extra"), "Extra amount")
        return WorkedHoursAndExtra(worked=parse_flag(self._data.get("worked")), hours=hours, extra=extra)
