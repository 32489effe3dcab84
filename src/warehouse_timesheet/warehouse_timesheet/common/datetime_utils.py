from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}") from None


def parse_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM string into (year, month)."""
    try:
        parsed = datetime.strptime((value or "").strip(), "%Y-%m")
    except ValueError:
        raise ValidationError(f"Invalid month: {value!r}") from None
    return parsed.year, parsed.month


def month_bounds(year: int, month: int) -> tuple[date, date]:
    days = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, days)


def add_months(value: date, months: int) -> date:
    """Shift by whole calendar months, clamping the day to the target month."""
    index = value.year * 12 + value.month - 1 + months
    year, month = divmod(index, 12)
    day = min(value.day, calendar.monthrange(year, month + 1)[1])
    return date(year, month + 1, day)


def format_dmy(value: date) -> str:
    return value.strftime("%d.%m.%Y")


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
