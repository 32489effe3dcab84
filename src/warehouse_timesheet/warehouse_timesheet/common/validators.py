from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..core.constants import AMOUNT_LIMIT, AMOUNT_PLACES
from ..core.exceptions import ValidationError

_AMOUNT_STEP = Decimal(1).scaleb(-AMOUNT_PLACES)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def parse_amount(value, field_name: str = "Amount") -> Decimal:
    """Parse a fixed-point amount of any sign, '.' as decimal separator.

    Amounts are limited to what storage keeps exactly: at most
    AMOUNT_PLACES decimal places and an absolute value below AMOUNT_LIMIT.
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        text = str(value if value is not None else "").strip()
        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise ValidationError(f"{field_name} is not a valid number") from None
    if not amount.is_finite():
        raise ValidationError(f"{field_name} is not a valid number")
    if abs(amount) >= AMOUNT_LIMIT:
        raise ValidationError(f"{field_name} is too large")
    if amount != amount.quantize(_AMOUNT_STEP):
        raise ValidationError(f"{field_name} allows at most {AMOUNT_PLACES} decimal places")
    return amount


def parse_rate(value, field_name: str) -> Decimal:
    rate = parse_amount(value, field_name)
    if rate < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return rate


def parse_hours(value, field_name: str = "Hours") -> float:
    text = str(value if value is not None else "").strip()
    try:
        hours = float(text)
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid number") from None
    if hours != hours or hours in (float("inf"), float("-inf")) or hours < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return hours


def parse_flag(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in {"1", "true", "yes", "on"}
