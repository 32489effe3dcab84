from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")


def hours_to_decimal(hours: float) -> Decimal:
    """Fixed-point view of an hour count (shortest decimal text of the float)."""
    return Decimal(repr(float(hours)))


def format_number(value) -> str:
    """Format with at most two decimal places, trailing zeros dropped."""
    if not isinstance(value, Decimal):
        value = hours_to_decimal(value)
    text = f"{value.quantize(_CENTS, rounding=ROUND_HALF_UP):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in {"-0", ""}:
        text = "0"
    return text
