"""Rounding rules for calorie values."""

from decimal import ROUND_HALF_UP, Decimal


def round_kcal(value: float) -> int:
    """Round to the nearest whole kcal, halves away from zero."""
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def round_tenth(value: float) -> float:
    """Round to one decimal place for display."""
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
