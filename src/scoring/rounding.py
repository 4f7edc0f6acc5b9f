"""Rounding helpers shared by all scorers."""

from decimal import ROUND_HALF_UP, Decimal

MIN_SCORE = 0.0
MAX_SCORE = 5.0

_ONE_DECIMAL = Decimal("0.1")


def round_score(value: float) -> float:
    """Round to one decimal place, ties away from zero.

    The float's shortest repr is rounded rather than its binary value, so
    ``2.25`` becomes ``2.3`` the way a reader would expect.
    """
    return float(Decimal(repr(value)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def clamp_score(value: float) -> float:
    """Clamp an intermediate result to the 0-5 score range."""
    return max(MIN_SCORE, min(MAX_SCORE, value))
