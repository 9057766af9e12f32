"""
Rounding helpers.

Python's round() uses banker's rounding on binary floats, which drifts
from how a spreadsheet or a calculator rounds cents. Everything the
engine reports goes through round_half_up instead.
"""

from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, places: int = 2) -> float:
    """Round to `places` decimals, halves away from zero (839.065 -> 839.07)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
