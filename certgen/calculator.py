"""
Final score calculation.

Formula: final = practical * 0.6 + theoretical * 0.4, rounded to two
decimal places with round-half-away-from-zero.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, localcontext

from .exceptions import InvalidArgumentError
from .models import EmployeeRecord
from .rules import PRACTICAL_WEIGHT, SCORE_DECIMAL_PLACES, THEORETICAL_WEIGHT


def round_half_away(value: float, places: int) -> float:
    """Round to ``places`` decimals, midpoints away from zero."""
    quantum = Decimal(10) ** -places
    # Wide enough for any finite float
    with localcontext() as ctx:
        ctx.prec = 400
        return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def compute_final_score(theoretical: float, practical: float) -> float:
    raw = practical * PRACTICAL_WEIGHT + theoretical * THEORETICAL_WEIGHT
    return round_half_away(raw, SCORE_DECIMAL_PLACES)


def calculate(record: EmployeeRecord) -> EmployeeRecord:
    """
    Return a copy of ``record`` with ``final_score`` set.

    Raises:
        InvalidArgumentError: if ``record`` is None
    """
    if record is None:
        raise InvalidArgumentError("record", "Employee cannot be None")

    score = compute_final_score(record.theoretical_score, record.practical_score)
    return record.model_copy(update={"final_score": score})
