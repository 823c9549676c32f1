from __future__ import annotations

from .models import CertificationOutcome
from .rules import EXCELLENCE_SCORE, PASSING_SCORE


def resolve(final_score: float) -> CertificationOutcome:
    """
    Classify a final score.

    - Failed: score < 70
    - Passed: 70 <= score < 90
    - PassedExcellent: score >= 90
    """
    if final_score < PASSING_SCORE:
        return CertificationOutcome.FAILED

    if final_score >= EXCELLENCE_SCORE:
        return CertificationOutcome.PASSED_EXCELLENT

    return CertificationOutcome.PASSED


def is_eligible(final_score: float) -> bool:
    """Eligible employees get a certification letter."""
    return final_score >= PASSING_SCORE
