"""
Women's Health Module.

Cycle date prediction and a symptom-count PCOS risk screen.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Mapping

PCOS_SYMPTOMS = (
    "irregular_cycles",
    "weight_gain",
    "excess_hair",
    "acne",
    "hair_thinning",
    "mood_swings",
)


class PcosRisk(str, Enum):
    """Risk band from the PCOS questionnaire."""

    LOW = "Low Risk"
    MEDIUM = "Medium Risk"
    HIGH = "High Risk"


@dataclass(frozen=True)
class CyclePrediction:
    """Predicted start and expected end of the next period."""

    next_start: date
    expected_end: date


def predict_next_period(
    last_start: date,
    cycle_length: int = 28,
    period_length: int = 5,
) -> CyclePrediction:
    """
    Predict the next period from the start of the last one.

    Args:
        last_start: First day of the last period
        cycle_length: Days between period starts
        period_length: Days a period lasts

    Returns:
        CyclePrediction with the next start and its last expected day
    """
    next_start = last_start + timedelta(days=cycle_length)
    expected_end = next_start + timedelta(days=period_length - 1)
    return CyclePrediction(next_start=next_start, expected_end=expected_end)


def assess_pcos_risk(answers: Mapping[str, bool]) -> PcosRisk:
    """Band the number of reported symptoms: 0-1 low, 2-3 medium, 4+ high."""
    count = sum(1 for symptom in PCOS_SYMPTOMS if answers.get(symptom))
    if count <= 1:
        return PcosRisk.LOW
    if count <= 3:
        return PcosRisk.MEDIUM
    return PcosRisk.HIGH
