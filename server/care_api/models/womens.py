"""Women's care models."""
from datetime import date

from pydantic import BaseModel, Field


class CycleRequest(BaseModel):
    """Details of the last period."""

    last_period_start: date
    cycle_length: int = Field(default=28, ge=1, le=90)
    period_length: int = Field(default=5, ge=1, le=15)


class CycleResponse(BaseModel):
    """Predicted next period."""

    next_period_start: date
    expected_end: date


class PcosAnswers(BaseModel):
    """Questionnaire answers, one per symptom."""

    irregular_cycles: bool = False
    weight_gain: bool = False
    excess_hair: bool = False
    acne: bool = False
    hair_thinning: bool = False
    mood_swings: bool = False


class PcosResponse(BaseModel):
    """Risk band with the symptom count behind it."""

    risk: str
    symptom_count: int
