"""Medication data models."""
from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Frequency = Literal["Daily", "Twice Daily", "Thrice Daily"]


class MedicationCreate(BaseModel):
    """Medication to start tracking."""

    name: str = Field(min_length=1, max_length=100)
    dosage: str = ""
    frequency: Frequency = "Daily"
    doses_per_day: Optional[int] = Field(
        default=None, ge=1, le=24, description="Overrides the count implied by frequency"
    )
    time: str = Field(default="08:00", pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    stock: int = Field(default=30, ge=0)
    refill_threshold: int = Field(default=5, ge=0)


class MedicationOut(BaseModel):
    """Tracked medication with derived refill information."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    dosage: str
    frequency: str
    doses_per_day: int
    time: str
    stock: int
    refill_threshold: int
    last_taken_at: Optional[datetime] = None
    refill_date: date
    low_stock: bool
    taken_today: bool


class TakeDoseResponse(BaseModel):
    """Result of recording a dose."""

    success: bool = True
    new_stock: int
