"""Appointment data models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class AppointmentCreate(BaseModel):
    """Appointment to schedule."""

    title: str = Field(min_length=1, max_length=200)
    doctor: Optional[str] = None
    date: datetime


class AppointmentOut(BaseModel):
    """Scheduled appointment."""

    id: int
    title: str
    doctor: Optional[str] = None
    date: datetime
    attended: bool
