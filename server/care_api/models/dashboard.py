"""Dashboard aggregate models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .appointment import AppointmentOut
from .medication import MedicationOut
from .sos import SosEventOut
from .vitals import HealthMetricOut


class ReminderResponse(BaseModel):
    """Reminders selected for a day."""

    model_config = ConfigDict(populate_by_name=True)

    appointment: Optional[AppointmentOut] = None
    low_stock: Optional[MedicationOut] = Field(default=None, alias="lowStock")
    messages: list[str]


class DashboardOverview(BaseModel):
    """Elder dashboard landing data."""

    model_config = ConfigDict(populate_by_name=True)

    next_appointment: Optional[AppointmentOut] = Field(
        default=None, alias="nextAppointment"
    )
    recent_readings: list[HealthMetricOut] = Field(alias="recentReadings")
    medications: list[MedicationOut]
    reminders: ReminderResponse


class BloodPressurePoint(BaseModel):
    """One point of the blood pressure chart."""

    model_config = ConfigDict(populate_by_name=True)

    recorded_at: datetime = Field(alias="recordedAt")
    systolic: int
    diastolic: int


class FamilyOverview(BaseModel):
    """Overview shared with family members."""

    model_config = ConfigDict(populate_by_name=True)

    bp_trend: list[BloodPressurePoint] = Field(alias="bpTrend")
    low_stock: list[MedicationOut] = Field(alias="lowStock")
    upcoming_appointments: list[AppointmentOut] = Field(
        alias="upcomingAppointments"
    )
    recent_sos: list[SosEventOut] = Field(alias="recentSos")
