"""Pydantic models for the care API requests and responses."""
from .common import SuccessResponse, CreatedResponse
from .auth import RegisterRequest, LoginRequest, UserOut, TokenResponse
from .medication import MedicationCreate, MedicationOut, TakeDoseResponse
from .vitals import HealthMetricCreate, HealthMetricOut
from .appointment import AppointmentCreate, AppointmentOut
from .report import ReportOut
from .sos import SosCreated, SosEventOut, HospitalSearch
from .womens import CycleRequest, CycleResponse, PcosAnswers, PcosResponse
from .ai import SkinAnswers, SkinAnalysisResponse, SpeakRequest, SpeechResponse, SpokenReminders
from .dashboard import ReminderResponse, DashboardOverview, BloodPressurePoint, FamilyOverview

__all__ = [
    "SuccessResponse",
    "CreatedResponse",
    "RegisterRequest",
    "LoginRequest",
    "UserOut",
    "TokenResponse",
    "MedicationCreate",
    "MedicationOut",
    "TakeDoseResponse",
    "HealthMetricCreate",
    "HealthMetricOut",
    "AppointmentCreate",
    "AppointmentOut",
    "ReportOut",
    "SosCreated",
    "SosEventOut",
    "HospitalSearch",
    "CycleRequest",
    "CycleResponse",
    "PcosAnswers",
    "PcosResponse",
    "SkinAnswers",
    "SkinAnalysisResponse",
    "SpeakRequest",
    "SpeechResponse",
    "SpokenReminders",
    "ReminderResponse",
    "DashboardOverview",
    "BloodPressurePoint",
    "FamilyOverview",
]
