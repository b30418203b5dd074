"""
Care Rules Module.

Pure evaluation rules for readings, medication stock and reminders.
Nothing here performs I/O or keeps state.
"""

from .vitals import (
    HealthReading,
    ReadingKind,
    ReadingStatus,
    blood_pressure_trend,
    classify,
)
from .refill import (
    Medication,
    doses_per_day_for,
    estimate_refill_date,
    is_low_stock,
    taken_on,
)
from .reminders import (
    Appointment,
    ReminderSelection,
    next_appointment,
    reminder_messages,
    select_reminders,
)
from .womens_health import (
    CyclePrediction,
    PcosRisk,
    assess_pcos_risk,
    predict_next_period,
)

__all__ = [
    "HealthReading",
    "ReadingKind",
    "ReadingStatus",
    "blood_pressure_trend",
    "classify",
    "Medication",
    "doses_per_day_for",
    "estimate_refill_date",
    "is_low_stock",
    "taken_on",
    "Appointment",
    "ReminderSelection",
    "next_appointment",
    "reminder_messages",
    "select_reminders",
    "CyclePrediction",
    "PcosRisk",
    "assess_pcos_risk",
    "predict_next_period",
]
