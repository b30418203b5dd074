"""
Vital Sign Threshold Module.

Classifies blood pressure and glucose readings against fixed clinical
cutoffs. Readings are assumed to be well-formed; validation happens
at the API boundary.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional


class ReadingKind(str, Enum):
    """Kind of health reading."""

    BLOOD_PRESSURE = "bp"
    GLUCOSE = "sugar"


class ReadingStatus(str, Enum):
    """Classification of a single reading."""

    NORMAL = "Normal"
    HIGH = "High"
    LOW = "Low"


# Blood pressure cutoffs (mmHg)
SYSTOLIC_HIGH = 140
DIASTOLIC_HIGH = 90
SYSTOLIC_LOW = 90
DIASTOLIC_LOW = 60

# Glucose cutoffs (mg/dL)
GLUCOSE_HIGH = 180
GLUCOSE_LOW = 70


@dataclass(frozen=True)
class HealthReading:
    """A single timestamped blood pressure or glucose measurement."""

    kind: ReadingKind
    systolic: Optional[int] = None
    diastolic: Optional[int] = None
    glucose_value: Optional[float] = None
    recorded_at: Optional[datetime] = None


def classify(reading: HealthReading) -> ReadingStatus:
    """
    Classify a reading as Normal, High or Low.

    Blood pressure is High when either number is above its cutoff and Low
    when either is below; High wins if both apply.

    Args:
        reading: A reading whose fields match its kind

    Returns:
        The reading status
    """
    if reading.kind == ReadingKind.BLOOD_PRESSURE:
        if reading.systolic > SYSTOLIC_HIGH or reading.diastolic > DIASTOLIC_HIGH:
            return ReadingStatus.HIGH
        if reading.systolic < SYSTOLIC_LOW or reading.diastolic < DIASTOLIC_LOW:
            return ReadingStatus.LOW
        return ReadingStatus.NORMAL

    if reading.glucose_value > GLUCOSE_HIGH:
        return ReadingStatus.HIGH
    if reading.glucose_value < GLUCOSE_LOW:
        return ReadingStatus.LOW
    return ReadingStatus.NORMAL


def blood_pressure_trend(readings: Iterable[HealthReading]) -> List[HealthReading]:
    """Return blood pressure readings oldest first, given readings newest first."""
    bp_readings = [r for r in readings if r.kind == ReadingKind.BLOOD_PRESSURE]
    bp_readings.reverse()
    return bp_readings
