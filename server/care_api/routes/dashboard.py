"""Dashboard routes: daily reminders, elder overview and family overview."""
import sqlite3
from datetime import date
from typing import Optional, Sequence

from fastapi import APIRouter, Depends, Query

from care_rules import blood_pressure_trend, next_appointment, reminder_messages, select_reminders

from ..dependencies import get_current_user, get_db
from ..models.dashboard import (
    BloodPressurePoint,
    DashboardOverview,
    FamilyOverview,
    ReminderResponse,
)
from ..security import UserSession
from .appointments import fetch_appointments, to_rule_appointment
from .medications import fetch_medication_rows, row_to_medication, row_to_rule_medication
from .sos import fetch_sos_events
from .vitals import fetch_metric_rows, row_to_metric, row_to_reading

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


def _counterpart(rule_items: Sequence, api_items: Sequence, chosen):
    """Return the API model built from the same row as the chosen rule object."""
    if chosen is None:
        return None
    for rule_item, api_item in zip(rule_items, api_items):
        if rule_item is chosen:
            return api_item
    return None


def build_reminders(conn: sqlite3.Connection, user_id: int, today: date) -> ReminderResponse:
    """Run the reminder selection over the caller's current data."""
    med_rows = fetch_medication_rows(conn, user_id)
    rule_meds = [row_to_rule_medication(row) for row in med_rows]
    api_meds = [row_to_medication(row, today) for row in med_rows]

    api_appointments = fetch_appointments(conn, user_id)
    rule_appointments = [to_rule_appointment(a) for a in api_appointments]

    selection = select_reminders(rule_meds, rule_appointments, today)

    return ReminderResponse(
        appointment=_counterpart(rule_appointments, api_appointments, selection.appointment_reminder),
        low_stock=_counterpart(rule_meds, api_meds, selection.low_stock_reminder),
        messages=reminder_messages(selection),
    )


@router.get("/reminders", response_model=ReminderResponse, response_model_by_alias=True)
async def get_reminders(
    today: Optional[date] = Query(default=None, description="Caller's local date"),
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """
    Get today's reminders: at most one appointment due today and one
    medication at or below its refill threshold.
    """
    return build_reminders(conn, user.id, today or date.today())


@router.get("/overview", response_model=DashboardOverview, response_model_by_alias=True)
async def get_overview(
    today: Optional[date] = Query(default=None, description="Caller's local date"),
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """
    Get the elder dashboard: next due appointment, five latest readings,
    medications with today's dose state, and reminders.
    """
    today = today or date.today()

    api_appointments = fetch_appointments(conn, user.id)
    rule_appointments = [to_rule_appointment(a) for a in api_appointments]
    upcoming = next_appointment(rule_appointments, today)

    return DashboardOverview(
        next_appointment=_counterpart(rule_appointments, api_appointments, upcoming),
        recent_readings=[row_to_metric(row) for row in fetch_metric_rows(conn, user.id, 5)],
        medications=[row_to_medication(row, today) for row in fetch_medication_rows(conn, user.id)],
        reminders=build_reminders(conn, user.id, today),
    )


@router.get("/family", response_model=FamilyOverview, response_model_by_alias=True)
async def get_family_overview(
    today: Optional[date] = Query(default=None, description="Caller's local date"),
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """
    Get the overview shared with family: blood pressure trend (oldest
    first), low-stock medications, upcoming appointments and recent SOS events.
    """
    today = today or date.today()

    readings = [row_to_reading(row) for row in fetch_metric_rows(conn, user.id)]
    bp_trend = [
        BloodPressurePoint(recorded_at=r.recorded_at, systolic=r.systolic, diastolic=r.diastolic)
        for r in blood_pressure_trend(readings)
    ]

    medications = [row_to_medication(row, today) for row in fetch_medication_rows(conn, user.id)]
    upcoming = [
        a for a in fetch_appointments(conn, user.id)
        if not a.attended and a.date.date() >= today
    ]

    return FamilyOverview(
        bp_trend=bp_trend,
        low_stock=[m for m in medications if m.low_stock],
        upcoming_appointments=upcoming,
        recent_sos=fetch_sos_events(conn, user.id, 5),
    )
