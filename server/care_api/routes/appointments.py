"""Appointment scheduling routes."""
import sqlite3
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException

from care_rules import Appointment

from ..dependencies import get_current_user, get_db
from ..models.appointment import AppointmentCreate, AppointmentOut
from ..models.common import CreatedResponse, SuccessResponse
from ..security import UserSession

router = APIRouter(prefix="/api/appointments", tags=["Appointments"])


def row_to_appointment(row) -> AppointmentOut:
    """Convert SQLite row to AppointmentOut."""
    return AppointmentOut(
        id=row["id"],
        title=row["title"],
        doctor=row["doctor"],
        date=datetime.fromisoformat(row["date"]),
        attended=bool(row["attended"]),
    )


def to_rule_appointment(appointment: AppointmentOut) -> Appointment:
    return Appointment(
        title=appointment.title,
        scheduled_at=appointment.date,
        attended=appointment.attended,
        doctor=appointment.doctor,
    )


def fetch_appointments(conn: sqlite3.Connection, user_id: int) -> list[AppointmentOut]:
    """Appointments in date order; equal dates keep insertion order."""
    rows = conn.execute(
        "SELECT * FROM appointments WHERE user_id = ? ORDER BY date ASC, id ASC",
        (user_id,),
    ).fetchall()
    return [row_to_appointment(row) for row in rows]


@router.get("", response_model=list[AppointmentOut])
async def list_appointments(
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """List appointments, soonest first."""
    return fetch_appointments(conn, user.id)


@router.post("", response_model=CreatedResponse)
async def add_appointment(
    body: AppointmentCreate,
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """Schedule an appointment."""
    cursor = conn.execute(
        "INSERT INTO appointments (user_id, title, doctor, date) VALUES (?, ?, ?, ?)",
        (user.id, body.title, body.doctor, body.date.replace(tzinfo=None).isoformat(timespec="minutes")),
    )
    return CreatedResponse(id=cursor.lastrowid)


@router.post("/{appointment_id}/attend", response_model=SuccessResponse)
async def mark_attended(
    appointment_id: int,
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """Mark an appointment as attended."""
    cursor = conn.execute(
        "UPDATE appointments SET attended = 1 WHERE id = ? AND user_id = ?",
        (appointment_id, user.id),
    )
    if cursor.rowcount == 0:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return SuccessResponse()


@router.delete("/{appointment_id}", response_model=SuccessResponse)
async def delete_appointment(
    appointment_id: int,
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """Remove an appointment."""
    conn.execute(
        "DELETE FROM appointments WHERE id = ? AND user_id = ?", (appointment_id, user.id)
    )
    return SuccessResponse()
