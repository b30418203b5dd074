"""Medication tracking routes."""
import logging
import sqlite3
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException

from care_rules import Medication, doses_per_day_for, estimate_refill_date, is_low_stock, taken_on

from ..dependencies import get_current_user, get_db
from ..models.common import CreatedResponse, SuccessResponse
from ..models.medication import MedicationCreate, MedicationOut, TakeDoseResponse
from ..security import UserSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/medications", tags=["Medications"])


def row_to_rule_medication(row) -> Medication:
    """Convert SQLite row to the stock snapshot used by the refill rules."""
    last_taken = row["last_taken_at"]
    return Medication(
        name=row["name"],
        doses_per_day=int(row["doses_per_day"] or 1),
        stock_units=int(row["stock"] or 0),
        refill_threshold=int(row["refill_threshold"] or 0),
        last_taken_at=datetime.fromisoformat(last_taken) if last_taken else None,
    )


def row_to_medication(row, today: date) -> MedicationOut:
    """Convert SQLite row to MedicationOut with refill fields derived for today."""
    med = row_to_rule_medication(row)
    return MedicationOut(
        id=row["id"],
        name=med.name,
        dosage=row["dosage"] or "",
        frequency=row["frequency"] or "Daily",
        doses_per_day=med.doses_per_day,
        time=row["time"] or "",
        stock=med.stock_units,
        refill_threshold=med.refill_threshold,
        last_taken_at=med.last_taken_at,
        refill_date=estimate_refill_date(med.stock_units, med.doses_per_day, today),
        low_stock=is_low_stock(med),
        taken_today=taken_on(med, today),
    )


def fetch_medication_rows(conn: sqlite3.Connection, user_id: int) -> list:
    return conn.execute(
        "SELECT * FROM medications WHERE user_id = ? ORDER BY id", (user_id,)
    ).fetchall()


@router.get("", response_model=list[MedicationOut])
async def list_medications(
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """List the caller's medications with predicted refill dates."""
    today = date.today()
    return [row_to_medication(row, today) for row in fetch_medication_rows(conn, user.id)]


@router.post("", response_model=CreatedResponse)
async def add_medication(
    body: MedicationCreate,
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """Start tracking a medication."""
    doses = body.doses_per_day or doses_per_day_for(body.frequency)
    cursor = conn.execute(
        """
        INSERT INTO medications
            (user_id, name, dosage, frequency, doses_per_day, time, stock, refill_threshold)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (user.id, body.name, body.dosage, body.frequency, doses, body.time,
         body.stock, body.refill_threshold),
    )
    logger.info(f"[MEDS] User {user.id} added medication {cursor.lastrowid}")
    return CreatedResponse(id=cursor.lastrowid)


@router.post("/{medication_id}/take", response_model=TakeDoseResponse)
async def take_dose(
    medication_id: int,
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """Record a dose: one unit leaves stock and the time is stamped."""
    cursor = conn.execute(
        """
        UPDATE medications SET stock = stock - 1, last_taken_at = ?
        WHERE id = ? AND user_id = ? AND stock > 0
        """,
        (datetime.now().isoformat(timespec="seconds"), medication_id, user.id),
    )
    row = conn.execute(
        "SELECT stock FROM medications WHERE id = ? AND user_id = ?",
        (medication_id, user.id),
    ).fetchone()

    if row is None:
        raise HTTPException(status_code=404, detail="Medication not found")
    if cursor.rowcount == 0:
        raise HTTPException(status_code=400, detail="Out of stock")

    new_stock = int(row["stock"])
    logger.info(f"[MEDS] Dose taken for medication {medication_id}, stock now {new_stock}")
    return TakeDoseResponse(new_stock=new_stock)


@router.delete("/{medication_id}", response_model=SuccessResponse)
async def delete_medication(
    medication_id: int,
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """Stop tracking a medication."""
    conn.execute(
        "DELETE FROM medications WHERE id = ? AND user_id = ?", (medication_id, user.id)
    )
    return SuccessResponse()
