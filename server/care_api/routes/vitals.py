"""Blood pressure and glucose reading routes."""
import sqlite3
from datetime import datetime

from fastapi import APIRouter, Depends, Query

from care_rules import HealthReading, ReadingKind, classify

from ..dependencies import get_current_user, get_db
from ..models.common import CreatedResponse
from ..models.vitals import HealthMetricCreate, HealthMetricOut
from ..security import UserSession

router = APIRouter(prefix="/api/health-metrics", tags=["Health Metrics"])


def row_to_reading(row) -> HealthReading:
    """Convert SQLite row to a HealthReading for classification."""
    kind = ReadingKind(row["type"])
    recorded_at = datetime.fromisoformat(row["recorded_at"])
    if kind == ReadingKind.BLOOD_PRESSURE:
        return HealthReading(
            kind=kind,
            systolic=int(row["systolic"]),
            diastolic=int(row["diastolic"]),
            recorded_at=recorded_at,
        )
    return HealthReading(kind=kind, glucose_value=float(row["value"]), recorded_at=recorded_at)


def row_to_metric(row) -> HealthMetricOut:
    """Convert SQLite row to HealthMetricOut with its status."""
    reading = row_to_reading(row)
    return HealthMetricOut(
        id=row["id"],
        type=reading.kind.value,
        systolic=reading.systolic,
        diastolic=reading.diastolic,
        value=reading.glucose_value,
        recorded_at=reading.recorded_at,
        status=classify(reading).value,
    )


def fetch_metric_rows(conn: sqlite3.Connection, user_id: int, limit: int = 50) -> list:
    """Most recent readings first."""
    return conn.execute(
        """
        SELECT * FROM health_metrics
        WHERE user_id = ?
        ORDER BY recorded_at DESC, id DESC
        LIMIT ?
        """,
        (user_id, limit),
    ).fetchall()


@router.get("", response_model=list[HealthMetricOut])
async def list_metrics(
    limit: int = Query(default=50, ge=1, le=200),
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """Get the most recent readings, each classified Normal, High or Low."""
    return [row_to_metric(row) for row in fetch_metric_rows(conn, user.id, limit)]


@router.post("", response_model=CreatedResponse)
async def add_metric(
    body: HealthMetricCreate,
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """Log a blood pressure or glucose reading."""
    recorded_at = (body.recorded_at or datetime.now()).replace(tzinfo=None)
    cursor = conn.execute(
        """
        INSERT INTO health_metrics (user_id, type, systolic, diastolic, value, recorded_at)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (user.id, body.type, body.systolic, body.diastolic, body.value,
         recorded_at.isoformat(timespec="seconds")),
    )
    return CreatedResponse(id=cursor.lastrowid)
