"""Emergency SOS and nearby hospital routes.

The client records the audio clip (or sends none) and posts it along
with the location; the server stores whatever it receives.
"""
import logging
import sqlite3
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from ..config import Settings
from ..dependencies import get_app_settings, get_current_user, get_db
from ..models.sos import HospitalSearch, SosCreated, SosEventOut
from ..security import UserSession
from ..services.uploads import save_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Safety"])

MAPS_LOCATION_URL = "https://www.google.com/maps?q={lat},{lng}"
MAPS_HOSPITALS_URL = "https://www.google.com/maps/search/hospitals/@{lat},{lng},15z"


def location_url(latitude: float, longitude: float) -> str:
    return MAPS_LOCATION_URL.format(lat=latitude, lng=longitude)


def hospital_search_url(latitude: float, longitude: float) -> str:
    return MAPS_HOSPITALS_URL.format(lat=latitude, lng=longitude)


def row_to_sos(row) -> SosEventOut:
    """Convert SQLite row to SosEventOut."""
    latitude = float(row["latitude"])
    longitude = float(row["longitude"])
    return SosEventOut(
        id=row["id"],
        latitude=latitude,
        longitude=longitude,
        audio_attached=bool(row["audio_path"]),
        created_at=datetime.fromisoformat(row["created_at"]),
        maps_url=location_url(latitude, longitude),
    )


def fetch_sos_events(conn: sqlite3.Connection, user_id: int, limit: int = 20) -> list[SosEventOut]:
    rows = conn.execute(
        "SELECT * FROM sos_logs WHERE user_id = ? ORDER BY created_at DESC, id DESC LIMIT ?",
        (user_id, limit),
    ).fetchall()
    return [row_to_sos(row) for row in rows]


@router.post("/sos", response_model=SosCreated)
async def trigger_sos(
    latitude: float = Form(..., ge=-90, le=90),
    longitude: float = Form(..., ge=-180, le=180),
    audio: Optional[UploadFile] = File(default=None),
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Store an emergency signal with location and an optional audio clip."""
    audio_path = None
    if audio is not None and audio.filename:
        audio_path = await save_upload(
            audio, settings.upload_dir, settings.max_upload_mb * 1024 * 1024
        )

    cursor = conn.execute(
        """
        INSERT INTO sos_logs (user_id, latitude, longitude, audio_path, created_at)
        VALUES (?, ?, ?, ?, ?)
        """,
        (user.id, latitude, longitude, audio_path, datetime.now().isoformat(timespec="seconds")),
    )
    logger.warning(
        f"[SOS] User {user.id} triggered SOS at ({latitude}, {longitude}), "
        f"audio={'yes' if audio_path else 'no'}"
    )
    return SosCreated(
        id=cursor.lastrowid,
        maps_url=location_url(latitude, longitude),
        audio_attached=audio_path is not None,
    )


@router.get("/sos", response_model=list[SosEventOut])
async def list_sos_events(
    limit: int = Query(default=20, ge=1, le=100),
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """Recent SOS events, newest first."""
    return fetch_sos_events(conn, user.id, limit)


@router.get(
    "/hospitals/nearby",
    response_model=HospitalSearch,
    dependencies=[Depends(get_current_user)],
)
async def nearby_hospitals(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
):
    """Map search link for hospitals around the given point."""
    return HospitalSearch(
        latitude=latitude,
        longitude=longitude,
        maps_url=hospital_search_url(latitude, longitude),
    )
