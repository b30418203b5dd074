"""Medical report upload and retrieval routes."""
import logging
import os
import sqlite3
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse

from ..config import Settings
from ..dependencies import get_app_settings, get_current_user, get_db
from ..models.common import CreatedResponse, SuccessResponse
from ..models.report import ReportOut, ReportType
from ..security import UserSession
from ..services.uploads import remove_file, save_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reports", tags=["Reports"])


def row_to_report(row) -> ReportOut:
    """Convert SQLite row to ReportOut."""
    return ReportOut(
        id=row["id"],
        name=row["name"],
        type=row["type"],
        uploaded_at=datetime.fromisoformat(row["uploaded_at"]),
    )


def _get_report_row(conn: sqlite3.Connection, report_id: int, user_id: int):
    row = conn.execute(
        "SELECT * FROM reports WHERE id = ? AND user_id = ?", (report_id, user_id)
    ).fetchone()
    if row is None:
        raise HTTPException(status_code=404, detail="Report not found")
    return row


@router.get("", response_model=list[ReportOut])
async def list_reports(
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """List uploaded reports, newest first."""
    rows = conn.execute(
        "SELECT * FROM reports WHERE user_id = ? ORDER BY uploaded_at DESC, id DESC",
        (user.id,),
    ).fetchall()
    return [row_to_report(row) for row in rows]


@router.post("", response_model=CreatedResponse)
async def upload_report(
    report: Optional[UploadFile] = File(default=None),
    name: str = Form(...),
    type: ReportType = Form(...),
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Upload a PDF or image report."""
    if report is None or not report.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    path = await save_upload(report, settings.upload_dir, settings.max_upload_mb * 1024 * 1024)
    try:
        cursor = conn.execute(
            "INSERT INTO reports (user_id, name, type, path, uploaded_at) VALUES (?, ?, ?, ?, ?)",
            (user.id, name, type, path, datetime.now().isoformat(timespec="seconds")),
        )
    except sqlite3.Error:
        logger.error(f"[REPORTS] Could not record upload for user {user.id}, removing {path}")
        remove_file(path)
        raise
    logger.info(f"[REPORTS] User {user.id} uploaded report {cursor.lastrowid}")
    return CreatedResponse(id=cursor.lastrowid)


@router.delete("/{report_id}", response_model=SuccessResponse)
async def delete_report(
    report_id: int,
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """Delete a report and its stored file."""
    row = _get_report_row(conn, report_id, user.id)
    remove_file(row["path"])
    conn.execute("DELETE FROM reports WHERE id = ?", (report_id,))
    return SuccessResponse()


@router.get("/{report_id}/download")
async def download_report(
    report_id: int,
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    """Stream the stored report file."""
    row = _get_report_row(conn, report_id, user.id)
    if not os.path.exists(row["path"]):
        raise HTTPException(status_code=404, detail="Report not found")

    extension = os.path.splitext(row["path"])[1]
    filename = row["name"] if row["name"].endswith(extension) else f"{row['name']}{extension}"
    return FileResponse(row["path"], filename=filename)
