"""Uploaded report models."""
from datetime import datetime
from typing import Literal

from pydantic import BaseModel

ReportType = Literal["pdf", "image"]


class ReportOut(BaseModel):
    """Uploaded medical report metadata."""

    id: int
    name: str
    type: ReportType
    uploaded_at: datetime
