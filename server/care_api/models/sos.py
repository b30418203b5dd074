"""SOS event models."""
from datetime import datetime

from pydantic import BaseModel


class SosCreated(BaseModel):
    """Acknowledgement of a stored SOS event."""

    id: int
    maps_url: str
    audio_attached: bool


class SosEventOut(BaseModel):
    """Stored SOS event."""

    id: int
    latitude: float
    longitude: float
    audio_attached: bool
    created_at: datetime
    maps_url: str


class HospitalSearch(BaseModel):
    """Map search link for hospitals near a location."""

    latitude: float
    longitude: float
    maps_url: str
