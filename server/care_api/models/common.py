"""Shared response models."""
from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Acknowledgement for updates and deletes."""

    success: bool = True


class CreatedResponse(BaseModel):
    """Identifier of a newly created record."""

    id: int
