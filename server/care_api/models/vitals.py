"""Blood pressure and glucose reading models."""
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

MetricType = Literal["bp", "sugar"]
ReadingStatusLabel = Literal["Normal", "High", "Low"]


class HealthMetricCreate(BaseModel):
    """
    A new reading. Blood pressure needs systolic and diastolic only;
    sugar needs value only.
    """

    type: MetricType
    systolic: Optional[int] = Field(default=None, ge=30, le=300)
    diastolic: Optional[int] = Field(default=None, ge=20, le=200)
    value: Optional[float] = Field(default=None, gt=0, le=1000)
    recorded_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_fields_match_type(self):
        if self.type == "bp":
            if self.systolic is None or self.diastolic is None:
                raise ValueError("bp readings require systolic and diastolic")
            if self.value is not None:
                raise ValueError("bp readings must not include value")
        else:
            if self.value is None:
                raise ValueError("sugar readings require value")
            if self.systolic is not None or self.diastolic is not None:
                raise ValueError("sugar readings must not include systolic or diastolic")
        return self


class HealthMetricOut(BaseModel):
    """Stored reading with its classification."""

    id: int
    type: MetricType
    systolic: Optional[int] = None
    diastolic: Optional[int] = None
    value: Optional[float] = None
    recorded_at: datetime
    status: ReadingStatusLabel
