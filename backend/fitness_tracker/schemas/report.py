"""Pydantic schemas for the monthly report endpoints."""

from typing import List

from pydantic import BaseModel, Field


class MonthlyAggregateResponse(BaseModel):
    """One user's training summary for the previous calendar month."""

    user_email: str
    training_count: int = Field(..., ge=0)
    total_distance: float = Field(..., ge=0, description="Kilometers")
    average_speed: float = Field(..., ge=0, description="Unweighted mean of km/h")

    class Config:
        from_attributes = True


class DispatchSummaryResponse(BaseModel):
    """Outcome of a monthly report dispatch run."""

    sent: List[str] = Field(default_factory=list, description="Recipients that were sent a report")
    failed: List[str] = Field(default_factory=list, description="Recipients whose send failed")

    class Config:
        from_attributes = True
