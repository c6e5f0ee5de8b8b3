"""Pydantic schemas for training-related API operations."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from fitness_tracker.models.training import ActivityType


class TrainingBase(BaseModel):
    """Base schema for training data. Range and sign checks live in ``TrainingService``."""

    start_time: Optional[datetime] = Field(None, description="Training start")
    end_time: Optional[datetime] = Field(None, description="Training end, not before start")
    activity_type: Optional[ActivityType] = Field(None, description="Kind of activity")
    distance: float = Field(0.0, description="Distance in kilometers")
    average_speed: float = Field(0.0, description="Average speed in km/h")


class TrainingCreate(TrainingBase):
    """Schema for creating a training."""

    id: Optional[int] = Field(None, description="Must be empty; assigned on creation")
    user_id: Optional[int] = Field(None, description="Owning user ID")

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "start_time": "2024-01-19T08:00:00",
                "end_time": "2024-01-19T09:30:00",
                "activity_type": "RUNNING",
                "distance": 10.5,
                "average_speed": 8.2,
            }
        }


class TrainingUpdate(TrainingBase):
    """Schema for replacing all mutable fields of a training."""

    user_id: Optional[int] = Field(None, description="Owning user ID")


class TrainingUserResponse(BaseModel):
    """User summary embedded in training responses."""

    id: int
    first_name: str
    last_name: str
    email: str

    class Config:
        from_attributes = True


class TrainingResponse(BaseModel):
    """Schema for training API responses."""

    id: int = Field(..., description="Training ID")
    user: TrainingUserResponse = Field(..., description="Owning user")
    start_time: datetime
    end_time: datetime
    activity_type: ActivityType
    distance: float = Field(..., description="Distance in kilometers")
    average_speed: float = Field(..., description="Average speed in km/h")

    class Config:
        from_attributes = True
