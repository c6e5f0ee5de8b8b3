"""Pydantic schemas for statistics-related API operations."""

from typing import Optional

from pydantic import BaseModel, Field


class StatisticsBase(BaseModel):
    """Base schema for statistics data. Sign checks live in ``StatisticsService``."""

    total_trainings: int = Field(0, description="Number of trainings")
    total_distance: float = Field(0.0, description="Total distance in kilometers")
    total_calories_burned: int = Field(0, description="Total calories burned")


class StatisticsCreate(StatisticsBase):
    """Schema for creating statistics."""

    id: Optional[int] = Field(None, description="Must be empty; assigned on creation")
    user_id: Optional[int] = Field(None, description="Owning user ID")

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "total_trainings": 15,
                "total_distance": 150.5,
                "total_calories_burned": 12000,
            }
        }


class StatisticsUpdate(StatisticsBase):
    """Schema for replacing all mutable fields of a statistics row."""

    user_id: Optional[int] = Field(None, description="Owning user ID")


class StatisticsResponse(StatisticsBase):
    """Schema for statistics API responses."""

    id: int = Field(..., description="Statistics ID")
    user_id: int = Field(..., description="Owning user ID")

    class Config:
        from_attributes = True
