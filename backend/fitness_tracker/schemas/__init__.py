"""Pydantic schemas package for API request/response models."""

from fitness_tracker.schemas.user import (
    UserBase,
    UserCreate,
    UserUpdate,
    UserResponse,
    UserSimpleResponse,
    UserEmailResponse,
)
from fitness_tracker.schemas.training import (
    TrainingBase,
    TrainingCreate,
    TrainingUpdate,
    TrainingResponse,
    TrainingUserResponse,
)
from fitness_tracker.schemas.statistics import (
    StatisticsBase,
    StatisticsCreate,
    StatisticsUpdate,
    StatisticsResponse,
)
from fitness_tracker.schemas.report import (
    MonthlyAggregateResponse,
    DispatchSummaryResponse,
)

__all__ = [
    # User schemas
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserSimpleResponse",
    "UserEmailResponse",
    # Training schemas
    "TrainingBase",
    "TrainingCreate",
    "TrainingUpdate",
    "TrainingResponse",
    "TrainingUserResponse",
    # Statistics schemas
    "StatisticsBase",
    "StatisticsCreate",
    "StatisticsUpdate",
    "StatisticsResponse",
    # Report schemas
    "MonthlyAggregateResponse",
    "DispatchSummaryResponse",
]
