"""Database models for the Fitness Tracker application."""

from fitness_tracker.models.base import Base
from fitness_tracker.models.user import User
from fitness_tracker.models.training import Training, ActivityType
from fitness_tracker.models.statistics import Statistics

__all__ = [
    "Base",
    "User",
    "Training",
    "ActivityType",
    "Statistics",
]
