"""Repositories wrapping the SQLAlchemy session for each entity kind."""

from fitness_tracker.repositories.base import SqlAlchemyRepository
from fitness_tracker.repositories.user_repository import UserRepository
from fitness_tracker.repositories.training_repository import TrainingRepository
from fitness_tracker.repositories.statistics_repository import StatisticsRepository

__all__ = [
    "SqlAlchemyRepository",
    "UserRepository",
    "TrainingRepository",
    "StatisticsRepository",
]
