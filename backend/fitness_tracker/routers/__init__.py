"""API routers package."""

from fitness_tracker.routers import reports, statistics, trainings, users

__all__ = ["users", "trainings", "statistics", "reports"]
