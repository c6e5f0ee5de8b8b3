"""Fitness Tracker backend: users, trainings, statistics and monthly reports."""

__version__ = "1.0.0"
