"""
Training lifecycle service.

Validates and persists trainings and answers training queries. Every
validation problem in a request is collected and reported together in one
``ValidationError``; owning users are resolved through a ``UserProvider``.
"""

import logging
from datetime import datetime
from typing import List, Optional

from fitness_tracker.errors import NotFoundError, ValidationError
from fitness_tracker.models.training import ActivityType, Training
from fitness_tracker.models.user import User
from fitness_tracker.repositories.training_repository import TrainingRepository
from fitness_tracker.schemas.training import TrainingBase, TrainingCreate
from fitness_tracker.services.user_service import UserProvider
from fitness_tracker.services.validation import is_non_negative, to_naive_local

logger = logging.getLogger(__name__)


class TrainingService:
    """Create, update and query trainings."""

    # Validation messages
    MSG_NULL_TRAINING = "Training data cannot be null"
    MSG_NULL_USER_ID = "User ID cannot be null"
    MSG_NULL_TRAINING_ID = "Training ID cannot be null"
    MSG_EXISTING_ID = "Training has already DB ID, update is not permitted!"
    MSG_NULL_START_TIME = "Start time cannot be null"
    MSG_NULL_END_TIME = "End time cannot be null"
    MSG_NULL_ACTIVITY_TYPE = "Activity type cannot be null"
    MSG_INVALID_TIME_RANGE = "End time must not be before start time"
    MSG_NEGATIVE_DISTANCE = "Distance cannot be negative"
    MSG_NEGATIVE_SPEED = "Average speed cannot be negative"

    def __init__(self, repository: TrainingRepository, user_provider: UserProvider):
        self.repository = repository
        self.user_provider = user_provider

    # Commands

    def create_training(self, data: TrainingCreate, user_id: int) -> Training:
        """
        Create a training owned by ``user_id``.

        Args:
            data: Training fields; ``data.id`` must be empty
            user_id: Owner of the new training

        Returns:
            The persisted training with its newly assigned id

        Raises:
            ValidationError: With every validation issue joined by "; "
            NotFoundError: If ``user_id`` does not resolve to a user
            PersistenceError: If the database rejects the insert
        """
        logger.info(f"Beginning training creation workflow for user ID: {user_id}")

        issues = self._check_creation_data(data, user_id)
        if issues:
            error = ValidationError.from_issues(issues)
            logger.error(f"Training creation validation failed with errors: {error.message}")
            raise error

        user = self._fetch_user(user_id)
        training = self._build_training(data, user)
        saved = self.repository.save(training)
        logger.info(
            f"Training successfully created with ID {saved.id}",
            extra={"training_id": saved.id, "user_id": user.id},
        )
        return saved

    def update_training(self, data: TrainingBase, training_id: int, user_id: int) -> Training:
        """
        Overwrite every mutable field of an existing training.

        Raises:
            ValidationError: With every validation issue joined by "; "
            NotFoundError: If the training or the user does not exist
            PersistenceError: If the database rejects the update
        """
        logger.info(
            f"Beginning training update workflow for training ID: {training_id} "
            f"and user ID: {user_id}"
        )

        issues = self._check_update_data(data, training_id, user_id)
        if issues:
            error = ValidationError.from_issues(issues)
            logger.error(f"Training update validation failed with errors: {error.message}")
            raise error

        training = self._fetch_training(training_id)
        user = self._fetch_user(user_id)

        changes = self.describe_changes(training, data)

        training.user = user
        training.start_time = to_naive_local(data.start_time)
        training.end_time = to_naive_local(data.end_time)
        training.activity_type = data.activity_type
        training.distance = data.distance
        training.average_speed = data.average_speed

        saved = self.repository.save(training)
        if changes:
            logger.info(
                f"Training updated with the following changes: {changes}",
                extra={"training_id": saved.id, "user_id": user.id},
            )
        else:
            logger.info("Training updated with no detected changes")
        return saved

    # Queries

    def get_training(self, training_id: int) -> Optional[Training]:
        logger.debug(f"Fetching training with ID: {training_id}")
        return self.repository.get_by_id(training_id)

    def find_all_trainings(self) -> List[Training]:
        logger.debug("Fetching all trainings from database")
        return self.repository.find_all()

    def find_trainings_by_user_id(self, user_id: int) -> List[Training]:
        logger.debug(f"Fetching trainings for user with ID: {user_id}")
        self._ensure_not_none(user_id, self.MSG_NULL_USER_ID)
        return self.repository.find_by_user_id(user_id)

    def find_trainings_by_activity_type(self, activity_type: ActivityType) -> List[Training]:
        logger.debug(f"Fetching trainings with activity type: {activity_type}")
        self._ensure_not_none(activity_type, self.MSG_NULL_ACTIVITY_TYPE)
        return self.repository.find_by_activity_type(activity_type)

    def find_trainings_with_end_date_after(self, cutoff: datetime) -> List[Training]:
        """Trainings that ended strictly after ``cutoff``."""
        logger.debug(f"Fetching trainings ending after date: {cutoff}")
        self._ensure_not_none(cutoff, "Date cannot be null")
        return self.repository.find_by_end_time_after(to_naive_local(cutoff))

    def find_trainings_by_date_range(self, start: datetime, end: datetime) -> List[Training]:
        """
        Trainings whose start time lies within ``[start, end]``.

        Raises:
            ValidationError: If a bound is missing or ``start`` is after ``end``
        """
        logger.debug(f"Fetching trainings between dates: {start} and {end}")
        self._ensure_not_none(start, "Start date cannot be null")
        self._ensure_not_none(end, "End date cannot be null")
        start, end = to_naive_local(start), to_naive_local(end)
        if start > end:
            raise ValidationError("Start date must be before or equal to end date")
        return self.repository.find_by_start_time_between(start, end)

    # Validation

    @staticmethod
    def _ensure_not_none(value, message: str) -> None:
        if value is None:
            raise ValidationError(message)

    def _check_creation_data(self, data: Optional[TrainingCreate], user_id: Optional[int]) -> List[str]:
        if data is None:
            return [self.MSG_NULL_TRAINING]

        issues = []
        if user_id is None:
            issues.append(self.MSG_NULL_USER_ID)
        if getattr(data, "id", None) is not None:
            issues.append(self.MSG_EXISTING_ID)
        issues.extend(self._check_common_fields(data))
        return issues

    def _check_update_data(
        self, data: Optional[TrainingBase], training_id: Optional[int], user_id: Optional[int]
    ) -> List[str]:
        if data is None:
            return [self.MSG_NULL_TRAINING]

        issues = []
        if training_id is None:
            issues.append(self.MSG_NULL_TRAINING_ID)
        if user_id is None:
            issues.append(self.MSG_NULL_USER_ID)
        issues.extend(self._check_common_fields(data))
        return issues

    def _check_common_fields(self, data: TrainingBase) -> List[str]:
        issues = []
        start_time = to_naive_local(data.start_time)
        end_time = to_naive_local(data.end_time)
        if start_time is None:
            issues.append(self.MSG_NULL_START_TIME)
        if end_time is None:
            issues.append(self.MSG_NULL_END_TIME)
        if data.activity_type is None:
            issues.append(self.MSG_NULL_ACTIVITY_TYPE)
        if start_time is not None and end_time is not None and end_time < start_time:
            issues.append(self.MSG_INVALID_TIME_RANGE)
        if not is_non_negative(data.distance):
            issues.append(self.MSG_NEGATIVE_DISTANCE)
        if not is_non_negative(data.average_speed):
            issues.append(self.MSG_NEGATIVE_SPEED)
        return issues

    # Entity helpers

    def _fetch_user(self, user_id: int) -> User:
        user = self.user_provider.get_user(user_id)
        if user is None:
            logger.error(f"User with ID {user_id} not found in the system")
            raise NotFoundError("User", user_id)
        return user

    def _fetch_training(self, training_id: int) -> Training:
        training = self.repository.get_by_id(training_id)
        if training is None:
            logger.error(f"Training with ID {training_id} not found in the system")
            raise NotFoundError("Training", training_id)
        return training

    @staticmethod
    def _build_training(data: TrainingBase, user: User) -> Training:
        training = Training(
            user=user,
            start_time=to_naive_local(data.start_time),
            end_time=to_naive_local(data.end_time),
            activity_type=data.activity_type,
            distance=data.distance,
            average_speed=data.average_speed,
        )
        logger.info(
            f"New training entity prepared for user {user.id}: {data.activity_type} "
            f"(duration: {training.duration_minutes} min, distance: {data.distance}, "
            f"avg speed: {data.average_speed})"
        )
        return training

    @staticmethod
    def describe_changes(existing: Training, data: TrainingBase) -> str:
        """Human-readable old → new summary of the fields an update changes."""
        changes = []
        if existing.distance != data.distance:
            changes.append(f"Distance: {existing.distance:.2f} → {data.distance:.2f}")
        if existing.activity_type != data.activity_type:
            changes.append(f"Activity: {existing.activity_type} → {data.activity_type}")
        start_time, end_time = to_naive_local(data.start_time), to_naive_local(data.end_time)
        if existing.start_time != start_time:
            changes.append(f"Start time: {existing.start_time} → {start_time}")
        if existing.end_time != end_time:
            changes.append(f"End time: {existing.end_time} → {end_time}")
        if existing.average_speed != data.average_speed:
            changes.append(
                f"Average speed: {existing.average_speed:.2f} → {data.average_speed:.2f}"
            )
        return "; ".join(changes)
