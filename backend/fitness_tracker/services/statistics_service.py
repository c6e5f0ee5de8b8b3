"""
Statistics lifecycle service.

Mirrors ``TrainingService``: collect-then-raise validation, owning user
resolved through a ``UserProvider``. Unlike users, statistics are only
deleted after an explicit existence check.
"""

import logging
from typing import List, Optional

from fitness_tracker.errors import NotFoundError, ValidationError
from fitness_tracker.models.statistics import Statistics
from fitness_tracker.models.user import User
from fitness_tracker.repositories.statistics_repository import StatisticsRepository
from fitness_tracker.schemas.statistics import StatisticsBase, StatisticsCreate
from fitness_tracker.services.user_service import UserProvider
from fitness_tracker.services.validation import is_non_negative

logger = logging.getLogger(__name__)


class StatisticsService:
    """Create, update, delete and query statistics."""

    MSG_NULL_STATISTICS = "Statistics data cannot be null"
    MSG_NULL_USER_ID = "User ID cannot be null"
    MSG_NULL_STATISTICS_ID = "Statistics ID cannot be null"
    MSG_EXISTING_ID = "Statistics has already DB ID, update is not permitted!"
    MSG_NEGATIVE_TRAININGS = "Total trainings cannot be negative"
    MSG_NEGATIVE_DISTANCE = "Total distance cannot be negative"
    MSG_NEGATIVE_CALORIES = "Total calories burned cannot be negative"

    def __init__(self, repository: StatisticsRepository, user_provider: UserProvider):
        self.repository = repository
        self.user_provider = user_provider

    # Queries

    def get_statistics(self, statistics_id: int) -> Optional[Statistics]:
        logger.debug(f"Fetching statistics with ID: {statistics_id}")
        self._ensure_not_none(statistics_id, self.MSG_NULL_STATISTICS_ID)
        return self.repository.get_by_id(statistics_id)

    def get_statistics_by_user_id(self, user_id: int) -> Optional[Statistics]:
        """The user's statistics row with the lowest id, or None."""
        logger.debug(f"Fetching statistics for user with ID: {user_id}")
        self._ensure_not_none(user_id, self.MSG_NULL_USER_ID)
        rows = self.repository.find_by_user_id(user_id)
        if len(rows) > 1:
            logger.warning(f"User {user_id} owns {len(rows)} statistics rows; returning ID {rows[0].id}")
        return rows[0] if rows else None

    def find_all_statistics(self) -> List[Statistics]:
        logger.debug("Fetching all statistics from database")
        return self.repository.find_all()

    def find_statistics_with_calories_greater_than(self, calories: int) -> List[Statistics]:
        logger.debug(f"Fetching statistics with calories greater than: {calories}")
        self._ensure_not_none(calories, "Calories threshold cannot be null")
        return self.repository.find_by_calories_greater_than(calories)

    # Commands

    def create_statistics(self, data: StatisticsCreate, user_id: int) -> Statistics:
        """
        Create statistics owned by ``user_id``.

        Raises:
            ValidationError: With every validation issue joined by "; "
            NotFoundError: If ``user_id`` does not resolve to a user
            PersistenceError: If the database rejects the insert
        """
        logger.info(f"Beginning statistics creation workflow for user ID: {user_id}")

        issues = self._check_creation_data(data, user_id)
        if issues:
            error = ValidationError.from_issues(issues)
            logger.error(f"Statistics creation validation failed with errors: {error.message}")
            raise error

        user = self._fetch_user(user_id)
        statistics = Statistics(
            user=user,
            total_trainings=data.total_trainings,
            total_distance=data.total_distance,
            total_calories_burned=data.total_calories_burned,
        )
        logger.info(
            f"New statistics entity prepared for user {user.id}: trainings: {data.total_trainings}, "
            f"distance: {data.total_distance}, calories: {data.total_calories_burned}"
        )
        saved = self.repository.save(statistics)
        logger.info(
            f"Statistics successfully created with ID {saved.id}",
            extra={"statistics_id": saved.id, "user_id": user.id},
        )
        return saved

    def update_statistics(
        self, data: StatisticsBase, statistics_id: int, user_id: int
    ) -> Statistics:
        """
        Overwrite every mutable field of an existing statistics row, owner included.

        Raises:
            ValidationError: With every validation issue joined by "; "
            NotFoundError: If the user or the statistics row does not exist
            PersistenceError: If the database rejects the update
        """
        logger.info(
            f"Beginning statistics update workflow for statistics ID: {statistics_id} "
            f"and user ID: {user_id}"
        )

        issues = self._check_update_data(data, statistics_id, user_id)
        if issues:
            error = ValidationError.from_issues(issues)
            logger.error(f"Statistics update validation failed with errors: {error.message}")
            raise error

        user = self._fetch_user(user_id)
        statistics = self.repository.get_for_update(statistics_id)

        changes = self.describe_changes(statistics, data)

        statistics.user = user
        statistics.total_trainings = data.total_trainings
        statistics.total_distance = data.total_distance
        statistics.total_calories_burned = data.total_calories_burned

        saved = self.repository.save(statistics)
        if changes:
            logger.info(
                f"Statistics updated with the following changes: {changes}",
                extra={"statistics_id": saved.id, "user_id": user.id},
            )
        else:
            logger.info("Statistics updated with no detected changes")
        return saved

    def delete_statistics(self, statistics_id: int) -> None:
        """
        Delete a statistics row.

        Raises:
            ValidationError: If ``statistics_id`` is None
            NotFoundError: If no statistics row has that id; nothing is deleted
            PersistenceError: If the database rejects the delete
        """
        logger.info(f"Beginning statistics deletion workflow for statistics ID: {statistics_id}")
        self._ensure_not_none(statistics_id, self.MSG_NULL_STATISTICS_ID)

        if not self.repository.exists_by_id(statistics_id):
            logger.error(f"Cannot delete statistics: statistics with ID {statistics_id} not found")
            raise NotFoundError("Statistics", statistics_id)

        self.repository.delete_by_id(statistics_id)
        logger.info(
            f"Statistics with ID {statistics_id} successfully deleted",
            extra={"statistics_id": statistics_id},
        )

    # Validation

    @staticmethod
    def _ensure_not_none(value, message: str) -> None:
        if value is None:
            raise ValidationError(message)

    def _check_creation_data(
        self, data: Optional[StatisticsCreate], user_id: Optional[int]
    ) -> List[str]:
        if data is None:
            return [self.MSG_NULL_STATISTICS]

        issues = []
        if user_id is None:
            issues.append(self.MSG_NULL_USER_ID)
        if getattr(data, "id", None) is not None:
            issues.append(self.MSG_EXISTING_ID)
        issues.extend(self._check_common_fields(data))
        return issues

    def _check_update_data(
        self, data: Optional[StatisticsBase], statistics_id: Optional[int], user_id: Optional[int]
    ) -> List[str]:
        if data is None:
            return [self.MSG_NULL_STATISTICS]

        issues = []
        if statistics_id is None:
            issues.append(self.MSG_NULL_STATISTICS_ID)
        if user_id is None:
            issues.append(self.MSG_NULL_USER_ID)
        issues.extend(self._check_common_fields(data))
        return issues

    def _check_common_fields(self, data: StatisticsBase) -> List[str]:
        issues = []
        if data.total_trainings is None or data.total_trainings < 0:
            issues.append(self.MSG_NEGATIVE_TRAININGS)
        if not is_non_negative(data.total_distance):
            issues.append(self.MSG_NEGATIVE_DISTANCE)
        if data.total_calories_burned is None or data.total_calories_burned < 0:
            issues.append(self.MSG_NEGATIVE_CALORIES)
        return issues

    def _fetch_user(self, user_id: int) -> User:
        user = self.user_provider.get_user(user_id)
        if user is None:
            logger.error(f"User with ID {user_id} not found in the system")
            raise NotFoundError("User", user_id)
        return user

    @staticmethod
    def describe_changes(existing: Statistics, data: StatisticsBase) -> str:
        """Human-readable old → new summary of the fields an update changes."""
        changes = []
        if existing.total_trainings != data.total_trainings:
            changes.append(f"Total trainings: {existing.total_trainings} → {data.total_trainings}")
        if existing.total_distance != data.total_distance:
            changes.append(
                f"Total distance: {existing.total_distance:.2f} → {data.total_distance:.2f}"
            )
        if existing.total_calories_burned != data.total_calories_burned:
            changes.append(
                f"Total calories burned: {existing.total_calories_burned} → "
                f"{data.total_calories_burned}"
            )
        return "; ".join(changes)
