"""
Monthly training aggregation.

Summarizes, per user, the trainings that started during the previous full
calendar month. Pure reads: nothing is written back to the database.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Sequence, Tuple

from fitness_tracker.models.training import Training
from fitness_tracker.repositories.training_repository import TrainingRepository
from fitness_tracker.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlyAggregate:
    """One user's training summary over the aggregation window."""

    user_email: str
    training_count: int
    total_distance: float
    average_speed: float


def previous_month_window(now: datetime) -> Tuple[datetime, datetime]:
    """
    Return ``(start, end)`` covering the previous calendar month.

    ``start`` is midnight on the first day of the previous month and ``end``
    is midnight on the first day of the current month; ``end`` is exclusive.

    Example:
        >>> previous_month_window(datetime(2024, 3, 15, 10, 30))
        (datetime.datetime(2024, 2, 1, 0, 0), datetime.datetime(2024, 3, 1, 0, 0))
    """
    end = datetime(now.year, now.month, 1)
    if now.month == 1:
        start = datetime(now.year - 1, 12, 1)
    else:
        start = datetime(now.year, now.month - 1, 1)
    return start, end


def summarize_trainings(user_email: str, trainings: Sequence[Training]) -> MonthlyAggregate:
    """
    Build an aggregate from a user's trainings.

    Average speed is the plain arithmetic mean of each training's average
    speed, not weighted by duration or distance.
    """
    count = len(trainings)
    total_distance = sum(t.distance for t in trainings)
    average_speed = sum(t.average_speed for t in trainings) / count if count else 0.0
    return MonthlyAggregate(
        user_email=user_email,
        training_count=count,
        total_distance=total_distance,
        average_speed=average_speed,
    )


class TrainingReportService:
    """Compute monthly per-user training aggregates."""

    def __init__(
        self,
        user_repository: UserRepository,
        training_repository: TrainingRepository,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.user_repository = user_repository
        self.training_repository = training_repository
        self.clock = clock

    def generate_reports(self, now: Optional[datetime] = None) -> List[MonthlyAggregate]:
        """
        Aggregate every user's trainings from the previous calendar month.

        Users without trainings in the window are skipped, so every returned
        aggregate has ``training_count >= 1``.

        Args:
            now: Reference time; defaults to the service clock

        Returns:
            One aggregate per user with at least one training in the window
        """
        start, end = previous_month_window(now or self.clock())
        logger.info(f"Generating monthly training reports for window [{start}, {end})")

        reports = []
        for user in self.user_repository.find_all():
            trainings = self.training_repository.find_by_user_in_window(user.id, start, end)
            if not trainings:
                logger.debug(f"No trainings for user {user.id} in window, skipping")
                continue
            reports.append(summarize_trainings(user.email, trainings))

        logger.info(f"Generated {len(reports)} monthly training reports")
        return reports
