"""Training persistence and lookups."""

from datetime import datetime
from typing import List

from fitness_tracker.models.training import ActivityType, Training
from fitness_tracker.repositories.base import SqlAlchemyRepository


class TrainingRepository(SqlAlchemyRepository[Training]):
    """Repository for ``Training`` entities."""

    model = Training
    entity_name = "Training"

    def find_by_user_id(self, user_id: int) -> List[Training]:
        return (
            self.db.query(Training)
            .filter(Training.user_id == user_id)
            .order_by(Training.start_time, Training.id)
            .all()
        )

    def find_by_activity_type(self, activity_type: ActivityType) -> List[Training]:
        return (
            self.db.query(Training)
            .filter(Training.activity_type == activity_type)
            .order_by(Training.start_time, Training.id)
            .all()
        )

    def find_by_end_time_after(self, cutoff: datetime) -> List[Training]:
        """Trainings that ended strictly after ``cutoff``."""
        return (
            self.db.query(Training)
            .filter(Training.end_time > cutoff)
            .order_by(Training.end_time, Training.id)
            .all()
        )

    def find_by_start_time_between(self, start: datetime, end: datetime) -> List[Training]:
        """Trainings starting within ``[start, end]``, both bounds inclusive."""
        return (
            self.db.query(Training)
            .filter(Training.start_time >= start, Training.start_time <= end)
            .order_by(Training.start_time, Training.id)
            .all()
        )

    def find_by_user_in_window(
        self, user_id: int, window_start: datetime, window_end: datetime
    ) -> List[Training]:
        """A user's trainings starting within ``[window_start, window_end)``."""
        return (
            self.db.query(Training)
            .filter(
                Training.user_id == user_id,
                Training.start_time >= window_start,
                Training.start_time < window_end,
            )
            .order_by(Training.start_time, Training.id)
            .all()
        )
