"""Statistics persistence and lookups."""

from typing import List

from fitness_tracker.models.statistics import Statistics
from fitness_tracker.repositories.base import SqlAlchemyRepository


class StatisticsRepository(SqlAlchemyRepository[Statistics]):
    """Repository for ``Statistics`` entities."""

    model = Statistics
    entity_name = "Statistics"

    def find_by_user_id(self, user_id: int) -> List[Statistics]:
        """All statistics rows owned by a user, lowest id first."""
        return (
            self.db.query(Statistics)
            .filter(Statistics.user_id == user_id)
            .order_by(Statistics.id)
            .all()
        )

    def find_by_calories_greater_than(self, calories: int) -> List[Statistics]:
        return (
            self.db.query(Statistics)
            .filter(Statistics.total_calories_burned > calories)
            .order_by(Statistics.id)
            .all()
        )
