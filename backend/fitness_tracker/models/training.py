"""Training model for recorded training sessions."""

from datetime import datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitness_tracker.models.base import Base

if TYPE_CHECKING:
    from fitness_tracker.models.user import User


class ActivityType(str, PyEnum):
    """Kind of activity performed during a training."""
    RUNNING = "RUNNING"
    CYCLING = "CYCLING"
    WALKING = "WALKING"
    SWIMMING = "SWIMMING"
    TENNIS = "TENNIS"
    OTHER = "OTHER"


class Training(Base):
    """A single training session owned by a user."""

    __tablename__ = "trainings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), index=True)

    start_time: Mapped[datetime] = mapped_column(DateTime, index=True)
    end_time: Mapped[datetime] = mapped_column(DateTime)
    activity_type: Mapped[ActivityType] = mapped_column(Enum(ActivityType))

    distance: Mapped[float] = mapped_column(Float, default=0.0)  # km
    average_speed: Mapped[float] = mapped_column(Float, default=0.0)  # km/h

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="trainings")

    def __repr__(self) -> str:
        return (
            f"<Training(id={self.id}, user_id={self.user_id}, "
            f"activity_type={self.activity_type}, start_time={self.start_time})>"
        )

    @property
    def duration_minutes(self) -> int:
        """Whole minutes between start and end time."""
        if self.start_time is None or self.end_time is None:
            return 0
        return int((self.end_time - self.start_time).total_seconds() // 60)
