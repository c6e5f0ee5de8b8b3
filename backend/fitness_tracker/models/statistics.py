"""Statistics model for per-user training totals."""

from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitness_tracker.models.base import Base

if TYPE_CHECKING:
    from fitness_tracker.models.user import User


class Statistics(Base):
    """
    Accumulated training totals for a user.

    One row per user by convention only; nothing in the schema prevents a
    user from owning several rows.
    """

    __tablename__ = "statistics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), index=True)

    total_trainings: Mapped[int] = mapped_column(Integer, default=0)
    total_distance: Mapped[float] = mapped_column(Float, default=0.0)  # km
    total_calories_burned: Mapped[int] = mapped_column(Integer, default=0)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="statistics")

    def __repr__(self) -> str:
        return (
            f"<Statistics(id={self.id}, user_id={self.user_id}, "
            f"total_trainings={self.total_trainings}, "
            f"total_calories_burned={self.total_calories_burned})>"
        )
