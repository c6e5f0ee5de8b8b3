"""User model for people whose trainings are tracked."""

from datetime import date as date_type
from typing import TYPE_CHECKING, List

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitness_tracker.models.base import Base

if TYPE_CHECKING:
    from fitness_tracker.models.statistics import Statistics
    from fitness_tracker.models.training import Training


class User(Base):
    """User model. Email is unique across all users."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    birthdate: Mapped[date_type] = mapped_column(Date)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)

    # Relationships. Deleting a user does not cascade (see UserService.remove_user).
    trainings: Mapped[List["Training"]] = relationship(
        "Training", back_populates="user", passive_deletes="all"
    )
    statistics: Mapped[List["Statistics"]] = relationship(
        "Statistics", back_populates="user", passive_deletes="all"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"

    @property
    def email_domain(self) -> str:
        """Part of the email address after the '@', or empty string."""
        if not self.email or "@" not in self.email:
            return ""
        return self.email.split("@", 1)[1]
