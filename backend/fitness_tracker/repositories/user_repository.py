"""User persistence and lookups."""

from datetime import date
from typing import List, Optional

from sqlalchemy import func

from fitness_tracker.models.user import User
from fitness_tracker.repositories.base import SqlAlchemyRepository


class UserRepository(SqlAlchemyRepository[User]):
    """Repository for ``User`` entities."""

    model = User
    entity_name = "User"

    def find_by_email(self, email: str) -> Optional[User]:
        """Exact email match."""
        return self.db.query(User).filter(User.email == email).first()

    def find_by_email_fragment(self, fragment: str) -> List[User]:
        """Case-insensitive substring match on email."""
        return (
            self.db.query(User)
            .filter(func.lower(User.email).contains(fragment.lower(), autoescape=True))
            .order_by(User.id)
            .all()
        )

    def find_born_before(self, cutoff: date) -> List[User]:
        """Users whose birthdate is strictly before ``cutoff``."""
        return (
            self.db.query(User)
            .filter(User.birthdate < cutoff)
            .order_by(User.id)
            .all()
        )
