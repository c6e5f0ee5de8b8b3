"""
User lifecycle service.

Validates and persists user creation, update and removal, enforces email
uniqueness, and answers user lookups. Other services reach users only through
the read-only ``UserProvider`` protocol.
"""

import logging
from collections import Counter
from datetime import date
from typing import Callable, List, Optional, Protocol

from fitness_tracker.errors import ConflictError, ValidationError
from fitness_tracker.models.user import User
from fitness_tracker.repositories.user_repository import UserRepository
from fitness_tracker.schemas.user import UserBase, UserCreate

logger = logging.getLogger(__name__)


class UserProvider(Protocol):
    """Read-only access to users, used by the training and statistics services."""

    def get_user(self, user_id: int) -> Optional[User]: ...


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _age_on(birthdate: date, today: date) -> int:
    """Full years between ``birthdate`` and ``today``."""
    had_birthday = (today.month, today.day) >= (birthdate.month, birthdate.day)
    return today.year - birthdate.year - (0 if had_birthday else 1)


class UserService:
    """Create, update, remove and look up users."""

    def __init__(self, repository: UserRepository, today: Callable[[], date] = date.today):
        self.repository = repository
        self.today = today

    # Commands

    def create_user(self, data: UserCreate) -> User:
        """
        Create a new user.

        Args:
            data: User fields; ``data.id`` must be empty

        Returns:
            The persisted user with its newly assigned id

        Raises:
            ValidationError: If a required field is missing or blank, or an id is set
            ConflictError: If the email is already used by another user
            PersistenceError: If the database rejects the insert
        """
        logger.info("Starting user creation process")

        if data is None:
            logger.error("Cannot create user: user data is missing")
            raise ValidationError("User data cannot be null")

        if data.id is not None:
            logger.error(f"Cannot create user: user already has ID {data.id}")
            raise ValidationError("User has already DB ID, update is not permitted!")

        self._validate_required_fields(data, operation="create")

        if self.repository.find_by_email(data.email) is not None:
            logger.error(f"Cannot create user: email {data.email} is already in use")
            raise ConflictError("Email is already in use")

        user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            birthdate=data.birthdate,
            email=data.email,
        )
        logger.info(f"Saving new user: {data.first_name} {data.last_name}, email: {data.email}")
        saved = self.repository.save(user)
        logger.info(f"User created successfully with ID: {saved.id}", extra={"user_id": saved.id})
        return saved

    def update_user(self, user_id: int, data: UserBase) -> User:
        """
        Overwrite every mutable field of an existing user.

        Raises:
            ValidationError: If the id is missing or a required field is missing or blank
            NotFoundError: If no user has ``user_id``
            ConflictError: If the new email belongs to a different user
            PersistenceError: If the database rejects the update
        """
        logger.info(f"Starting user update process for user ID: {user_id}")

        if user_id is None:
            logger.error("Cannot update user: user ID is null")
            raise ValidationError("User ID cannot be null")
        if data is None:
            logger.error("Cannot update user: user data is missing")
            raise ValidationError("User data cannot be null")

        self._validate_required_fields(data, operation="update")

        user = self.repository.get_for_update(user_id)

        if data.email != user.email:
            owner = self.repository.find_by_email(data.email)
            if owner is not None and owner.id != user_id:
                logger.error(
                    f"Cannot update user: email {data.email} is already in use by another user"
                )
                raise ConflictError("Email is already in use by another user")

        changes = self._describe_changes(user, data)

        user.first_name = data.first_name
        user.last_name = data.last_name
        user.birthdate = data.birthdate
        user.email = data.email

        logger.info(f"Updating user with ID {user_id}: {changes or 'No changes'}")
        updated = self.repository.save(user)
        logger.info(f"User updated successfully: {updated!r}", extra={"user_id": updated.id})
        return updated

    def remove_user(self, user_id: int) -> None:
        """
        Delete a user by id.

        Unknown ids are ignored. Trainings and statistics are not cascaded;
        if the user still owns any, the database refuses and
        ``PersistenceError`` is raised.
        """
        logger.info(f"Removing user with ID: {user_id}", extra={"user_id": user_id})
        self.repository.delete_by_id(user_id)

    # Queries

    def get_user(self, user_id: int) -> Optional[User]:
        logger.debug(f"Fetching user with ID: {user_id}")
        return self.repository.get_by_id(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        logger.debug(f"Fetching user with email: {email}")
        if _is_blank(email):
            return None
        return self.repository.find_by_email(email)

    def find_all_users(self) -> List[User]:
        """Return every user ordered by id ascending, users without id first."""
        logger.info("Retrieving all users from the database")
        users = sorted(
            self.repository.find_all(),
            key=lambda u: (u.id is not None, u.id if u.id is not None else 0),
        )
        logger.info(f"Retrieved {len(users)} users from the database")

        if users and logger.isEnabledFor(logging.DEBUG):
            domains = Counter(u.email_domain for u in users if u.email_domain)
            logger.debug(f"Email domain statistics: {dict(domains)}")
            today = self.today()
            ages = [_age_on(u.birthdate, today) for u in users if u.birthdate is not None]
            average_age = sum(ages) / len(ages) if ages else 0
            logger.debug(f"Average user age: {average_age:.1f}")

        return users

    def find_users_by_email(self, fragment: str) -> List[User]:
        """Case-insensitive substring search on email. A blank fragment matches nothing."""
        if _is_blank(fragment):
            return []
        return self.repository.find_by_email_fragment(fragment)

    def find_users_older_than(self, cutoff: date) -> List[User]:
        """Users born strictly before ``cutoff``."""
        if cutoff is None:
            raise ValidationError("Date cannot be null")
        return self.repository.find_born_before(cutoff)

    # Helpers

    def _validate_required_fields(self, data: UserBase, operation: str) -> None:
        checks = (
            (_is_blank(data.first_name), "First name is required"),
            (_is_blank(data.last_name), "Last name is required"),
            (_is_blank(data.email), "Email is required"),
            (data.birthdate is None, "Birthdate is required"),
        )
        for failed, message in checks:
            if failed:
                logger.error(f"Cannot {operation} user: {message.lower()}")
                raise ValidationError(message)

    @staticmethod
    def _describe_changes(user: User, data: UserBase) -> str:
        changes = []
        for label, old, new in (
            ("First name", user.first_name, data.first_name),
            ("Last name", user.last_name, data.last_name),
            ("Email", user.email, data.email),
            ("Birthdate", user.birthdate, data.birthdate),
        ):
            if old != new:
                changes.append(f"{label}: '{old}' -> '{new}'")
        return ", ".join(changes)
