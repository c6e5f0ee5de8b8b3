"""Generic SQLAlchemy repository implementing the entity store contract."""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fitness_tracker.errors import NotFoundError, PersistenceError
from fitness_tracker.models.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class SqlAlchemyRepository(Generic[ModelT]):
    """
    Keyed storage for one entity kind backed by a SQLAlchemy session.

    Writes commit immediately; a failing write rolls the session back and
    surfaces as ``PersistenceError``. Identities are only ever assigned by
    ``save``.

    Attributes:
        model: ORM class handled by this repository
        entity_name: Human-readable name used in error messages
    """

    model: Type[ModelT]
    entity_name: str = "Entity"

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, entity_id: Any) -> Optional[ModelT]:
        """Return the entity with the given id, or None."""
        if entity_id is None:
            return None
        return self.db.get(self.model, entity_id)

    def get_for_update(self, entity_id: Any) -> ModelT:
        """
        Load an entity that is about to be modified.

        Raises:
            NotFoundError: If no entity has the given id
        """
        entity = None
        if entity_id is not None:
            entity = self.db.get(self.model, entity_id, with_for_update=True)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    def exists_by_id(self, entity_id: Any) -> bool:
        """Check whether an entity with the given id exists."""
        if entity_id is None:
            return False
        return (
            self.db.query(self.model.id).filter(self.model.id == entity_id).first()
            is not None
        )

    def find_all(self) -> List[ModelT]:
        """Return every entity, ordered by id."""
        return self.db.query(self.model).order_by(self.model.id).all()

    def save(self, entity: ModelT) -> ModelT:
        """
        Insert or update an entity and commit.

        Returns:
            The persisted entity, with its id assigned on first save

        Raises:
            PersistenceError: If the database rejects the write
        """
        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error while saving {self.entity_name}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to save {self.entity_name.lower()} to database") from e
        return entity

    def delete_by_id(self, entity_id: Any) -> None:
        """
        Delete the entity with the given id and commit. Unknown ids are a no-op.

        Raises:
            PersistenceError: If the database rejects the delete
        """
        try:
            deleted = self.db.query(self.model).filter(self.model.id == entity_id).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"Database error while deleting {self.entity_name} {entity_id}: {e}",
                exc_info=True,
            )
            raise PersistenceError(f"Failed to delete {self.entity_name.lower()}") from e
        logger.debug(f"Deleted {deleted} {self.entity_name} row(s) with ID {entity_id}")
