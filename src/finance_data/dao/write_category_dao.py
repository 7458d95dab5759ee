"""SQLAlchemy implementation of the category write accessor."""

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy import delete
from sqlalchemy.orm import Session, sessionmaker

from finance_data.models.category import CategoryEntity

logger = logging.getLogger(__name__)


class SqlAlchemyWriteCategoryDao:
    """Writes categories; each call runs in its own transaction."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        """Initialize the DAO with a session factory.

        Args:
            session_factory: Factory producing SQLAlchemy sessions.
        """
        self._session_factory = session_factory

    def save(self, value: CategoryEntity) -> None:
        """Insert a category, replacing any existing row with the same ID."""
        self.save_many([value])

    def save_many(self, values: Sequence[CategoryEntity]) -> None:
        """Insert or replace several categories atomically.

        Args:
            values: Entities to upsert. The caller's instances are not attached
                to the session.
        """
        with self._session_factory() as session, session.begin():
            for value in values:
                session.merge(value)
        logger.debug("Upserted %d categories", len(values))

    def delete_by_id(self, id: uuid.UUID) -> None:
        """Physically delete one category row. Missing rows are ignored."""
        with self._session_factory() as session, session.begin():
            session.execute(delete(CategoryEntity).where(CategoryEntity.id == id))

    def delete_all(self) -> None:
        """Physically delete every category row."""
        with self._session_factory() as session, session.begin():
            result = session.execute(delete(CategoryEntity))
            logger.debug("Deleted %s categories", result.rowcount)
