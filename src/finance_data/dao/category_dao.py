"""SQLAlchemy implementation of the category read accessor."""

import uuid

from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from finance_data.models.category import CategoryEntity


class SqlAlchemyCategoryDao:
    """Reads categories, one short-lived session per call."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        """Initialize the DAO with a session factory.

        Args:
            session_factory: Factory producing SQLAlchemy sessions.
        """
        self._session_factory = session_factory

    def find_all(self, deleted: bool) -> list[CategoryEntity]:
        """Get every category whose deleted flag matches.

        Args:
            deleted: Return soft-deleted rows when True, live rows when False.

        Returns:
            Matching CategoryEntities ordered by order number (lowest first).
        """
        stmt = (
            select(CategoryEntity)
            .where(CategoryEntity.is_deleted == deleted)
            .order_by(CategoryEntity.order_num)
        )
        with self._session_factory() as session:
            return list(session.execute(stmt).scalars().all())

    def find_by_id(self, id: uuid.UUID) -> CategoryEntity | None:
        """Get a category by ID, or None if there is no such row."""
        with self._session_factory() as session:
            return session.get(CategoryEntity, id)

    def find_max_order_num(self) -> float | None:
        """Get the highest order number, or None when the table is empty."""
        stmt = select(func.max(CategoryEntity.order_num))
        with self._session_factory() as session:
            return session.execute(stmt).scalar_one()
