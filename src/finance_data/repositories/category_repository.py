"""CategoryRepository mediating between stored categories and domain categories."""

import logging
from collections.abc import Sequence

from finance_data.core.dispatchers import DispatchersProvider
from finance_data.dao.contracts import CategoryDao, WriteCategoryDao
from finance_data.domain.category import Category
from finance_data.domain.events import All, DeleteCategories, Just, SaveCategories
from finance_data.domain.primitives import CategoryId
from finance_data.events.bus import DataWriteEventBus
from finance_data.repositories.mappers import CategoryMapper

logger = logging.getLogger(__name__)


class CategoryRepository:
    """Repository for category reads and writes with write notifications.

    Reads drop rows that are not valid categories. Every successful write is
    followed by exactly one event on the write event bus; a failed write
    raises unchanged and posts nothing.
    """

    def __init__(
        self,
        mapper: CategoryMapper,
        category_dao: CategoryDao,
        write_category_dao: WriteCategoryDao,
        dispatchers: DispatchersProvider,
        write_event_bus: DataWriteEventBus,
    ) -> None:
        """Initialize the repository.

        Args:
            mapper: Converts between entities and domain categories.
            category_dao: Read accessor for persisted categories.
            write_category_dao: Write accessor for persisted categories.
            dispatchers: Runs the blocking accessor calls.
            write_event_bus: Receives an event after every successful write.
        """
        self._mapper = mapper
        self._category_dao = category_dao
        self._write_category_dao = write_category_dao
        self._dispatchers = dispatchers
        self._write_event_bus = write_event_bus

    def find_all(self, deleted: bool = False) -> list[Category]:
        """Get all valid categories matching the deleted flag.

        Args:
            deleted: Return soft-deleted categories when True.

        Returns:
            Categories in storage order. Rows with a blank name are skipped.
        """
        entities = self._dispatchers.io(self._category_dao.find_all, deleted)
        categories = []
        for entity in entities:
            category = self._mapper.to_domain(entity)
            if category is not None:
                categories.append(category)
        return categories

    def find_by_id(self, id: CategoryId) -> Category | None:
        """Get a category by ID.

        Returns:
            The Category, or None if it doesn't exist or isn't valid.
        """
        entity = self._dispatchers.io(self._category_dao.find_by_id, id.value)
        if entity is None:
            return None
        return self._mapper.to_domain(entity)

    def find_max_order_num(self) -> float:
        """Get the highest order number, 0.0 when there are no categories."""
        max_order_num = self._dispatchers.io(self._category_dao.find_max_order_num)
        return max_order_num if max_order_num is not None else 0.0

    def save(self, value: Category) -> None:
        """Persist a category, then post SaveCategories with it."""
        entity = self._mapper.to_entity(value)
        self._dispatchers.io(self._write_category_dao.save, entity)
        logger.debug("Saved category %s", value.id)
        self._write_event_bus.post(SaveCategories([value]))

    def save_many(self, values: Sequence[Category]) -> None:
        """Persist several categories in one call, then post one SaveCategories."""
        values = list(values)
        entities = [self._mapper.to_entity(value) for value in values]
        self._dispatchers.io(self._write_category_dao.save_many, entities)
        logger.debug("Saved %d categories", len(values))
        self._write_event_bus.post(SaveCategories(values))

    def delete_by_id(self, id: CategoryId) -> None:
        """Physically delete a category, then post DeleteCategories for its ID."""
        self._dispatchers.io(self._write_category_dao.delete_by_id, id.value)
        logger.debug("Deleted category %s", id)
        self._write_event_bus.post(DeleteCategories(Just([id])))

    def delete_all(self) -> None:
        """Physically delete every category, then post DeleteCategories(All)."""
        self._dispatchers.io(self._write_category_dao.delete_all)
        logger.debug("Deleted all categories")
        self._write_event_bus.post(DeleteCategories(All()))
