"""Process-wide wiring of the category data layer."""

import logging
from types import TracebackType

from finance_data.core.config import Settings
from finance_data.core.dispatchers import (
    ImmediateDispatchersProvider,
    ThreadPoolDispatchersProvider,
)
from finance_data.dao.category_dao import SqlAlchemyCategoryDao
from finance_data.dao.write_category_dao import SqlAlchemyWriteCategoryDao
from finance_data.db.base import Base, import_models
from finance_data.db.engine import create_db_engine
from finance_data.db.session import create_session_factory
from finance_data.events.bus import DataWriteEventBus
from finance_data.repositories.category_repository import CategoryRepository
from finance_data.repositories.mappers import CategoryMapper

logger = logging.getLogger(__name__)


class DataLayer:
    """Owns the engine, write event bus and dispatcher for one process.

    Build it once at start-up, hand ``category_repository`` and
    ``write_event_bus`` to the code that needs them, and ``close()`` it at
    shutdown.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the data layer.

        Args:
            settings: Database and dispatcher configuration. Read from the
                environment and `.env` when omitted.
        """
        if settings is None:
            settings = Settings()
        self.engine = create_db_engine(settings.database_url, echo=settings.database_echo)
        self.session_factory = create_session_factory(self.engine)
        self.write_event_bus = DataWriteEventBus()
        self.dispatchers: ImmediateDispatchersProvider | ThreadPoolDispatchersProvider
        if settings.sync_dispatch:
            self.dispatchers = ImmediateDispatchersProvider()
        else:
            self.dispatchers = ThreadPoolDispatchersProvider(settings.io_max_workers)

        self.category_repository = CategoryRepository(
            mapper=CategoryMapper(),
            category_dao=SqlAlchemyCategoryDao(self.session_factory),
            write_category_dao=SqlAlchemyWriteCategoryDao(self.session_factory),
            dispatchers=self.dispatchers,
            write_event_bus=self.write_event_bus,
        )
        logger.debug("Data layer started for %s", self.engine.url)

    def create_schema(self) -> None:
        """Create any missing tables. Not a migration tool."""
        import_models()
        Base.metadata.create_all(bind=self.engine)

    def close(self) -> None:
        """Stop the dispatcher, close the bus and dispose of the engine."""
        self.dispatchers.shutdown()
        self.write_event_bus.close()
        self.engine.dispose()
        logger.debug("Data layer closed")

    def __enter__(self) -> "DataLayer":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
