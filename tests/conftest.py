"""Pytest configuration and fixtures."""

import uuid
from collections.abc import Generator

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from finance_data.dao.category_dao import SqlAlchemyCategoryDao
from finance_data.dao.write_category_dao import SqlAlchemyWriteCategoryDao
from finance_data.db.base import Base, import_models
from finance_data.db.engine import create_db_engine
from finance_data.db.session import create_session_factory
from finance_data.models.category import CategoryEntity

# ============================================================================
# Helper functions
# ============================================================================


def make_entity(
    name: str = "Home",
    order_num: float = 0.0,
    color: int = 42,
    icon: str | None = None,
    is_synced: bool = True,
    is_deleted: bool = False,
    id: uuid.UUID | None = None,
) -> CategoryEntity:
    """Build a detached CategoryEntity with sensible defaults."""
    return CategoryEntity(
        id=id or uuid.uuid4(),
        name=name,
        color=color,
        icon=icon,
        order_num=order_num,
        is_synced=is_synced,
        is_deleted=is_deleted,
    )


# ============================================================================
# Unit test fixtures (SQLite in-memory)
# ============================================================================


@pytest.fixture
def entity_factory():  # type: ignore[no-untyped-def]
    """Factory building detached CategoryEntity rows."""
    return make_entity


@pytest.fixture
def in_memory_engine() -> Generator[Engine, None, None]:
    """Create an in-memory SQLite database with the categories table.

    This fixture is fast and doesn't require external dependencies.
    """
    engine = create_db_engine("sqlite://")

    import_models()
    Base.metadata.create_all(bind=engine)

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(in_memory_engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to the in-memory database."""
    return create_session_factory(in_memory_engine)


@pytest.fixture
def category_dao(session_factory: sessionmaker[Session]) -> SqlAlchemyCategoryDao:
    """Read accessor over the in-memory database."""
    return SqlAlchemyCategoryDao(session_factory)


@pytest.fixture
def write_category_dao(
    session_factory: sessionmaker[Session],
) -> SqlAlchemyWriteCategoryDao:
    """Write accessor over the in-memory database."""
    return SqlAlchemyWriteCategoryDao(session_factory)


# ============================================================================
# Markers
# ============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (SQLite)")


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
