"""Database session management."""

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create the session factory used by the data access objects.

    Objects stay readable after commit because sessions are short-lived and
    entities are handed back detached.
    """
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )
