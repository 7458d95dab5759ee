"""SQLAlchemy declarative base."""

from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass


class Base(MappedAsDataclass, DeclarativeBase):
    """Base class for all SQLAlchemy models.

    Mapped classes are also dataclasses, so entities compare equal field by
    field and can be built detached from any session.
    """

    pass


# Import all models here so they are registered with Base.metadata
def import_models() -> None:
    """Import all models to register them with SQLAlchemy metadata."""
    from finance_data.models import CategoryEntity  # noqa: F401
