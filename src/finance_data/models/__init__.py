"""SQLAlchemy models for the finance data layer."""

from finance_data.models.category import CategoryEntity

__all__ = [
    "CategoryEntity",
]
