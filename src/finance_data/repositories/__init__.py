"""Repository layer for data access patterns."""

from finance_data.repositories.category_repository import CategoryRepository
from finance_data.repositories.mappers import EPOCH, CategoryMapper

__all__ = [
    "EPOCH",
    "CategoryMapper",
    "CategoryRepository",
]
