"""Data access objects for persisted categories."""

from finance_data.dao.category_dao import SqlAlchemyCategoryDao
from finance_data.dao.contracts import CategoryDao, WriteCategoryDao
from finance_data.dao.write_category_dao import SqlAlchemyWriteCategoryDao

__all__ = [
    "CategoryDao",
    "SqlAlchemyCategoryDao",
    "SqlAlchemyWriteCategoryDao",
    "WriteCategoryDao",
]
