"""Domain types for categories and write events."""

from finance_data.domain.category import Category
from finance_data.domain.events import (
    All,
    DataWriteEvent,
    DeleteCategories,
    DeleteOperation,
    Just,
    SaveCategories,
)
from finance_data.domain.primitives import (
    BlankStringError,
    CategoryId,
    ColorInt,
    NotBlankTrimmedString,
)

__all__ = [
    "All",
    "BlankStringError",
    "Category",
    "CategoryId",
    "ColorInt",
    "DataWriteEvent",
    "DeleteCategories",
    "DeleteOperation",
    "Just",
    "NotBlankTrimmedString",
    "SaveCategories",
]
