"""Conversions between persisted category entities and domain categories."""

from datetime import datetime, timezone

from finance_data.domain.category import Category
from finance_data.domain.primitives import CategoryId, ColorInt, NotBlankTrimmedString
from finance_data.models.category import CategoryEntity

# The categories table has no last-updated column; every mapped category
# reports this fixed timestamp.
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class CategoryMapper:
    """Maps CategoryEntity rows to Category models and back."""

    def to_domain(self, entity: CategoryEntity) -> Category | None:
        """Convert a stored row into a domain category.

        Args:
            entity: The persisted row.

        Returns:
            The Category, or None if the row's name is blank after trimming.
        """
        name = NotBlankTrimmedString.from_string(entity.name)
        if name is None:
            return None

        return Category(
            id=CategoryId(entity.id),
            name=name,
            color=ColorInt(entity.color),
            icon=entity.icon,
            order_num=entity.order_num,
            removed=entity.is_deleted,
            last_updated=EPOCH,
        )

    def to_entity(self, category: Category) -> CategoryEntity:
        """Convert a domain category into a row, flagged for outward sync."""
        return CategoryEntity(
            id=category.id.value,
            name=category.name.value,
            color=category.color.value,
            icon=category.icon,
            order_num=category.order_num,
            is_synced=True,
            is_deleted=category.removed,
        )
