"""Contracts for the persistence collaborators consumed by repositories."""

import uuid
from collections.abc import Sequence
from typing import Protocol

from finance_data.models.category import CategoryEntity


class CategoryDao(Protocol):
    """Read access to persisted categories."""

    def find_all(self, deleted: bool) -> list[CategoryEntity]: ...

    def find_by_id(self, id: uuid.UUID) -> CategoryEntity | None: ...

    def find_max_order_num(self) -> float | None: ...


class WriteCategoryDao(Protocol):
    """Write access to persisted categories. Every call may raise a storage error."""

    def save(self, value: CategoryEntity) -> None: ...

    def save_many(self, values: Sequence[CategoryEntity]) -> None: ...

    def delete_by_id(self, id: uuid.UUID) -> None: ...

    def delete_all(self) -> None: ...
