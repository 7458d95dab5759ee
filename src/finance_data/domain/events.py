"""Write events published after the data layer persists a change."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from finance_data.domain.category import Category
from finance_data.domain.primitives import CategoryId

T = TypeVar("T")


class DeleteOperation(Generic[T]):
    """Which rows a delete removed: either specific ids or the whole table."""

    pass


@dataclass(frozen=True)
class Just(DeleteOperation[T]):
    """Deleted exactly these ids.

    Any iterable is accepted and stored as a tuple, so the operation is
    hashable.
    """

    ids: tuple[T, ...]

    def __init__(self, ids: Iterable[T]) -> None:
        object.__setattr__(self, "ids", tuple(ids))


@dataclass(frozen=True)
class All(DeleteOperation[T]):
    """Deleted every row of the table."""

    pass


class DataWriteEvent:
    """Base class for every write notification posted on the event bus."""

    pass


@dataclass(frozen=True)
class SaveCategories(DataWriteEvent):
    """Categories were inserted or replaced, in write order."""

    categories: tuple[Category, ...]

    def __init__(self, categories: Iterable[Category] = ()) -> None:
        object.__setattr__(self, "categories", tuple(categories))


@dataclass(frozen=True)
class DeleteCategories(DataWriteEvent):
    """Category rows were physically deleted."""

    operation: DeleteOperation[CategoryId]
