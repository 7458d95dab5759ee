"""Category domain model."""

from dataclasses import dataclass
from datetime import datetime

from finance_data.domain.primitives import CategoryId, ColorInt, NotBlankTrimmedString


@dataclass(frozen=True)
class Category:
    """A spending or income category as seen by business logic.

    Instances only exist for valid records: the name is never blank. The
    `removed` flag marks a soft-deleted category whose row is still stored.
    """

    id: CategoryId
    name: NotBlankTrimmedString
    color: ColorInt
    icon: str | None
    order_num: float
    removed: bool
    last_updated: datetime
