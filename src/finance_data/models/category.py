"""CategoryEntity model mirroring the persisted categories table."""

import uuid

from sqlalchemy import Boolean, Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from finance_data.db.base import Base


class CategoryEntity(Base):
    """Stores categories exactly as persisted; no domain invariants enforced."""

    __tablename__ = "categories"
    __table_args__ = (Index("IX_categories_deleted_order", "is_deleted", "order_num"),)

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[int] = mapped_column(Integer, nullable=False)
    order_num: Mapped[float] = mapped_column(Float, nullable=False)
    icon: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    is_synced: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<CategoryEntity(id={self.id}, name='{self.name}', order_num={self.order_num})>"
