from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import DECIMAL, Boolean, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class DeliveryTypeORM(Base):
    __tablename__ = "delivery_types"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    unit_value: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False)
    is_extra: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
