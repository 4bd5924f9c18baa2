from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.use_cases.deliveries.submit_entry import MAX_QUANTITY
from src.domain.value_objects.data_source import DataSource


class DeliveryItemIn(BaseModel):
    type_id: UUID
    quantity: int = Field(ge=0, le=MAX_QUANTITY)
    value: Decimal | None = Field(
        default=None,
        max_digits=10,
        decimal_places=2,
        description="Per-unit value, only used for extra deliveries",
    )


class DeliveryEntryCreate(BaseModel):
    date: DtDate
    items: list[DeliveryItemIn]


class DeliveryItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    type_id: UUID
    quantity: int
    value: Decimal


class DeliveryEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    date: DtDate
    deliverer_id: UUID
    items: list[DeliveryItemResponse]
    total_quantity: int
    created_at: datetime


class DeliveryHistoryResponse(BaseModel):
    date_from: DtDate
    date_to: DtDate
    source: DataSource
    entries: list[DeliveryEntryResponse]
