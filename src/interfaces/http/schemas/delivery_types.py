from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class DeliveryTypeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    name: str
    unit_value: Decimal
    is_extra: bool


class DelivererResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    name: str
