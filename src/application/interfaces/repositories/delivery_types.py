from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.delivery_type import DeliveryType


class DeliveryTypesRepository(Protocol):
    async def add(self, delivery_type: DeliveryType) -> DeliveryType: ...
    async def get(self, type_id: UUID) -> DeliveryType | None: ...
    async def list(self) -> list[DeliveryType]: ...
