from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.delivery_entry import DeliveryEntry


class DeliveryEntriesRepository(Protocol):
    async def add(self, entry: DeliveryEntry) -> DeliveryEntry: ...
    async def list(
        self,
        *,
        date_from: date | None,
        date_to: date | None,
        deliverer_id: UUID | None,
    ) -> list[DeliveryEntry]: ...
