from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.delivery_entry import DeliveryEntry, DeliveryItem
from src.domain.models.delivery_type import DeliveryType
from src.domain.models.user import User


@dataclass(slots=True)
class EntryDraft:
    """A validated entry that has not been stored yet (no id)."""

    date: date
    deliverer_id: UUID
    items: list[DeliveryItem] = field(default_factory=list)


class DeliveryGateway(Protocol):
    """Read/write access to delivery data.

    Reads raise ``FetchFailure`` and writes raise ``WriteFailure`` when the
    backing store cannot be reached.
    """

    async def fetch_delivery_types(self) -> list[DeliveryType]: ...

    async def fetch_deliverers(self) -> list[User]: ...

    async def fetch_entries(
        self,
        start: date,
        end: date,
        *,
        deliverer_id: UUID | None = None,
    ) -> list[DeliveryEntry]: ...

    async def submit_entry(self, draft: EntryDraft) -> DeliveryEntry: ...


class LocalDeliveryCache(DeliveryGateway, Protocol):
    """Local gateway that can also absorb data read from or written remotely."""

    async def mirror_entry(self, entry: DeliveryEntry) -> None: ...

    async def replace_reference_data(
        self,
        *,
        delivery_types: list[DeliveryType] | None = None,
        deliverers: list[User] | None = None,
    ) -> None: ...
