from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True, frozen=True)
class DeliveryItem:
    type_id: UUID
    quantity: int
    value: Decimal


@dataclass(slots=True)
class DeliveryEntry:
    id: UUID
    date: date
    deliverer_id: UUID
    items: list[DeliveryItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    @classmethod
    def create(
        cls,
        *,
        date: date,
        deliverer_id: UUID,
        items: list[DeliveryItem],
    ) -> DeliveryEntry:
        return cls(
            id=uuid4(),
            date=date,
            deliverer_id=deliverer_id,
            items=list(items),
            created_at=datetime.now(timezone.utc),
        )
