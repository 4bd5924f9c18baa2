from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID


@dataclass(slots=True)
class TypeTally:
    type_id: UUID
    type_name: str
    quantity: int
    # Nominal unit value of the type, not a per-period amount
    value: Decimal


@dataclass(slots=True)
class DeliverySummary:
    deliverer_id: UUID
    deliverer_name: str
    total_deliveries: int = 0
    deliveries_by_type: list[TypeTally] = field(default_factory=list)
    total_extras: int = 0
    extra_values: Decimal = field(default_factory=lambda: Decimal("0"))

    def tally_for(self, type_id: UUID) -> TypeTally | None:
        return next((t for t in self.deliveries_by_type if t.type_id == type_id), None)
