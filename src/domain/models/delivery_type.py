from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True, frozen=True)
class DeliveryType:
    id: UUID
    name: str
    unit_value: Decimal
    is_extra: bool = False

    @classmethod
    def create(
        cls,
        *,
        name: str,
        unit_value: Decimal,
        is_extra: bool = False,
        type_id: UUID | None = None,
    ) -> DeliveryType:
        return cls(
            id=type_id or uuid4(),
            name=name,
            unit_value=Decimal("0") if is_extra else unit_value,
            is_extra=is_extra,
        )
