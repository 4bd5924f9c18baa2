from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from src.application.errors import (
    FetchFailure,
    PermissionDenied,
    ValidationError,
    WriteFailure,
)
from src.application.interfaces.delivery_gateway import (
    DeliveryGateway,
    EntryDraft,
    LocalDeliveryCache,
)
from src.domain.models.delivery_entry import DeliveryEntry, DeliveryItem
from src.domain.models.delivery_type import DeliveryType
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)

# Bounds of the delivery_items columns (INTEGER, DECIMAL(10,2))
MAX_QUANTITY = 10_000
MAX_VALUE = Decimal("99999999.99")
CENTS = Decimal("0.01")


@dataclass(slots=True)
class DraftItem:
    type_id: UUID
    quantity: int
    # Only honoured for the extra type; fixed-price types use their unit value
    value: Decimal | None = None


@dataclass(slots=True)
class SubmitEntryInput:
    date: date
    items: list[DraftItem] = field(default_factory=list)


def ensure_can_submit(role: Role) -> None:
    if not role.can_log_deliveries():
        raise PermissionDenied("Role not allowed to log deliveries")


def validate_items(items: list[DraftItem], types: list[DeliveryType]) -> list[DeliveryItem]:
    """Turn form rows into storable items.

    Zero-quantity rows are dropped. At least one positive row is required and
    every extra row with a quantity needs a positive value. Extra values are
    rounded half up to cents. Fixed-price rows always take the type's unit value.
    """
    types_by_id = {t.id: t for t in types}
    for item in items:
        if item.type_id not in types_by_id:
            raise ValidationError(
                "Unknown delivery type",
                details={"reason": "unknown_type", "type_id": str(item.type_id)},
            )
        if item.quantity < 0:
            raise ValidationError(
                "Quantity cannot be negative",
                details={"reason": "negative_quantity", "type_id": str(item.type_id)},
            )
        if item.quantity > MAX_QUANTITY:
            raise ValidationError(
                f"Quantity cannot exceed {MAX_QUANTITY}",
                details={"reason": "quantity_too_large", "type_id": str(item.type_id)},
            )

    positive = [item for item in items if item.quantity > 0]
    if not positive:
        raise ValidationError("No deliveries to submit", details={"reason": "no_deliveries"})

    result: list[DeliveryItem] = []
    for item in positive:
        delivery_type = types_by_id[item.type_id]
        if delivery_type.is_extra:
            value = item.value
            if value is not None and value.is_finite() and value <= MAX_VALUE:
                value = value.quantize(CENTS, rounding=ROUND_HALF_UP)
            else:
                value = None
            if value is None or value <= 0:
                raise ValidationError(
                    "Invalid value for extra delivery", details={"reason": "invalid_value"}
                )
        else:
            value = delivery_type.unit_value
        result.append(DeliveryItem(type_id=item.type_id, quantity=item.quantity, value=value))
    return result


async def execute(
    *,
    gateway: DeliveryGateway,
    local: LocalDeliveryCache | None,
    role: Role,
    deliverer_id: UUID,
    payload: SubmitEntryInput,
) -> DeliveryEntry:
    ensure_can_submit(role)
    try:
        types = await gateway.fetch_delivery_types()
    except FetchFailure as exc:
        raise WriteFailure("Could not store the delivery entry, please retry") from exc
    items = validate_items(payload.items, types)
    created = await gateway.submit_entry(
        EntryDraft(date=payload.date, deliverer_id=deliverer_id, items=items)
    )
    logger.info(
        "Delivery entry %s stored for %s on %s (%d deliveries)",
        created.id,
        deliverer_id,
        created.date,
        created.total_quantity,
    )
    if local is not None and local is not gateway:
        try:
            await local.mirror_entry(created)
        except (FetchFailure, WriteFailure) as exc:
            logger.warning("Could not mirror entry %s into local store: %s", created.id, exc)
    return created
