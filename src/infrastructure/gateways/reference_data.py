from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from uuid import NAMESPACE_URL, UUID, uuid5

from src.domain.models.delivery_entry import DeliveryEntry, DeliveryItem
from src.domain.models.delivery_type import DeliveryType
from src.domain.models.user import User
from src.domain.value_objects.role import Role

# Stable ids so the relational store and the local store agree on references.
_NAMESPACE = uuid5(NAMESPACE_URL, "https://farmacia.local/deliveries")


def stable_id(kind: str, key: str) -> UUID:
    return uuid5(_NAMESPACE, f"{kind}:{key}")


LOCAL_TYPE_ID = stable_id("delivery_type", "local")
STANDARD_TYPE_ID = stable_id("delivery_type", "standard")
DISTANT_TYPE_ID = stable_id("delivery_type", "distant")
EXTRA_TYPE_ID = stable_id("delivery_type", "extra")


def default_delivery_types() -> list[DeliveryType]:
    return [
        DeliveryType(id=LOCAL_TYPE_ID, name="Entrega Local", unit_value=Decimal("3.70")),
        DeliveryType(id=STANDARD_TYPE_ID, name="Entrega Padrão", unit_value=Decimal("5.00")),
        DeliveryType(id=DISTANT_TYPE_ID, name="Entrega Distante", unit_value=Decimal("7.40")),
        DeliveryType.create(
            type_id=EXTRA_TYPE_ID, name="Extra", unit_value=Decimal("0.00"), is_extra=True
        ),
    ]


def default_users() -> list[User]:
    """Demo staff. Passwords are set by the seed script, never stored here."""
    people = [
        ("arimateia@farmacia.com", "Arimateia", Role.DELIVERER),
        ("ewerton@farmacia.com", "Ewerton", Role.DELIVERER),
        ("gerente@farmacia.com", "Gerente", Role.MANAGER),
    ]
    return [
        User(id=stable_id("user", email), name=name, role=role, email=email)
        for email, name, role in people
    ]


def demo_entries(today: date | None = None) -> list[DeliveryEntry]:
    today = today or date.today()
    arimateia = stable_id("user", "arimateia@farmacia.com")
    ewerton = stable_id("user", "ewerton@farmacia.com")
    return [
        DeliveryEntry(
            id=stable_id("entry", f"demo-1-{today.isoformat()}"),
            date=today - timedelta(days=1),
            deliverer_id=arimateia,
            items=[
                DeliveryItem(type_id=LOCAL_TYPE_ID, quantity=5, value=Decimal("3.70")),
                DeliveryItem(type_id=STANDARD_TYPE_ID, quantity=2, value=Decimal("5.00")),
                DeliveryItem(type_id=EXTRA_TYPE_ID, quantity=1, value=Decimal("10.00")),
            ],
        ),
        DeliveryEntry(
            id=stable_id("entry", f"demo-2-{today.isoformat()}"),
            date=today,
            deliverer_id=ewerton,
            items=[
                DeliveryItem(type_id=LOCAL_TYPE_ID, quantity=3, value=Decimal("3.70")),
                DeliveryItem(type_id=DISTANT_TYPE_ID, quantity=4, value=Decimal("7.40")),
            ],
        ),
    ]
