from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import FetchFailure, PermissionDenied, ValidationError
from src.application.interfaces.delivery_gateway import DeliveryGateway
from src.domain.models.delivery_entry import DeliveryEntry
from src.domain.value_objects.billing_period import BillingPeriod
from src.domain.value_objects.data_source import DataSource
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MyEntriesResult:
    date_from: date
    date_to: date
    source: DataSource
    entries: list[DeliveryEntry]


async def _try_fetch(
    gateway: DeliveryGateway, date_from: date, date_to: date, deliverer_id: UUID
) -> list[DeliveryEntry] | None:
    try:
        return await gateway.fetch_entries(date_from, date_to, deliverer_id=deliverer_id)
    except FetchFailure:
        return None


async def execute(
    *,
    remote: DeliveryGateway,
    local: DeliveryGateway,
    role: Role,
    deliverer_id: UUID,
    date_from: date | None = None,
    date_to: date | None = None,
    today: date | None = None,
) -> MyEntriesResult:
    if not role.can_log_deliveries():
        raise PermissionDenied("Only deliverers have a delivery history")
    # A missing bound comes from the period around the given one, or around today
    try:
        if date_from is None and date_to is None:
            current = BillingPeriod.containing(today or date.today())
            date_from, date_to = current.start_date, current.end_date
        elif date_from is None:
            date_from = BillingPeriod.containing(date_to).start_date
        elif date_to is None:
            date_to = BillingPeriod.containing(date_from).end_date
    except ValueError as exc:
        raise ValidationError("Date range is out of bounds") from exc
    if date_from > date_to:
        raise ValidationError("date_from must not be after date_to")

    entries = await _try_fetch(remote, date_from, date_to, deliverer_id)
    source = DataSource.REMOTE
    if entries is None:
        logger.warning("Remote history unavailable, reading local store for %s", deliverer_id)
        entries = await _try_fetch(local, date_from, date_to, deliverer_id)
        source = DataSource.LOCAL
    if entries is None:
        logger.error("No delivery history source available for %s", deliverer_id)
        entries, source = [], DataSource.UNAVAILABLE

    entries = sorted(entries, key=lambda e: (e.date, e.created_at), reverse=True)
    return MyEntriesResult(date_from=date_from, date_to=date_to, source=source, entries=entries)
