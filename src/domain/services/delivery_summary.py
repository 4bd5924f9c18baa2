from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from decimal import Decimal
from uuid import UUID

from src.domain.models.delivery_entry import DeliveryEntry
from src.domain.models.delivery_summary import DeliverySummary, TypeTally
from src.domain.models.delivery_type import DeliveryType
from src.domain.models.user import User
from src.domain.value_objects.billing_period import BillingPeriod

logger = logging.getLogger(__name__)


def _seed(deliverer: User, types: Sequence[DeliveryType]) -> DeliverySummary:
    return DeliverySummary(
        deliverer_id=deliverer.id,
        deliverer_name=deliverer.name,
        deliveries_by_type=[
            TypeTally(type_id=t.id, type_name=t.name, quantity=0, value=t.unit_value)
            for t in types
        ],
    )


def summarize_deliveries(
    entries: Iterable[DeliveryEntry],
    types: Sequence[DeliveryType],
    deliverers: Sequence[User],
    period: BillingPeriod,
) -> list[DeliverySummary]:
    """Aggregate delivery entries into one summary per deliverer.

    Every deliverer gets a summary (in input order) and every delivery type gets
    a row, zero when nothing was delivered. Items pointing at an unknown
    deliverer or an unknown type are skipped. Extras count toward
    ``total_deliveries`` and their value is taken from each item, since extras
    are priced per delivery.
    """
    summaries: dict[UUID, DeliverySummary] = {}
    for deliverer in deliverers:
        summaries.setdefault(deliverer.id, _seed(deliverer, types))
    types_by_id = {t.id: t for t in types}

    skipped = 0
    for entry in entries:
        if not period.contains(entry.date):
            continue
        summary = summaries.get(entry.deliverer_id)
        if summary is None:
            skipped += len(entry.items)
            continue
        for item in entry.items:
            delivery_type = types_by_id.get(item.type_id)
            tally = summary.tally_for(item.type_id)
            if delivery_type is None or tally is None:
                skipped += 1
                continue
            tally.quantity += item.quantity
            summary.total_deliveries += item.quantity
            if delivery_type.is_extra:
                summary.total_extras += item.quantity
                summary.extra_values += Decimal(item.quantity) * item.value

    if skipped:
        logger.debug(
            "Skipped %d delivery items with unknown deliverer or type for %s..%s",
            skipped,
            period.start_date,
            period.end_date,
        )
    return list(summaries.values())
