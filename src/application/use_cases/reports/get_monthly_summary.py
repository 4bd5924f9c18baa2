from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from src.application.errors import FetchFailure, InvalidPeriod, PermissionDenied, WriteFailure
from src.application.interfaces.delivery_gateway import DeliveryGateway, LocalDeliveryCache
from src.domain.models.delivery_entry import DeliveryEntry
from src.domain.models.delivery_summary import DeliverySummary
from src.domain.models.delivery_type import DeliveryType
from src.domain.models.user import User
from src.domain.services.delivery_summary import summarize_deliveries
from src.domain.value_objects.billing_period import BillingPeriod
from src.domain.value_objects.data_source import DataSource
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MonthlySummaryResult:
    period: BillingPeriod
    source: DataSource
    summaries: list[DeliverySummary]


@dataclass(slots=True)
class _Snapshot:
    types: list[DeliveryType]
    deliverers: list[User]
    entries: list[DeliveryEntry]


def resolve_period(month: int | None, year: int | None, today: date | None = None) -> BillingPeriod:
    if month is None and year is None:
        return BillingPeriod.containing(today or date.today())
    if month is None or year is None:
        raise InvalidPeriod("month and year must be given together")
    try:
        return BillingPeriod.resolve(month, year)
    except ValueError as exc:
        raise InvalidPeriod(str(exc), details={"month": month, "year": year}) from exc


async def _try_load(gateway: DeliveryGateway, period: BillingPeriod) -> _Snapshot | None:
    try:
        return _Snapshot(
            types=await gateway.fetch_delivery_types(),
            deliverers=await gateway.fetch_deliverers(),
            entries=await gateway.fetch_entries(period.start_date, period.end_date),
        )
    except FetchFailure:
        return None


async def _refresh_local(local: LocalDeliveryCache, snapshot: _Snapshot) -> None:
    try:
        await local.replace_reference_data(
            delivery_types=snapshot.types, deliverers=snapshot.deliverers
        )
    except (FetchFailure, WriteFailure) as exc:
        logger.warning("Could not refresh local reference data: %s", exc)


async def execute(
    *,
    remote: DeliveryGateway,
    local: LocalDeliveryCache,
    role: Role,
    month: int | None = None,
    year: int | None = None,
    today: date | None = None,
) -> MonthlySummaryResult:
    if not role.can_view_reports():
        raise PermissionDenied("Role not allowed to view delivery reports")
    period = resolve_period(month, year, today)

    snapshot = await _try_load(remote, period)
    source = DataSource.REMOTE
    if snapshot is not None and local is not remote:
        await _refresh_local(local, snapshot)
    if snapshot is None:
        logger.warning(
            "Remote store unavailable, summarizing %s..%s from local store",
            period.start_date,
            period.end_date,
        )
        snapshot = await _try_load(local, period)
        source = DataSource.LOCAL
    if snapshot is None:
        logger.error(
            "No data source available for %s..%s, returning empty summary",
            period.start_date,
            period.end_date,
        )
        return MonthlySummaryResult(period=period, source=DataSource.UNAVAILABLE, summaries=[])

    summaries = summarize_deliveries(
        snapshot.entries, snapshot.types, snapshot.deliverers, period
    )
    return MonthlySummaryResult(period=period, source=source, summaries=summaries)
