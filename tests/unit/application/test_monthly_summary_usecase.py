from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from src.application.errors import InvalidPeriod, PermissionDenied
from src.application.use_cases.reports import get_monthly_summary
from src.domain.models.delivery_entry import DeliveryEntry, DeliveryItem
from src.domain.models.delivery_type import DeliveryType
from src.domain.models.user import User
from src.domain.value_objects.data_source import DataSource
from src.domain.value_objects.role import Role
from tests.unit.application.stubs import StubGateway

LOCAL = DeliveryType(id=uuid4(), name="Local", unit_value=Decimal("3.70"))
EXTRA = DeliveryType(id=uuid4(), name="Extra", unit_value=Decimal("0"), is_extra=True)
ARIMATEIA = User(id=uuid4(), name="Arimateia", role=Role.DELIVERER)
EWERTON = User(id=uuid4(), name="Ewerton", role=Role.DELIVERER)


def make_entry(day: date, deliverer: User, quantity: int) -> DeliveryEntry:
    return DeliveryEntry(
        id=uuid4(),
        date=day,
        deliverer_id=deliverer.id,
        items=[DeliveryItem(type_id=LOCAL.id, quantity=quantity, value=LOCAL.unit_value)],
    )


def make_store(**kwargs) -> StubGateway:
    return StubGateway(types=[LOCAL, EXTRA], deliverers=[ARIMATEIA, EWERTON], **kwargs)


async def test_remote_data_is_summarized_and_refreshes_local_copy():
    remote = make_store(entries=[make_entry(date(2024, 2, 10), ARIMATEIA, 4)])
    local = make_store()

    result = await get_monthly_summary.execute(
        remote=remote, local=local, role=Role.MANAGER, month=2, year=2024
    )

    assert result.source is DataSource.REMOTE
    assert result.period.start_date == date(2024, 1, 26)
    assert [s.total_deliveries for s in result.summaries] == [4, 0]
    assert local.refreshed == [([LOCAL, EXTRA], [ARIMATEIA, EWERTON])]


async def test_falls_back_to_local_store_when_remote_fails():
    remote = make_store(fail_reads=True)
    local = make_store(entries=[make_entry(date(2024, 2, 1), EWERTON, 2)])

    result = await get_monthly_summary.execute(
        remote=remote, local=local, role=Role.MANAGER, month=2, year=2024
    )

    assert result.source is DataSource.LOCAL
    assert [s.total_deliveries for s in result.summaries] == [0, 2]
    assert local.refreshed == []


async def test_empty_summary_when_no_source_answers():
    result = await get_monthly_summary.execute(
        remote=make_store(fail_reads=True),
        local=make_store(fail_reads=True),
        role=Role.MANAGER,
        month=2,
        year=2024,
    )

    assert result.source is DataSource.UNAVAILABLE
    assert result.summaries == []
    assert result.period.end_date == date(2024, 2, 25)


async def test_failed_local_refresh_is_not_fatal():
    local = make_store()
    local.fail_mirror = True

    result = await get_monthly_summary.execute(
        remote=make_store(), local=local, role=Role.MANAGER, month=5, year=2024
    )

    assert result.source is DataSource.REMOTE


async def test_deliverer_cannot_view_reports():
    with pytest.raises(PermissionDenied):
        await get_monthly_summary.execute(
            remote=make_store(), local=make_store(), role=Role.DELIVERER, month=2, year=2024
        )


async def test_defaults_to_period_containing_today():
    result = await get_monthly_summary.execute(
        remote=make_store(), local=make_store(), role=Role.MANAGER, today=date(2024, 3, 27)
    )
    assert (result.period.month, result.period.year) == (4, 2024)


@pytest.mark.parametrize(("month", "year"), [(13, 2024), (0, 2024), (2, None), (None, 2024)])
async def test_bad_period_is_rejected(month, year):
    with pytest.raises(InvalidPeriod):
        await get_monthly_summary.execute(
            remote=make_store(), local=make_store(), role=Role.MANAGER, month=month, year=year
        )
