from __future__ import annotations

import asyncio
from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from src.application.errors import FetchFailure, WriteFailure
from src.application.interfaces.delivery_gateway import EntryDraft
from src.domain.models.delivery_entry import DeliveryItem
from src.infrastructure.gateways.remote_gateway import SQLAlchemyDeliveryGateway


class BrokenSession:
    """Session whose every round trip to the database fails."""

    def __init__(self, *, delay: float = 0.0) -> None:
        self.delay = delay
        self.closed = False

    async def _fail(self, *args, **kwargs):
        if self.delay:
            await asyncio.sleep(self.delay)
        raise OperationalError("SELECT 1", {}, ConnectionRefusedError("connection refused"))

    execute = _fail
    flush = _fail
    commit = _fail
    get = _fail

    def add(self, obj) -> None:
        pass

    async def rollback(self) -> None:
        pass

    async def close(self) -> None:
        self.closed = True


async def test_read_errors_become_fetch_failures():
    session = BrokenSession()
    gateway = SQLAlchemyDeliveryGateway(lambda: session)

    with pytest.raises(FetchFailure):
        await gateway.fetch_delivery_types()
    with pytest.raises(FetchFailure):
        await gateway.fetch_deliverers()
    with pytest.raises(FetchFailure):
        await gateway.fetch_entries(date(2024, 1, 26), date(2024, 2, 25))
    assert session.closed


async def test_slow_reads_time_out_as_fetch_failures():
    gateway = SQLAlchemyDeliveryGateway(lambda: BrokenSession(delay=1), timeout_seconds=0.01)
    with pytest.raises(FetchFailure):
        await gateway.fetch_delivery_types()


async def test_write_errors_become_write_failures():
    gateway = SQLAlchemyDeliveryGateway(lambda: BrokenSession())
    draft = EntryDraft(
        date=date(2024, 2, 1),
        deliverer_id=uuid4(),
        items=[DeliveryItem(type_id=uuid4(), quantity=1, value=Decimal("3.70"))],
    )
    with pytest.raises(WriteFailure):
        await gateway.submit_entry(draft)
