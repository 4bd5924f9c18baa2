from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import date
from typing import TypeVar
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import FetchFailure, WriteFailure
from src.application.interfaces.delivery_gateway import DeliveryGateway, EntryDraft
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.delivery_entry import DeliveryEntry
from src.domain.models.delivery_type import DeliveryType
from src.domain.models.user import User
from src.domain.value_objects.role import Role
from src.infrastructure.db.session import SQLAlchemyUnitOfWork

logger = logging.getLogger(__name__)

T = TypeVar("T")

_REMOTE_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)


class SQLAlchemyDeliveryGateway(DeliveryGateway):
    """Delivery data backed by the relational database.

    Each call runs in its own unit of work. Driver errors, connection errors
    and timeouts surface as ``FetchFailure`` (reads) or ``WriteFailure``
    (writes) so callers can decide how to degrade.
    """

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        *,
        timeout_seconds: float | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._timeout = timeout_seconds

    async def _run(self, op: Callable[[UnitOfWork], Awaitable[T]]) -> T:
        async with SQLAlchemyUnitOfWork(self._session_factory) as uow:
            return await asyncio.wait_for(op(uow), timeout=self._timeout)

    async def _read(self, what: str, op: Callable[[UnitOfWork], Awaitable[T]]) -> T:
        try:
            return await self._run(op)
        except _REMOTE_ERRORS as exc:
            logger.warning("Remote read of %s failed: %r", what, exc)
            raise FetchFailure(f"Could not fetch {what}") from exc

    async def fetch_delivery_types(self) -> list[DeliveryType]:
        return await self._read("delivery types", lambda uow: uow.delivery_types.list())

    async def fetch_deliverers(self) -> list[User]:
        return await self._read(
            "deliverers", lambda uow: uow.users.list_by_role(Role.DELIVERER, active_only=True)
        )

    async def fetch_entries(
        self,
        start: date,
        end: date,
        *,
        deliverer_id: UUID | None = None,
    ) -> list[DeliveryEntry]:
        return await self._read(
            "delivery entries",
            lambda uow: uow.delivery_entries.list(
                date_from=start, date_to=end, deliverer_id=deliverer_id
            ),
        )

    async def submit_entry(self, draft: EntryDraft) -> DeliveryEntry:
        entry = DeliveryEntry.create(
            date=draft.date, deliverer_id=draft.deliverer_id, items=draft.items
        )

        async def op(uow: UnitOfWork) -> DeliveryEntry:
            created = await uow.delivery_entries.add(entry)
            await uow.commit()
            return created

        try:
            return await self._run(op)
        except _REMOTE_ERRORS as exc:
            logger.error("Remote write of delivery entry failed: %r", exc)
            raise WriteFailure("Could not store the delivery entry, please retry") from exc
