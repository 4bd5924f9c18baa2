from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.delivery_entries import DeliveryEntriesRepository
from src.application.interfaces.repositories.delivery_types import DeliveryTypesRepository
from src.application.interfaces.repositories.users import UserRepository


class UnitOfWork(Protocol):
    users: UserRepository
    delivery_types: DeliveryTypesRepository
    delivery_entries: DeliveryEntriesRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
