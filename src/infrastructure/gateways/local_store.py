from __future__ import annotations

import asyncio
import logging
import os
from datetime import date, datetime
from datetime import date as DtDate
from decimal import Decimal
from pathlib import Path
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from src.application.errors import FetchFailure, WriteFailure
from src.application.interfaces.delivery_gateway import EntryDraft, LocalDeliveryCache
from src.domain.models.delivery_entry import DeliveryEntry, DeliveryItem
from src.domain.models.delivery_type import DeliveryType
from src.domain.models.user import User
from src.domain.value_objects.role import Role
from src.infrastructure.gateways.reference_data import (
    default_delivery_types,
    default_users,
    demo_entries,
)

logger = logging.getLogger(__name__)


class _TypeRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    name: str
    unit_value: Decimal
    is_extra: bool = False


class _UserRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    name: str
    role: Role
    email: str = ""
    is_active: bool = True


class _ItemRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    type_id: UUID
    quantity: int
    value: Decimal


class _EntryRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    date: DtDate
    deliverer_id: UUID
    items: list[_ItemRecord]
    created_at: datetime


class _Snapshot(BaseModel):
    delivery_types: list[_TypeRecord] = Field(default_factory=list)
    users: list[_UserRecord] = Field(default_factory=list)
    entries: list[_EntryRecord] = Field(default_factory=list)


class LocalStore(LocalDeliveryCache):
    """In-process copy of the delivery data, optionally persisted as JSON.

    Serves as the read fallback when the relational store is unreachable and
    as a self-contained store for demos. Passwords are never kept here.

    File access runs in a worker thread. The file is replaced atomically, so a
    crash mid-write leaves the previous snapshot readable. A change only
    becomes visible in memory once it has been persisted.
    """

    def __init__(self, path: str | Path | None = None, *, seed_demo_entries: bool = False) -> None:
        self.path = Path(path) if path else None
        self.seed_demo_entries = seed_demo_entries
        self._snapshot: _Snapshot | None = None
        self._lock = asyncio.Lock()

    def _seed(self) -> _Snapshot:
        snapshot = _Snapshot(
            delivery_types=[_TypeRecord.model_validate(t) for t in default_delivery_types()],
            users=[_UserRecord.model_validate(u) for u in default_users()],
        )
        if self.seed_demo_entries:
            snapshot.entries = [_EntryRecord.model_validate(e) for e in demo_entries()]
        return snapshot

    def _read_file(self) -> _Snapshot:
        if self.path is not None and self.path.exists():
            try:
                return _Snapshot.model_validate_json(self.path.read_text("utf-8"))
            except (OSError, PydanticValidationError) as exc:
                logger.error("Local store at %s is unreadable: %s", self.path, exc)
                raise FetchFailure("Local delivery store is unreadable") from exc
        logger.info("Local store seeded with default reference data")
        return self._seed()

    def _write_file(self, snapshot: _Snapshot) -> None:
        if self.path is None:
            return
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(snapshot.model_dump_json(indent=2), "utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.error("Could not persist local store to %s: %s", self.path, exc)
            tmp_path.unlink(missing_ok=True)
            raise WriteFailure("Local delivery store is not writable") from exc

    async def _load(self) -> _Snapshot:
        if self._snapshot is None:
            self._snapshot = await asyncio.to_thread(self._read_file)
        return self._snapshot

    async def _commit(self, snapshot: _Snapshot) -> None:
        await asyncio.to_thread(self._write_file, snapshot)
        self._snapshot = snapshot

    @staticmethod
    def _entry_to_domain(record: _EntryRecord) -> DeliveryEntry:
        return DeliveryEntry(
            id=record.id,
            date=record.date,
            deliverer_id=record.deliverer_id,
            items=[
                DeliveryItem(type_id=i.type_id, quantity=i.quantity, value=i.value)
                for i in record.items
            ],
            created_at=record.created_at,
        )

    async def fetch_delivery_types(self) -> list[DeliveryType]:
        async with self._lock:
            snapshot = await self._load()
        return [
            DeliveryType(id=t.id, name=t.name, unit_value=t.unit_value, is_extra=t.is_extra)
            for t in snapshot.delivery_types
        ]

    async def fetch_deliverers(self) -> list[User]:
        async with self._lock:
            snapshot = await self._load()
        users = [
            User(id=u.id, name=u.name, role=u.role, email=u.email, is_active=u.is_active)
            for u in snapshot.users
            if u.role is Role.DELIVERER and u.is_active
        ]
        return sorted(users, key=lambda u: (u.name, str(u.id)))

    async def fetch_entries(
        self,
        start: date,
        end: date,
        *,
        deliverer_id: UUID | None = None,
    ) -> list[DeliveryEntry]:
        async with self._lock:
            snapshot = await self._load()
        return [
            self._entry_to_domain(e)
            for e in snapshot.entries
            if start <= e.date <= end and (deliverer_id is None or e.deliverer_id == deliverer_id)
        ]

    async def submit_entry(self, draft: EntryDraft) -> DeliveryEntry:
        entry = DeliveryEntry.create(
            date=draft.date, deliverer_id=draft.deliverer_id, items=draft.items
        )
        async with self._lock:
            try:
                snapshot = await self._load()
            except FetchFailure as exc:
                raise WriteFailure("Local delivery store is unreadable") from exc
            await self._commit(
                snapshot.model_copy(
                    update={"entries": [*snapshot.entries, _EntryRecord.model_validate(entry)]}
                )
            )
        return entry

    async def mirror_entry(self, entry: DeliveryEntry) -> None:
        """Copy an entry stored remotely, ignoring ids already present."""
        async with self._lock:
            snapshot = await self._load()
            if any(e.id == entry.id for e in snapshot.entries):
                return
            await self._commit(
                snapshot.model_copy(
                    update={"entries": [*snapshot.entries, _EntryRecord.model_validate(entry)]}
                )
            )

    async def replace_reference_data(
        self,
        *,
        delivery_types: list[DeliveryType] | None = None,
        deliverers: list[User] | None = None,
    ) -> None:
        """Refresh types and deliverers from a successful remote read.

        Users with other roles are kept as they are.
        """
        async with self._lock:
            snapshot = await self._load()
            update: dict[str, list] = {}
            if delivery_types is not None:
                update["delivery_types"] = [_TypeRecord.model_validate(t) for t in delivery_types]
            if deliverers is not None:
                fresh = {u.id for u in deliverers}
                kept = [
                    u
                    for u in snapshot.users
                    if u.id not in fresh and u.role is not Role.DELIVERER
                ]
                update["users"] = kept + [_UserRecord.model_validate(u) for u in deliverers]
            await self._commit(snapshot.model_copy(update=update))
