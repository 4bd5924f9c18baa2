from __future__ import annotations

from datetime import date
from uuid import UUID

from src.application.errors import FetchFailure, WriteFailure
from src.application.interfaces.delivery_gateway import EntryDraft
from src.domain.models.delivery_entry import DeliveryEntry
from src.domain.models.delivery_type import DeliveryType
from src.domain.models.user import User


class StubGateway:
    def __init__(
        self,
        *,
        types: list[DeliveryType] | None = None,
        deliverers: list[User] | None = None,
        entries: list[DeliveryEntry] | None = None,
        fail_reads: bool = False,
        fail_writes: bool = False,
    ) -> None:
        self.types = types or []
        self.deliverers = deliverers or []
        self.entries = entries or []
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.submitted: list[EntryDraft] = []
        self.mirrored: list[DeliveryEntry] = []
        self.refreshed: list[tuple[list[DeliveryType] | None, list[User] | None]] = []
        self.fail_mirror = False

    def _check_read(self) -> None:
        if self.fail_reads:
            raise FetchFailure("store down")

    async def fetch_delivery_types(self) -> list[DeliveryType]:
        self._check_read()
        return list(self.types)

    async def fetch_deliverers(self) -> list[User]:
        self._check_read()
        return list(self.deliverers)

    async def fetch_entries(
        self, start: date, end: date, *, deliverer_id: UUID | None = None
    ) -> list[DeliveryEntry]:
        self._check_read()
        return [
            e
            for e in self.entries
            if start <= e.date <= end and (deliverer_id is None or e.deliverer_id == deliverer_id)
        ]

    async def submit_entry(self, draft: EntryDraft) -> DeliveryEntry:
        if self.fail_writes:
            raise WriteFailure("store down")
        self.submitted.append(draft)
        created = DeliveryEntry.create(
            date=draft.date, deliverer_id=draft.deliverer_id, items=draft.items
        )
        self.entries.append(created)
        return created

    async def mirror_entry(self, entry: DeliveryEntry) -> None:
        if self.fail_mirror:
            raise WriteFailure("disk full")
        self.mirrored.append(entry)

    async def replace_reference_data(self, *, delivery_types=None, deliverers=None) -> None:
        if self.fail_mirror:
            raise WriteFailure("disk full")
        self.refreshed.append((delivery_types, deliverers))
