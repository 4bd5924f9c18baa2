from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.delivery_entries import DeliveryEntriesRepository
from src.domain.models.delivery_entry import DeliveryEntry, DeliveryItem
from src.infrastructure.db.orm.delivery_entry import DeliveryEntryORM, DeliveryItemORM


class DeliveryEntriesSQLAlchemyRepository(DeliveryEntriesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: DeliveryEntryORM) -> DeliveryEntry:
        return DeliveryEntry(
            id=orm.id,
            date=orm.date,
            deliverer_id=orm.deliverer_id,
            items=[
                DeliveryItem(type_id=i.type_id, quantity=i.quantity, value=i.value)
                for i in orm.items
            ],
            created_at=orm.created_at,
        )

    async def add(self, entry: DeliveryEntry) -> DeliveryEntry:
        orm = DeliveryEntryORM(
            id=entry.id,
            deliverer_id=entry.deliverer_id,
            date=entry.date,
            created_at=entry.created_at,
            items=[
                DeliveryItemORM(
                    type_id=item.type_id,
                    position=position,
                    quantity=item.quantity,
                    value=item.value,
                )
                for position, item in enumerate(entry.items)
            ],
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list(
        self,
        *,
        date_from: date | None,
        date_to: date | None,
        deliverer_id: UUID | None,
    ) -> list[DeliveryEntry]:
        conds = []
        if date_from:
            conds.append(DeliveryEntryORM.date >= date_from)
        if date_to:
            conds.append(DeliveryEntryORM.date <= date_to)
        if deliverer_id is not None:
            conds.append(DeliveryEntryORM.deliverer_id == deliverer_id)
        stmt = select(DeliveryEntryORM).order_by(
            DeliveryEntryORM.date, DeliveryEntryORM.created_at
        )
        if conds:
            stmt = stmt.where(and_(*conds))
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]
