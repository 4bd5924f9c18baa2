from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.delivery_types import DeliveryTypesRepository
from src.domain.models.delivery_type import DeliveryType
from src.infrastructure.db.orm.delivery_type import DeliveryTypeORM


class DeliveryTypesSQLAlchemyRepository(DeliveryTypesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: DeliveryTypeORM) -> DeliveryType:
        return DeliveryType(
            id=orm.id,
            name=orm.name,
            unit_value=orm.unit_value,
            is_extra=orm.is_extra,
        )

    async def add(self, delivery_type: DeliveryType) -> DeliveryType:
        orm = DeliveryTypeORM(
            id=delivery_type.id,
            name=delivery_type.name,
            unit_value=delivery_type.unit_value,
            is_extra=delivery_type.is_extra,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, type_id: UUID) -> DeliveryType | None:
        orm = await self.session.get(DeliveryTypeORM, type_id)
        return self._to_domain(orm) if orm else None

    async def list(self) -> list[DeliveryType]:
        # Extras last, fixed-price types by value (Local, Standard, Distant)
        stmt = select(DeliveryTypeORM).order_by(
            DeliveryTypeORM.is_extra, DeliveryTypeORM.unit_value, DeliveryTypeORM.name
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]
