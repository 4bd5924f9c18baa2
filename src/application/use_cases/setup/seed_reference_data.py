from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.delivery_type import DeliveryType
from src.domain.models.user import User
from src.infrastructure.auth.password import PasswordHasher

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SeedResult:
    created_types: list[str] = field(default_factory=list)
    created_users: list[str] = field(default_factory=list)


async def execute(
    *,
    uow: UnitOfWork,
    password_hasher: PasswordHasher,
    delivery_types: list[DeliveryType],
    users: list[User],
    initial_password: str,
) -> SeedResult:
    """Insert reference data that is not there yet. Existing rows are left alone."""
    result = SeedResult()
    for delivery_type in delivery_types:
        if await uow.delivery_types.get(delivery_type.id) is None:
            await uow.delivery_types.add(delivery_type)
            result.created_types.append(delivery_type.name)
    for user in users:
        if await uow.users.get_by_email(user.email) is None:
            await uow.users.add(
                User.create(
                    name=user.name,
                    role=user.role,
                    email=user.email,
                    hashed_password=password_hasher.hash(initial_password),
                    user_id=user.id,
                )
            )
            result.created_users.append(user.email)
    await uow.commit()
    logger.info(
        "Seeded %d delivery types and %d users",
        len(result.created_types),
        len(result.created_users),
    )
    return result
