from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.role import Role


@dataclass(slots=True)
class User:
    id: UUID
    name: str
    role: Role
    email: str = ""
    hashed_password: str = ""
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        name: str,
        role: Role,
        email: str,
        hashed_password: str,
        is_active: bool = True,
        user_id: UUID | None = None,
    ) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=user_id or uuid4(),
            name=name,
            role=role,
            email=email.lower(),
            hashed_password=hashed_password,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )
