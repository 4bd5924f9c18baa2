from __future__ import annotations

from typing import Protocol

from src.domain.models.user import User
from src.domain.value_objects.role import Role


class UserRepository(Protocol):
    async def add(self, user: User) -> User: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def list_by_role(self, role: Role, *, active_only: bool = True) -> list[User]: ...
