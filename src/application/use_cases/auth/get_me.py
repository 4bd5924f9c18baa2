from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from src.domain.value_objects.role import Role


@dataclass(slots=True)
class MeResult:
    user_id: UUID
    name: str
    role: Role
    can_log_deliveries: bool
    can_view_reports: bool
    claims: dict[str, Any]


async def execute(
    *,
    user_id: UUID,
    name: str,
    role: Role,
    claims: dict[str, Any],
) -> MeResult:
    return MeResult(
        user_id=user_id,
        name=name,
        role=role,
        can_log_deliveries=role.can_log_deliveries(),
        can_view_reports=role.can_view_reports(),
        claims=claims,
    )
