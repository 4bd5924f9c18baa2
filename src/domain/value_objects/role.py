from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    DELIVERER = "DELIVERER"
    MANAGER = "MANAGER"

    def can_log_deliveries(self) -> bool:
        return self is Role.DELIVERER

    def can_view_reports(self) -> bool:
        return self is Role.MANAGER
