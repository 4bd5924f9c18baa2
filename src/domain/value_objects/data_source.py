from __future__ import annotations

from enum import Enum


class DataSource(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"
    UNAVAILABLE = "unavailable"
