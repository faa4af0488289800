from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    key: str
    message: str
    severity: Severity
    created_at: float
    expires_at: float

    def is_active(self, now_ts: float) -> bool:
        return now_ts < self.expires_at
