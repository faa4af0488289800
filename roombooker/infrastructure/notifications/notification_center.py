from __future__ import annotations

import logging
import time
from typing import Callable

from roombooker.application.ports.notification_sink import NotificationSinkPort
from roombooker.application.translations import Language, MessageKey, translate
from roombooker.domain.entities.notification import Notification, Severity


class NotificationCenter(NotificationSinkPort):
    """Holds the latest user-facing notification until it auto-dismisses."""

    def __init__(
        self,
        language: Language | str = Language.EN,
        dismiss_after_seconds: float = 3.0,
        clock: Callable[[], float] = time.time,
        history_limit: int = 50,
    ) -> None:
        self.language = language
        self._dismiss_after = dismiss_after_seconds
        self._clock = clock
        self._history_limit = history_limit
        self._current: Notification | None = None
        self._history: list[Notification] = []
        self._logger = logging.getLogger(__name__)

    def notify(self, key: MessageKey, severity: Severity) -> None:
        now_ts = self._clock()
        notification = Notification(
            key=key.value,
            message=translate(key, self.language),
            severity=severity,
            created_at=now_ts,
            expires_at=now_ts + self._dismiss_after,
        )
        self._current = notification
        self._history.append(notification)
        if len(self._history) > self._history_limit:
            self._history = self._history[-self._history_limit :]
        self._logger.debug("Notification", extra={"severity": severity.value, "reason": key.value})

    def current(self, now_ts: float | None = None) -> Notification | None:
        if self._current is None:
            return None
        if now_ts is None:
            now_ts = self._clock()
        if not self._current.is_active(now_ts):
            self._current = None
        return self._current

    def dismiss(self) -> None:
        self._current = None

    @property
    def history(self) -> list[Notification]:
        return list(self._history)
