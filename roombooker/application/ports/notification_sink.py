from abc import ABC, abstractmethod

from roombooker.application.translations import MessageKey
from roombooker.domain.entities.notification import Severity


class NotificationSinkPort(ABC):
    @abstractmethod
    def notify(self, key: MessageKey, severity: Severity) -> None:
        """Fire-and-forget user feedback. Must not raise."""
        raise NotImplementedError
