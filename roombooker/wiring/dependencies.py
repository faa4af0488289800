from functools import lru_cache
import logging

from roombooker.core.config import settings
from roombooker.application.ports.confirmation_dispatcher import ConfirmationDispatcherPort
from roombooker.application.ports.store import StorePort
from roombooker.application.use_cases.booking_lifecycle import BookingLifecycleUseCase
from roombooker.application.use_cases.directory import DirectoryUseCase
from roombooker.application.use_cases.session import SessionUseCase
from roombooker.infrastructure.dispatch.logging_dispatcher import LoggingConfirmationDispatcher
from roombooker.infrastructure.dispatch.webhook_client import WebhookClient
from roombooker.infrastructure.dispatch.webhook_dispatcher import WebhookConfirmationDispatcher
from roombooker.infrastructure.notifications.notification_center import NotificationCenter
from roombooker.infrastructure.store.memory_store import MemoryStore
from roombooker.infrastructure.store.seed_data import seed_store


_store: StorePort | None = None


def get_store() -> StorePort:
    global _store
    if _store is None:
        _store = seed_store() if settings.SEED_DEMO_DATA else MemoryStore()
    return _store


@lru_cache
def get_notification_center() -> NotificationCenter:
    return NotificationCenter(
        language=settings.LANGUAGE,
        dismiss_after_seconds=settings.NOTIFICATION_DISMISS_SECONDS,
    )


@lru_cache
def get_dispatcher() -> ConfirmationDispatcherPort:
    logger = logging.getLogger(__name__)
    if not settings.CONFIRMATION_WEBHOOK_URL or settings.ENV.lower() in {"dev", "local"}:
        logger.info("Using LoggingConfirmationDispatcher (ENV=%s)", settings.ENV)
        return LoggingConfirmationDispatcher()

    logger.info("Using WebhookConfirmationDispatcher")
    client = WebhookClient(
        url=settings.CONFIRMATION_WEBHOOK_URL,
        timeout=settings.CONFIRMATION_WEBHOOK_TIMEOUT,
    )
    return WebhookConfirmationDispatcher(client=client)


@lru_cache
def get_session() -> SessionUseCase:
    return SessionUseCase(store=get_store())


def get_booking_use_case() -> BookingLifecycleUseCase:
    return BookingLifecycleUseCase(
        store=get_store(),
        session=get_session(),
        notifications=get_notification_center(),
        dispatcher=get_dispatcher(),
        max_duration_minutes=settings.MAX_BOOKING_DURATION_MINUTES,
    )


def get_directory_use_case() -> DirectoryUseCase:
    return DirectoryUseCase(store=get_store(), notifications=get_notification_center())


def reset_container() -> None:
    """Drop every process-wide instance; the next lookup re-seeds the store."""
    global _store
    _store = None
    get_notification_center.cache_clear()
    get_dispatcher.cache_clear()
    get_session.cache_clear()
