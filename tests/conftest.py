from __future__ import annotations

import pytest

from roombooker.application.use_cases.booking_lifecycle import BookingLifecycleUseCase
from roombooker.application.use_cases.directory import DirectoryUseCase
from roombooker.application.use_cases.session import SessionUseCase
from roombooker.infrastructure.dispatch.logging_dispatcher import LoggingConfirmationDispatcher
from roombooker.infrastructure.notifications.notification_center import NotificationCenter
from roombooker.infrastructure.store.memory_store import MemoryStore
from roombooker.infrastructure.store.seed_data import ROLES, ROOMS, USERS
from tests.helpers import FakeClock


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore(rooms=list(ROOMS), users=list(USERS), roles=list(ROLES))


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def notifications(clock: FakeClock) -> NotificationCenter:
    return NotificationCenter(clock=clock)


@pytest.fixture()
def dispatcher() -> LoggingConfirmationDispatcher:
    return LoggingConfirmationDispatcher()


@pytest.fixture()
def session(store: MemoryStore) -> SessionUseCase:
    return SessionUseCase(store=store)


@pytest.fixture()
def lifecycle(store, session, notifications, dispatcher) -> BookingLifecycleUseCase:
    return BookingLifecycleUseCase(
        store=store,
        session=session,
        notifications=notifications,
        dispatcher=dispatcher,
    )


@pytest.fixture()
def directory(store, notifications) -> DirectoryUseCase:
    return DirectoryUseCase(store=store, notifications=notifications)
