"""
Tests for translated, auto-dismissing notifications.
"""

from __future__ import annotations

from roombooker.application.translations import Language, MessageKey, TRANSLATIONS, translate
from roombooker.domain.entities.notification import Severity
from roombooker.infrastructure.notifications.notification_center import NotificationCenter
from tests.helpers import FakeClock


def test_every_key_is_translated_in_every_language():
    for language in Language:
        assert set(TRANSLATIONS[language]) == set(MessageKey)


def test_translate_falls_back_to_english():
    assert translate(MessageKey.BOOKING_ADDED, "fr") == TRANSLATIONS[Language.EN][MessageKey.BOOKING_ADDED]
    assert translate(MessageKey.BOOKING_ADDED, "ar") == TRANSLATIONS[Language.AR][MessageKey.BOOKING_ADDED]


def test_notification_dismisses_after_three_seconds():
    clock = FakeClock(100.0)
    center = NotificationCenter(clock=clock)

    center.notify(MessageKey.BOOKING_ADDED, Severity.SUCCESS)
    assert center.current().message == "Booking added successfully."

    clock.now_ts = 102.9
    assert center.current() is not None

    clock.now_ts = 103.0
    assert center.current() is None


def test_latest_notification_replaces_previous():
    clock = FakeClock()
    center = NotificationCenter(language="ar", clock=clock)

    center.notify(MessageKey.BOOKING_ADDED, Severity.SUCCESS)
    center.notify(MessageKey.BOOKING_CONFLICT, Severity.ERROR)

    assert center.current().severity is Severity.ERROR
    assert center.current().message == TRANSLATIONS[Language.AR][MessageKey.BOOKING_CONFLICT]
    assert [n.key for n in center.history] == ["bookingAdded", "bookingConflict"]


def test_dismiss_and_history_limit():
    center = NotificationCenter(clock=FakeClock(), history_limit=2)
    for key in (MessageKey.ROOM_ADDED, MessageKey.ROOM_UPDATED, MessageKey.ROOM_DELETED):
        center.notify(key, Severity.INFO)

    assert [n.key for n in center.history] == ["roomUpdated", "roomDeleted"]
    center.dismiss()
    assert center.current() is None
