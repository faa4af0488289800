"""
Tests for booking confirmation messages and their delivery.
"""

from __future__ import annotations

import json

import httpx
import pytest

from roombooker.application.exceptions import DispatchError
from roombooker.infrastructure.dispatch.logging_dispatcher import LoggingConfirmationDispatcher
from roombooker.infrastructure.dispatch.messages import (
    ConfirmationKind,
    compose_confirmation,
    format_long_date,
    format_time,
)
from roombooker.infrastructure.dispatch.webhook_client import WebhookClient
from roombooker.infrastructure.dispatch.webhook_dispatcher import WebhookConfirmationDispatcher
from roombooker.infrastructure.store.seed_data import ROOMS, USERS
from tests.helpers import at, booking


def test_date_and_time_formatting():
    assert format_long_date(at(9)) == "Monday, January 15, 2024"
    assert format_time(at(9)) == "09:00 AM"
    assert format_time(at(14, 30)) == "02:30 PM"


def test_compose_confirmation_body():
    meeting = booking("b1", "room-1", at(14), at(15, 30))

    message = compose_confirmation(ConfirmationKind.UPDATED, meeting, USERS[0], ROOMS[0])

    assert message.subject == "Booking Updated: Meeting b1"
    assert message.to == "sam.wilson@example.com"
    assert "Hello Sam Wilson," in message.body
    assert "- Room: Orion" in message.body
    assert "- Date: Monday, January 15, 2024" in message.body
    assert "- Time: 02:00 PM - 03:30 PM" in message.body
    assert message.body.endswith("Room Booker")


def test_logging_dispatcher_records_each_kind():
    dispatcher = LoggingConfirmationDispatcher()
    meeting = booking("b1", "room-1", at(9), at(10))

    dispatcher.dispatch_created(meeting, USERS, ROOMS)
    dispatcher.dispatch_updated(meeting, USERS, ROOMS)
    dispatcher.dispatch_cancelled(meeting, USERS, ROOMS)

    assert [m.kind for m in dispatcher.sent] == [
        ConfirmationKind.CREATED,
        ConfirmationKind.UPDATED,
        ConfirmationKind.CANCELLED,
    ]
    assert dispatcher.sent[2].subject == "Booking Cancelled: Meeting b1"


def test_missing_room_raises_dispatch_error():
    dispatcher = LoggingConfirmationDispatcher()

    with pytest.raises(DispatchError):
        dispatcher.dispatch_created(booking("b1", "room-gone", at(9), at(10)), USERS, ROOMS)
    assert dispatcher.sent == []


def test_webhook_dispatcher_posts_json():
    received = []

    def handler(request: httpx.Request) -> httpx.Response:
        received.append(json.loads(request.content))
        return httpx.Response(202)

    client = WebhookClient(
        url="https://hooks.example.com/bookings",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    dispatcher = WebhookConfirmationDispatcher(client=client)

    dispatcher.dispatch_created(booking("b1", "room-2", at(9), at(10)), USERS, ROOMS)

    assert received[0]["kind"] == "created"
    assert received[0]["booking_id"] == "b1"
    assert received[0]["subject"] == "Booking Confirmation: Meeting b1"


def test_webhook_error_status_raises_dispatch_error():
    client = WebhookClient(
        url="https://hooks.example.com/bookings",
        client=httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(500, json={"error": "boom"}))
        ),
    )

    with pytest.raises(DispatchError, match="500"):
        WebhookConfirmationDispatcher(client=client).dispatch_cancelled(
            booking("b1", "room-2", at(9), at(10)), USERS, ROOMS
        )


def test_webhook_transport_error_raises_dispatch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = WebhookClient(
        url="https://hooks.example.com/bookings",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(DispatchError, match="unreachable"):
        client.post_message(
            compose_confirmation(ConfirmationKind.CREATED, booking("b1", "room-1", at(9), at(10)), USERS[0], ROOMS[0])
        )
