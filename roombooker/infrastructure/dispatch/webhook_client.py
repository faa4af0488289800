from __future__ import annotations

import logging

import httpx

from roombooker.application.exceptions import DispatchError
from roombooker.infrastructure.dispatch.messages import ConfirmationMessage


class WebhookClient:
    def __init__(self, url: str, timeout: float = 10.0, client: httpx.Client | None = None) -> None:
        self._url = url
        self._client = client or httpx.Client(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    def post_message(self, message: ConfirmationMessage) -> None:
        payload = {
            "kind": message.kind.value,
            "booking_id": message.booking_id,
            "to": message.to,
            "subject": message.subject,
            "body": message.body,
        }
        try:
            resp = self._client.post(self._url, json=payload)
        except httpx.HTTPError as e:
            raise DispatchError(f"Confirmation webhook unreachable: {e}") from e

        if resp.status_code >= 400:
            try:
                error_detail = resp.json().get("error")
            except Exception:
                error_detail = resp.text
            self._logger.error(
                "Confirmation webhook failed",
                extra={
                    "status": resp.status_code,
                    "booking_id": message.booking_id,
                    "reason": error_detail,
                },
            )
            raise DispatchError(f"Confirmation webhook returned {resp.status_code}")

    def close(self) -> None:
        self._client.close()
