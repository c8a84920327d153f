"""Webhook handler port."""

from typing import Protocol

from station_locator.domain.models.webhook_event import WebhookPayload


class WebhookHandler(Protocol):
    """Port for handling decoded webhook payloads."""

    async def handle_payload(self, payload: WebhookPayload) -> bytes:
        """Handle every event of a payload and return the response body."""
        ...
