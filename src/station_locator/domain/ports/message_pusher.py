"""Message pusher port."""

from typing import Any, Protocol


class MessagePusher(Protocol):
    """Port for pushing messages to a user of the messaging platform."""

    async def push(self, recipient_id: str, messages: list[dict[str, Any]]) -> bytes:
        """Send messages to a recipient and return the raw response body.

        Raises PushDeliveryError when the call fails.
        """
        ...
