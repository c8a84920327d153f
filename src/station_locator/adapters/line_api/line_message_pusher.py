"""Push message client for the LINE Messaging API."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from station_locator.adapters.api_request_logger import log_api_request, log_api_response
from station_locator.domain.errors import PushDeliveryError
from station_locator.domain.ports.message_pusher import MessagePusher

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class LineMessagePusher(MessagePusher):
    """Adapter sending push messages with a bearer channel access token."""

    def __init__(self, session: "ClientSession", endpoint: str, access_token: str) -> None:
        """Initialize the pusher.

        Args:
            session: Shared aiohttp session; its timeout applies to each push.
            endpoint: Push message API URL.
            access_token: Channel access token sent as a bearer token.
        """
        self._session = session
        self._endpoint = endpoint
        self._access_token = access_token

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._access_token}",
        }

    async def push(self, recipient_id: str, messages: list[dict[str, Any]]) -> bytes:
        """Send messages to a recipient and return the raw response body.

        Raises:
            PushDeliveryError: On network failure, a non-2xx status, or when
                the response body cannot be read.
        """
        payload = {"to": recipient_id, "messages": messages}
        headers = self._headers()
        log_api_request("POST", self._endpoint, headers=headers, payload=payload)

        try:
            async with self._session.post(
                self._endpoint, json=payload, headers=headers
            ) as response:
                body = await response.read()
                log_api_response(self._endpoint, response.status, body)
                if not 200 <= response.status < 300:
                    logger.error(
                        f"Push API returned status {response.status}: "
                        f"{body[:500].decode('utf-8', errors='replace')}"
                    )
                    raise PushDeliveryError(
                        f"push API returned status {response.status}",
                        status_code=response.status,
                    )
        except aiohttp.ClientError as e:
            raise PushDeliveryError(f"unable to make request: {e}") from e
        except TimeoutError as e:
            raise PushDeliveryError("push request timed out") from e

        logger.info(f"Pushed {len(messages)} message(s) to {recipient_id}")
        return body
