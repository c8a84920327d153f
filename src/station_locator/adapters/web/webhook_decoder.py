"""Decoding of inbound webhook bodies."""

from pydantic import ValidationError

from station_locator.domain.errors import DecodeError
from station_locator.domain.models import WebhookPayload


def decode_webhook_payload(body: bytes) -> WebhookPayload:
    """Decode a webhook request body.

    Raises:
        DecodeError: If the body is not JSON or does not match the payload schema.
    """
    try:
        return WebhookPayload.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"failed to decode JSON string: {e}") from e
