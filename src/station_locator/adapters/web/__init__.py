"""Web adapters for receiving webhooks."""

from station_locator.adapters.web.app import create_app
from station_locator.adapters.web.webhook_decoder import decode_webhook_payload

__all__ = ["create_app", "decode_webhook_payload"]
