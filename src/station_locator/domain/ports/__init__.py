"""Ports (interfaces) for the ports-and-adapters architecture."""

from station_locator.domain.ports.message_pusher import MessagePusher
from station_locator.domain.ports.reply_formatter import ReplyFormatter
from station_locator.domain.ports.secret_provider import SecretProvider
from station_locator.domain.ports.station_repository import StationRepository
from station_locator.domain.ports.webhook_handler import WebhookHandler

__all__ = [
    "MessagePusher",
    "ReplyFormatter",
    "SecretProvider",
    "StationRepository",
    "WebhookHandler",
]
