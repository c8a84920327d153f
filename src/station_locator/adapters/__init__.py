"""Adapters layer - external system integrations."""

from station_locator.adapters.config import AppConfig
from station_locator.adapters.firestore import FirestoreStationRepository
from station_locator.adapters.gcp import SecretManagerProvider
from station_locator.adapters.line_api import LineMessagePusher, LineReplyFormatter

__all__ = [
    "AppConfig",
    "FirestoreStationRepository",
    "LineMessagePusher",
    "LineReplyFormatter",
    "SecretManagerProvider",
]
