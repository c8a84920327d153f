"""Domain models for the station locator."""

from station_locator.domain.models.bounding_box import BoundingBox
from station_locator.domain.models.coordinate import Coordinate
from station_locator.domain.models.ranked_station import RankedStation
from station_locator.domain.models.station import Station, VmType
from station_locator.domain.models.webhook_event import (
    DeliveryContext,
    EventSource,
    WebhookEvent,
    WebhookMessage,
    WebhookPayload,
)

__all__ = [
    "BoundingBox",
    "Coordinate",
    "DeliveryContext",
    "EventSource",
    "RankedStation",
    "Station",
    "VmType",
    "WebhookEvent",
    "WebhookMessage",
    "WebhookPayload",
]
