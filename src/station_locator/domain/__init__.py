"""Domain layer - core business logic and models."""

from station_locator.domain.distance import distance_km
from station_locator.domain.models import (
    BoundingBox,
    Coordinate,
    RankedStation,
    Station,
)
from station_locator.domain.ports import (
    MessagePusher,
    ReplyFormatter,
    StationRepository,
)

__all__ = [
    "BoundingBox",
    "Coordinate",
    "MessagePusher",
    "RankedStation",
    "ReplyFormatter",
    "Station",
    "StationRepository",
    "distance_km",
]
