"""Application services."""

from station_locator.application.services.proximity_matcher import ProximityMatcher
from station_locator.application.services.station_reply_service import StationReplyService

__all__ = ["ProximityMatcher", "StationReplyService"]
