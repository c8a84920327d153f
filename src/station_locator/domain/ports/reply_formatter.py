"""Reply formatter port."""

from typing import Any, Protocol

from station_locator.domain.models.ranked_station import RankedStation


class ReplyFormatter(Protocol):
    """Port for turning reply outcomes into platform message payloads."""

    def format_stations(self, stations: list[RankedStation]) -> list[dict[str, Any]]:
        """Build one message per ranked station."""
        ...

    def format_no_nearby_stations(self) -> list[dict[str, Any]]:
        """Build the fallback reply sent when too few stations are nearby."""
        ...

    def format_welcome(self) -> list[dict[str, Any]]:
        """Build the welcome reply with a location-share prompt."""
        ...
