"""Ranking of candidate stations by distance from a user."""

import logging
from collections.abc import Iterable

from station_locator.domain.distance import distance_km
from station_locator.domain.models import Coordinate, RankedStation, Station

logger = logging.getLogger(__name__)

DEFAULT_NEARBY_STATION_LIMIT = 3


class ProximityMatcher:
    """Select the nearest stations among bounding-box candidates.

    Candidates arrive prefiltered by the store, in store order. The matcher
    never trusts that order: every candidate is ranked by exact Haversine
    distance before the top entries are taken.
    """

    def __init__(self, limit: int = DEFAULT_NEARBY_STATION_LIMIT) -> None:
        """Initialize the matcher.

        Args:
            limit: Number of stations a reply needs. Fewer candidates than
                this count as no nearby stations.
        """
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit

    def rank(self, origin: Coordinate, candidates: Iterable[Station]) -> list[RankedStation]:
        """Rank candidates by distance from origin and keep the nearest ones.

        Args:
            origin: Coordinate shared by the user.
            candidates: Stations returned by the store query.

        Returns:
            Exactly ``limit`` stations sorted by ascending distance, or an
            empty list when there are fewer than ``limit`` candidates.
        """
        ranked = [
            RankedStation(
                station=station,
                distance_km=distance_km(
                    origin.latitude,
                    origin.longitude,
                    station.coordinate.latitude,
                    station.coordinate.longitude,
                ),
            )
            for station in candidates
        ]

        if len(ranked) < self.limit:
            logger.info(
                f"Only {len(ranked)} candidate station(s) near "
                f"({origin.latitude}, {origin.longitude}), {self.limit} required"
            )
            return []

        # sorted() is stable, so equal distances keep store order
        ranked = sorted(ranked, key=lambda r: r.distance_km)
        return ranked[: self.limit]
