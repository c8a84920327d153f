"""Ranked station domain model."""

from dataclasses import dataclass

from station_locator.domain.models.station import Station


@dataclass(frozen=True)
class RankedStation:
    """A station together with its distance from the query point.

    The distance is computed per request and is not a property of the station.
    """

    station: Station
    distance_km: float
