"""Station repository port."""

from typing import Protocol

from station_locator.domain.models.bounding_box import BoundingBox
from station_locator.domain.models.station import Station


class StationRepository(Protocol):
    """Port for retrieving stations from the store."""

    async def find_stations_in_box(self, box: BoundingBox) -> list[Station]:
        """Find operational stations inside a bounding box, in store order.

        Raises StoreQueryError when the query or a record decode fails.
        """
        ...
