"""Firestore station repository adapter."""

import logging
from typing import TYPE_CHECKING, Any

from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore_v1.base_query import FieldFilter
from pydantic import ValidationError

from station_locator.adapters.firestore.station_record import StationRecord
from station_locator.domain.errors import StoreQueryError
from station_locator.domain.models import BoundingBox, Station
from station_locator.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from google.cloud.firestore import AsyncClient, AsyncQuery


class FirestoreStationRepository(StationRepository):
    """Adapter reading stations from a Firestore collection."""

    def __init__(
        self,
        client: "AsyncClient",
        collection: str = "stations",
        status_field: str = "status",
        status_value: Any = "operating",
    ) -> None:
        """Initialize with a Firestore async client.

        Args:
            client: Firestore AsyncClient.
            collection: Collection holding station documents.
            status_field: Field holding the operational status.
            status_value: Status value of stations that may be returned.
        """
        self._client = client
        self._collection = collection
        self._status_field = status_field
        self._status_value = status_value

    def _build_query(self, box: BoundingBox) -> "AsyncQuery":
        """Build the bounding box and status query."""
        return (
            self._client.collection(self._collection)
            .where(filter=FieldFilter("latitude", ">=", box.min_latitude))
            .where(filter=FieldFilter("latitude", "<=", box.max_latitude))
            .where(filter=FieldFilter("longitude", ">=", box.min_longitude))
            .where(filter=FieldFilter("longitude", "<=", box.max_longitude))
            .where(filter=FieldFilter(self._status_field, "==", self._status_value))
        )

    @staticmethod
    def _decode(document_id: str, data: dict[str, Any] | None) -> Station:
        """Decode a station document, raising StoreQueryError on bad records."""
        try:
            return StationRecord.model_validate(data or {}).to_station()
        except ValidationError as e:
            raise StoreQueryError(f"invalid station document {document_id}: {e}") from e

    async def find_stations_in_box(self, box: BoundingBox) -> list[Station]:
        """Find operational stations inside a bounding box, in store order."""
        query = self._build_query(box)
        stations: list[Station] = []
        try:
            async for snapshot in query.stream():
                stations.append(self._decode(snapshot.id, snapshot.to_dict()))
        except GoogleAPIError as e:
            raise StoreQueryError(f"failed to query stations: {e}") from e

        logger.debug(
            f"Store returned {len(stations)} station(s) in box "
            f"lat [{box.min_latitude}, {box.max_latitude}], "
            f"lon [{box.min_longitude}, {box.max_longitude}]"
        )
        return stations
