"""Tests for the Firestore station repository adapter."""

from collections.abc import AsyncIterator
from typing import Any
from unittest.mock import MagicMock

import pytest
from google.api_core.exceptions import ServiceUnavailable

from station_locator.adapters.firestore import FirestoreStationRepository, StationRecord
from station_locator.domain.errors import StoreQueryError
from station_locator.domain.models import BoundingBox, Coordinate

BOX = BoundingBox.around(Coordinate(latitude=25.0340, longitude=121.5645), 0.035)

STATION_DOCUMENT = {
    "address": "No. 7, Section 5, Xinyi Road",
    "city": "Taipei",
    "district": "Xinyi",
    "location": "Taipei 101",
    "latitude": 25.0339,
    "longitude": 121.5644,
    "vmType": 3,
    "status": "operating",
}


def make_snapshot(document_id: str, data: dict[str, Any] | None) -> MagicMock:
    """Create a document snapshot mock."""
    snapshot = MagicMock()
    snapshot.id = document_id
    snapshot.to_dict.return_value = data
    return snapshot


def make_client(snapshots: list[MagicMock], error: Exception | None = None) -> MagicMock:
    """Create a Firestore client mock whose query streams the given snapshots."""

    async def stream() -> AsyncIterator[MagicMock]:
        for snapshot in snapshots:
            yield snapshot
        if error is not None:
            raise error

    query = MagicMock()
    query.where.return_value = query
    query.stream.side_effect = stream
    client = MagicMock()
    client.collection.return_value = query
    return client


class TestStationRecord:
    """Tests for typed decoding of station documents."""

    def test_when_document_valid_then_builds_station(self) -> None:
        """Given a complete document, when decoding, then all fields are mapped."""
        station = StationRecord.model_validate(STATION_DOCUMENT).to_station()

        assert station.location == "Taipei 101"
        assert station.address == "No. 7, Section 5, Xinyi Road"
        assert station.city == "Taipei"
        assert station.district == "Xinyi"
        assert station.coordinate == Coordinate(latitude=25.0339, longitude=121.5644)
        assert station.vm_type == 3

    def test_when_coordinates_stored_as_integers_then_accepted(self) -> None:
        """Given integer coordinates, when decoding, then they are accepted as floats."""
        document = {**STATION_DOCUMENT, "latitude": 25, "longitude": 121}
        record = StationRecord.model_validate(document)

        assert record.latitude == 25.0

    def test_when_vm_type_is_string_then_rejected(self) -> None:
        """Given vmType stored as a string, when decoding, then validation fails."""
        with pytest.raises(ValueError):
            StationRecord.model_validate({**STATION_DOCUMENT, "vmType": "3"})


class TestFirestoreStationRepository:
    """Tests for the bounding box query."""

    @pytest.mark.asyncio
    async def test_when_documents_match_then_returns_stations_in_store_order(self) -> None:
        """Given two documents, when querying, then stations are returned in store order."""
        second = {**STATION_DOCUMENT, "location": "Xinyi Anhe"}
        client = make_client([make_snapshot("a", STATION_DOCUMENT), make_snapshot("b", second)])
        repository = FirestoreStationRepository(client)

        stations = await repository.find_stations_in_box(BOX)

        assert [s.location for s in stations] == ["Taipei 101", "Xinyi Anhe"]

    @pytest.mark.asyncio
    async def test_when_querying_then_filters_on_box_and_status(self) -> None:
        """Given a box, when querying, then four range filters and the status filter are applied."""
        client = make_client([])
        repository = FirestoreStationRepository(
            client, collection="swap_stations", status_field="state", status_value=1
        )

        await repository.find_stations_in_box(BOX)

        client.collection.assert_called_once_with("swap_stations")
        query = client.collection.return_value
        filters = [call.kwargs["filter"] for call in query.where.call_args_list]
        assert [(f.field_path, f.op_string, f.value) for f in filters] == [
            ("latitude", ">=", BOX.min_latitude),
            ("latitude", "<=", BOX.max_latitude),
            ("longitude", ">=", BOX.min_longitude),
            ("longitude", "<=", BOX.max_longitude),
            ("state", "==", 1),
        ]

    @pytest.mark.asyncio
    async def test_when_no_documents_then_returns_empty_list(self) -> None:
        """Given no matching documents, when querying, then an empty list is returned."""
        repository = FirestoreStationRepository(make_client([]))

        assert await repository.find_stations_in_box(BOX) == []

    @pytest.mark.asyncio
    async def test_when_field_missing_then_raises_store_query_error(self) -> None:
        """Given a document without latitude, when querying, then StoreQueryError names it."""
        broken = {k: v for k, v in STATION_DOCUMENT.items() if k != "latitude"}
        repository = FirestoreStationRepository(make_client([make_snapshot("broken-doc", broken)]))

        with pytest.raises(StoreQueryError, match="broken-doc"):
            await repository.find_stations_in_box(BOX)

    @pytest.mark.asyncio
    async def test_when_field_mistyped_then_raises_store_query_error(self) -> None:
        """Given a document with a string vmType, when querying, then StoreQueryError is raised."""
        mistyped = {**STATION_DOCUMENT, "vmType": "super"}
        repository = FirestoreStationRepository(make_client([make_snapshot("doc", mistyped)]))

        with pytest.raises(StoreQueryError, match="invalid station document"):
            await repository.find_stations_in_box(BOX)

    @pytest.mark.asyncio
    async def test_when_stream_fails_then_raises_store_query_error(self) -> None:
        """Given a failing stream, when querying, then the API error is wrapped."""
        client = make_client([], error=ServiceUnavailable("backend down"))
        repository = FirestoreStationRepository(client)

        with pytest.raises(StoreQueryError, match="failed to query stations"):
            await repository.find_stations_in_box(BOX)
