"""Firestore adapters."""

from station_locator.adapters.firestore.firestore_station_repository import (
    FirestoreStationRepository,
)
from station_locator.adapters.firestore.station_record import StationRecord

__all__ = ["FirestoreStationRepository", "StationRecord"]
