#!/usr/bin/env python3
"""Helper script to list the stations nearest to a coordinate."""

import argparse
import asyncio
import sys

from google.cloud import firestore

from station_locator.adapters.config import AppConfig
from station_locator.adapters.firestore import FirestoreStationRepository
from station_locator.application.services import ProximityMatcher
from station_locator.domain.errors import StoreQueryError
from station_locator.domain.models import BoundingBox, Coordinate


async def find_station(latitude: float, longitude: float, margin: float, limit: int) -> None:
    """Query the store around a coordinate and print the ranked stations."""
    config = AppConfig()
    origin = Coordinate(latitude=latitude, longitude=longitude)
    box = BoundingBox.around(origin, margin)

    repository = FirestoreStationRepository(
        firestore.AsyncClient(project=config.google_cloud_project),
        collection=config.station_collection,
        status_field=config.station_status_field,
        status_value=config.station_status_value,
    )

    print(f"Searching {config.station_collection} around {latitude}, {longitude} (±{margin}°)")
    try:
        candidates = await repository.find_stations_in_box(box)
    except StoreQueryError as e:
        print(f"Store query failed: {e}")
        sys.exit(1)

    print(f"\n{len(candidates)} candidate station(s) in the bounding box")
    nearest = ProximityMatcher(limit=limit).rank(origin, candidates)
    if not nearest:
        print(f"Fewer than {limit} stations nearby; the fallback reply would be sent.")
        return

    print(f"\nNearest {limit} station(s):")
    for ranked in nearest:
        station = ranked.station
        print(f"  {ranked.distance_km:6.2f} km  {station.location}")
        print(f"             {station.city} {station.district} {station.address}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("latitude", type=float)
    parser.add_argument("longitude", type=float)
    parser.add_argument("--margin", type=float, default=0.035, help="Bounding box margin in degrees")
    parser.add_argument("--limit", type=int, default=3, help="Number of stations to list")
    args = parser.parse_args()

    asyncio.run(find_station(args.latitude, args.longitude, args.margin, args.limit))
