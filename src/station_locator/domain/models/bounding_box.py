"""Bounding box domain model."""

from dataclasses import dataclass

from station_locator.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class BoundingBox:
    """Latitude/longitude range used to prefilter stations before ranking.

    The box only narrows retrieval. Results are always re-ranked by exact
    distance, so a station near a corner of the box is not preferred over
    one near its centre.
    """

    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float

    @classmethod
    def around(cls, center: Coordinate, margin_degrees: float) -> "BoundingBox":
        """Build a box extending margin_degrees in every direction from center.

        Bounds are clamped to valid degree ranges. The box does not wrap
        across the antimeridian.
        """
        if margin_degrees <= 0:
            raise ValueError("margin_degrees must be positive")
        return cls(
            min_latitude=max(center.latitude - margin_degrees, -90.0),
            max_latitude=min(center.latitude + margin_degrees, 90.0),
            min_longitude=max(center.longitude - margin_degrees, -180.0),
            max_longitude=min(center.longitude + margin_degrees, 180.0),
        )

    def contains(self, coordinate: Coordinate) -> bool:
        """Check whether a coordinate lies inside the box (bounds inclusive)."""
        return (
            self.min_latitude <= coordinate.latitude <= self.max_latitude
            and self.min_longitude <= coordinate.longitude <= self.max_longitude
        )
