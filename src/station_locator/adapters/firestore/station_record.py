"""Typed decoding of station documents read from Firestore."""

from pydantic import BaseModel, ConfigDict, Field

from station_locator.domain.models import Coordinate, Station


class StationRecord(BaseModel):
    """Station document as stored in Firestore.

    Strict mode rejects documents whose fields carry the wrong type instead
    of coercing them, e.g. a ``vmType`` stored as a string.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore", populate_by_name=True)

    address: str
    city: str
    district: str
    location: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    vm_type: int = Field(alias="vmType")

    def to_station(self) -> Station:
        return Station(
            address=self.address,
            city=self.city,
            district=self.district,
            location=self.location,
            coordinate=Coordinate(latitude=self.latitude, longitude=self.longitude),
            vm_type=self.vm_type,
        )
