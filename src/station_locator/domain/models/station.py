"""Station domain model."""

from dataclasses import dataclass
from enum import IntEnum

from station_locator.domain.models.coordinate import Coordinate


class VmType(IntEnum):
    """Equipment type code stored with each station."""

    STANDARD = 1
    SUPER = 3


@dataclass(frozen=True)
class Station:
    """Represents a physical battery-swap station."""

    address: str
    city: str
    district: str
    location: str  # Display name shown to users
    coordinate: Coordinate
    vm_type: int

    @property
    def is_super_station(self) -> bool:
        return self.vm_type == VmType.SUPER
