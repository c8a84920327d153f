"""Tests for ranking candidate stations by distance."""

import pytest

from station_locator.application.services import ProximityMatcher
from station_locator.domain.models import Coordinate, Station

ORIGIN = Coordinate(latitude=25.0340, longitude=121.5645)


def make_station(name: str, latitude: float, longitude: float, vm_type: int = 1) -> Station:
    """Create a station at the given position."""
    return Station(
        address=f"{name} Road",
        city="Taipei",
        district="Xinyi",
        location=name,
        coordinate=Coordinate(latitude=latitude, longitude=longitude),
        vm_type=vm_type,
    )


@pytest.fixture
def candidates() -> list[Station]:
    """Stations at increasing distances from the origin, listed out of order."""
    return [
        make_station("Far", 25.0640, 121.5645),  # ~3.3 km
        make_station("Nearest", 25.0345, 121.5645),  # ~0.06 km
        make_station("Farthest", 25.0340, 121.5995),  # ~3.5 km
        make_station("Second", 25.0390, 121.5645),  # ~0.56 km
        make_station("Third", 25.0340, 121.5845),  # ~2.0 km
    ]


class TestProximityMatcher:
    """Tests for top-K selection."""

    def test_returns_nearest_three_in_ascending_order(self, candidates: list[Station]) -> None:
        """Given five candidates, when ranking, then the nearest three are returned in order."""
        result = ProximityMatcher().rank(ORIGIN, candidates)

        assert [r.station.location for r in result] == ["Nearest", "Second", "Third"]
        distances = [r.distance_km for r in result]
        assert distances == sorted(distances)

    def test_excluded_candidates_are_farther_than_returned(self, candidates: list[Station]) -> None:
        """Given five candidates, when ranking, then no excluded station is closer than a returned one."""
        matcher = ProximityMatcher()
        result = matcher.rank(ORIGIN, candidates)
        everything = ProximityMatcher(limit=len(candidates)).rank(ORIGIN, candidates)

        returned = {r.station.location for r in result}
        excluded = [r for r in everything if r.station.location not in returned]
        assert all(e.distance_km > result[-1].distance_km for e in excluded)

    def test_distances_are_computed_from_origin(self, candidates: list[Station]) -> None:
        """Given a candidate 0.0005 degrees north, when ranking, then its distance is about 56 m."""
        result = ProximityMatcher().rank(ORIGIN, candidates)

        assert result[0].distance_km == pytest.approx(0.0556, abs=0.001)

    def test_exactly_three_candidates_are_all_returned(self, candidates: list[Station]) -> None:
        """Given exactly three candidates, when ranking, then all three are returned sorted."""
        result = ProximityMatcher().rank(ORIGIN, candidates[:3])

        assert [r.station.location for r in result] == ["Nearest", "Far", "Farthest"]

    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_fewer_than_three_candidates_means_no_nearby_stations(
        self, candidates: list[Station], count: int
    ) -> None:
        """Given fewer than three candidates, when ranking, then an empty result is returned."""
        result = ProximityMatcher().rank(ORIGIN, candidates[:count])

        assert result == []

    def test_ties_keep_store_order(self) -> None:
        """Given stations at equal distances, when ranking, then retrieval order is kept."""
        tied = [
            make_station("First", 25.0440, 121.5645),
            make_station("Closest", 25.0350, 121.5645),
            make_station("Same Spot As First", 25.0440, 121.5645),
        ]

        result = ProximityMatcher().rank(ORIGIN, tied)

        assert [r.station.location for r in result] == ["Closest", "First", "Same Spot As First"]

    def test_custom_limit(self, candidates: list[Station]) -> None:
        """Given a limit of one, when ranking, then only the nearest station is returned."""
        result = ProximityMatcher(limit=1).rank(ORIGIN, candidates)

        assert [r.station.location for r in result] == ["Nearest"]

    def test_rejects_limit_below_one(self) -> None:
        """Given a limit of zero, when creating a matcher, then ValueError is raised."""
        with pytest.raises(ValueError, match="limit must be at least 1"):
            ProximityMatcher(limit=0)

    def test_accepts_any_iterable(self, candidates: list[Station]) -> None:
        """Given a generator of candidates, when ranking, then it is consumed once."""
        result = ProximityMatcher().rank(ORIGIN, (s for s in candidates))

        assert len(result) == 3
