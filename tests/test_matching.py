"""Unit tests for the nearest-driver matching algorithm."""

import pytest

from src.domain.distance import euclidean_distance
from src.domain.entities import Driver, Location
from src.domain.matching import find_nearest_driver

RIDER = Location(40.7126, -74.0060)


class TestEuclideanDistance:
    def test_same_point_is_zero(self):
        assert euclidean_distance(RIDER, RIDER) == 0.0

    def test_three_four_five(self):
        assert euclidean_distance(Location(0, 0), Location(3, 4)) == 5.0

    def test_symmetric(self):
        a, b = Location(40.0, -74.0), Location(41.0, -73.5)
        assert euclidean_distance(a, b) == euclidean_distance(b, a)


class TestFindNearestDriver:
    def test_picks_closest(self):
        near = Driver("d1", "Near", Location(40.7128, -74.0060))
        far = Driver("d2", "Far", Location(40.7129, -74.0060))
        assert find_nearest_driver(RIDER, [far, near]) is near

    def test_skips_unavailable_driver(self):
        near = Driver("d1", "Near", Location(40.7128, -74.0060), is_available=False)
        far = Driver("d2", "Far", Location(40.7129, -74.0060))
        assert find_nearest_driver(RIDER, [near, far]) is far

    def test_tie_goes_to_first_encountered(self):
        origin = Location(0.0, 0.0)
        north = Driver("d1", "North", Location(1.0, 0.0))
        south = Driver("d2", "South", Location(-1.0, 0.0))
        assert find_nearest_driver(origin, [north, south]) is north
        assert find_nearest_driver(origin, [south, north]) is south

    @pytest.mark.parametrize(
        "drivers",
        [
            [],
            [Driver("d1", "Busy", Location(40.7126, -74.0060), is_available=False)],
        ],
    )
    def test_no_available_driver_returns_none(self, drivers):
        assert find_nearest_driver(RIDER, drivers) is None
