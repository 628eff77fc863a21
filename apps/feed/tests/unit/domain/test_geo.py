"""좌표 / 거리 / 검색 영역 테스트."""

import math

import pytest

from apps.feed.domain.exceptions import InvalidCoordinatesError, InvalidRadiusError
from apps.feed.domain.services import EARTH_RADIUS_MILES, haversine_miles
from apps.feed.domain.value_objects import Coordinates, SearchArea

ONE_DEGREE_MILES = 2 * math.pi * EARTH_RADIUS_MILES / 360


class TestHaversine:
    """하버사인 거리 테스트."""

    def test_same_point_is_zero(self) -> None:
        assert haversine_miles(42.44, -76.5, 42.44, -76.5) == 0.0

    def test_one_degree_of_latitude(self) -> None:
        """경선을 따라 1도 ≈ 69.1 miles"""
        distance = haversine_miles(42.0, -76.5, 43.0, -76.5)
        assert distance == pytest.approx(ONE_DEGREE_MILES, abs=1e-6)

    def test_symmetric(self) -> None:
        forward = haversine_miles(42.44, -76.5, 40.71, -74.0)
        backward = haversine_miles(40.71, -74.0, 42.44, -76.5)
        assert forward == pytest.approx(backward)

    def test_ithaca_to_new_york(self) -> None:
        """Ithaca → NYC 약 170 miles"""
        distance = haversine_miles(42.4440, -76.5019, 40.7128, -74.0060)
        assert 165 < distance < 180


class TestCoordinates:
    """Coordinates Value Object 테스트."""

    def test_valid(self) -> None:
        coords = Coordinates(latitude=42.44, longitude=-76.5)
        assert coords.latitude == 42.44

    @pytest.mark.parametrize(("lat", "lng"), [(91, 0), (-90.5, 0), (0, 180.1), (0, -181)])
    def test_out_of_range(self, lat: float, lng: float) -> None:
        with pytest.raises(InvalidCoordinatesError):
            Coordinates(latitude=lat, longitude=lng)

    def test_from_optional_requires_both(self) -> None:
        """한쪽만 있으면 위치 없음"""
        assert Coordinates.from_optional(42.44, None) is None
        assert Coordinates.from_optional(None, -76.5) is None
        assert Coordinates.from_optional(None, None) is None
        assert Coordinates.from_optional(0.0, 0.0) == Coordinates(0.0, 0.0)


class TestSearchArea:
    """SearchArea 테스트."""

    @pytest.fixture
    def center(self) -> Coordinates:
        return Coordinates(latitude=42.44, longitude=-76.50)

    @pytest.mark.parametrize("radius", [0, -1, math.inf, math.nan])
    def test_non_positive_or_non_finite_radius_rejected(
        self, center: Coordinates, radius: float
    ) -> None:
        with pytest.raises(InvalidRadiusError):
            SearchArea(center=center, radius_miles=radius)

    def test_contains(self, center: Coordinates) -> None:
        area = SearchArea(center=center, radius_miles=1)
        near = Coordinates(latitude=42.44 + 0.9 / ONE_DEGREE_MILES, longitude=-76.50)
        far = Coordinates(latitude=42.44 + 1.5 / ONE_DEGREE_MILES, longitude=-76.50)

        assert area.contains(near)
        assert not area.contains(far)
        assert not area.contains(None)

    def test_boundary_is_inclusive(self, center: Coordinates) -> None:
        edge = Coordinates(latitude=42.44 + 1.0 / ONE_DEGREE_MILES, longitude=-76.50)
        area = SearchArea(center=center, radius_miles=area_radius(center, edge))

        assert area.contains(edge)


def area_radius(center: Coordinates, point: Coordinates) -> float:
    return haversine_miles(center.latitude, center.longitude, point.latitude, point.longitude)
