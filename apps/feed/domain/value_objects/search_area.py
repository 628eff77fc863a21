"""Search Area Value Object."""

from __future__ import annotations

import math
from dataclasses import dataclass

from apps.feed.domain.exceptions import InvalidRadiusError
from apps.feed.domain.services.distance import haversine_miles
from apps.feed.domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class SearchArea:
    """중심 좌표와 반경(miles)으로 정의되는 원형 검색 영역."""

    center: Coordinates
    radius_miles: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius_miles) or self.radius_miles <= 0:
            raise InvalidRadiusError()

    def distance_to(self, point: Coordinates) -> float:
        return haversine_miles(
            self.center.latitude,
            self.center.longitude,
            point.latitude,
            point.longitude,
        )

    def contains(self, point: Coordinates | None) -> bool:
        """좌표가 없으면 항상 영역 밖으로 취급합니다."""
        if point is None:
            return False
        return self.distance_to(point) <= self.radius_miles
