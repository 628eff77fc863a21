"""Discovery DTOs."""

from __future__ import annotations

from dataclasses import dataclass

from apps.feed.domain.entities import Business
from apps.feed.domain.enums import Category
from apps.feed.domain.value_objects import SearchArea


@dataclass(frozen=True)
class DiscoveryRequest:
    """주변 비즈니스/영상 조회 요청."""

    area: SearchArea | None = None
    category: Category | None = None


@dataclass(frozen=True)
class NearbyBusinessDTO:
    """비즈니스와 검색 중심으로부터의 거리 (위치 필터 없으면 None)."""

    business: Business
    distance_miles: float | None = None
