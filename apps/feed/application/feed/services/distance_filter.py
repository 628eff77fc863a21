"""Distance Filter Service.

검색 영역 밖이거나 좌표가 없는 비즈니스의 항목을 제거합니다.
"""

from __future__ import annotations

from typing import Iterable

from apps.feed.domain.entities import Business, Video
from apps.feed.domain.services import sort_for_feed
from apps.feed.domain.value_objects import SearchArea


class DistanceFilterService:
    """반경 필터 서비스."""

    @staticmethod
    def videos_within(videos: Iterable[Video], area: SearchArea) -> list[Video]:
        """반경 안의 영상만 피드 순서로 반환합니다."""
        kept = [video for video in videos if area.contains(video.business.coordinates)]
        return sort_for_feed(kept)

    @staticmethod
    def businesses_within(
        businesses: Iterable[Business],
        area: SearchArea,
    ) -> list[tuple[Business, float]]:
        """반경 안의 비즈니스와 거리(miles)를 가까운 순으로 반환합니다."""
        matches: list[tuple[Business, float]] = []
        for business in businesses:
            coordinates = business.coordinates
            if coordinates is None:
                continue
            distance = area.distance_to(coordinates)
            if distance <= area.radius_miles:
                matches.append((business, distance))
        matches.sort(key=lambda item: (item[1], item[0].id_))
        return matches
