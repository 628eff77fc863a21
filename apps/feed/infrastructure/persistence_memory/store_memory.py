"""In-Memory Feed Store.

VideoReader / BusinessReader 포트의 메모리 구현체입니다.
데모 모드와 테스트에서 사용하며, PostgreSQL 리더와 같은 정렬/필터 규칙을 따릅니다.
"""

from __future__ import annotations

from typing import Iterable

from apps.feed.application.discovery.ports import BusinessCriteria
from apps.feed.application.feed.ports import VideoCriteria
from apps.feed.domain.entities import Business, Video
from apps.feed.domain.services import sort_for_feed


class InMemoryFeedStore:
    """메모리 기반 비즈니스/영상 저장소."""

    def __init__(
        self,
        businesses: Iterable[Business] = (),
        videos: Iterable[Video] = (),
    ) -> None:
        self._businesses: dict[str, Business] = {}
        self._videos: dict[str, Video] = {}
        for business in businesses:
            self.add_business(business)
        for video in videos:
            self.add_video(video)

    def add_business(self, business: Business) -> None:
        self._businesses[business.id_] = business

    def add_video(self, video: Video) -> None:
        if video.business_id not in self._businesses:
            self.add_business(video.business)
        self._videos[video.id_] = video

    def remove_video(self, video_id: str) -> None:
        self._videos.pop(video_id, None)

    async def find_many(self, criteria: VideoCriteria, *, limit: int | None = None) -> list[Video]:
        matched = [video for video in self._videos.values() if _video_matches(video, criteria)]
        ordered = sort_for_feed(matched)
        return ordered if limit is None else ordered[:limit]

    async def find_businesses(self, criteria: BusinessCriteria) -> list[Business]:
        matched = [
            business
            for business in self._businesses.values()
            if (criteria.category is None or business.category is criteria.category)
            and (not criteria.require_coordinates or business.has_location)
        ]
        return sorted(matched, key=lambda business: (business.name, business.id_))


class InMemoryBusinessReader:
    """InMemoryFeedStore를 BusinessReader 포트로 노출."""

    def __init__(self, store: InMemoryFeedStore) -> None:
        self._store = store

    async def find_many(self, criteria: BusinessCriteria) -> list[Business]:
        return await self._store.find_businesses(criteria)


def _video_matches(video: Video, criteria: VideoCriteria) -> bool:
    business = video.business
    if criteria.category is not None and business.category is not criteria.category:
        return False
    if criteria.require_coordinates and not business.has_location:
        return False
    if criteria.cursor is not None and not criteria.cursor.admits(video.created_at, video.id_):
        return False
    return True
