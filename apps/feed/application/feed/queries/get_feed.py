"""GetFeed Query.

위치/카테고리/커서 기반 피드 한 페이지를 조회합니다.

Flow:
    1. 카테고리 + 커서를 저장소 필터로 변환
    2. (created_at DESC, id ASC) 순으로 후보 조회
       - 위치 필터 없음: limit + 1 (다음 페이지 존재 여부 확인용)
       - 위치 필터 있음: location_fetch_limit 만큼 초과 조회
    3. 위치 필터 시 반경 밖/좌표 없는 항목 제거
    4. limit 만큼 자르고 has_more, next_cursor 계산

Note:
    위치 필터 시 has_more/total_in_radius는 초과 조회 배치 기준입니다.
    배치가 상한에 도달해 잘렸다면 반경 내 항목이 더 있을 수 있으므로
    has_more=True로 보고하고, 커서는 스캔한 마지막 후보로 이어갑니다.
"""

from __future__ import annotations

import logging

from apps.feed.application.feed.dto import FeedPage, FeedRequest
from apps.feed.application.feed.ports import VideoCriteria, VideoReader
from apps.feed.application.feed.services import DistanceFilterService
from apps.feed.domain.entities import Video
from apps.feed.domain.services import sort_for_feed
from apps.feed.domain.value_objects import FeedCursor, SearchArea

logger = logging.getLogger(__name__)

DEFAULT_LOCATION_FETCH_LIMIT = 200


class GetFeedQuery:
    """피드 조회 Query.

    상태가 없으며 호출당 저장소 조회는 한 번입니다.
    """

    def __init__(
        self,
        video_reader: VideoReader,
        location_fetch_limit: int = DEFAULT_LOCATION_FETCH_LIMIT,
    ) -> None:
        self._video_reader = video_reader
        self._location_fetch_limit = location_fetch_limit

    async def execute(self, request: FeedRequest) -> FeedPage:
        criteria = VideoCriteria(
            category=request.category,
            cursor=request.cursor,
            require_coordinates=request.has_location,
        )

        if request.area is None:
            page = await self._recent_page(criteria, request.limit)
        else:
            page = await self._area_page(criteria, request.area, request.limit)

        logger.info(
            "Feed page served",
            extra={
                "category": request.category.slug if request.category else None,
                "has_location": request.has_location,
                "has_cursor": request.cursor is not None,
                "limit": request.limit,
                "fetched": page.candidates_fetched,
                "returned": len(page.videos),
                "has_more": page.has_more,
            },
        )
        return page

    async def _recent_page(self, criteria: VideoCriteria, limit: int) -> FeedPage:
        candidates = await self._video_reader.find_many(criteria, limit=limit + 1)

        has_more = len(candidates) > limit
        videos = candidates[:limit]
        return FeedPage(
            videos=videos,
            next_cursor=_cursor_after(videos[-1]) if has_more else None,
            has_more=has_more,
            candidates_fetched=len(candidates),
        )

    async def _area_page(
        self,
        criteria: VideoCriteria,
        area: SearchArea,
        limit: int,
    ) -> FeedPage:
        fetch_limit = max(self._location_fetch_limit, limit + 1)
        candidates = await self._video_reader.find_many(criteria, limit=fetch_limit)

        matches = DistanceFilterService.videos_within(candidates, area)
        videos = matches[:limit]
        truncated = len(candidates) >= fetch_limit

        next_cursor: str | None = None
        if len(matches) > limit:
            next_cursor = _cursor_after(videos[-1])
        elif truncated:
            logger.debug(
                "Location batch truncated before page filled",
                extra={"fetch_limit": fetch_limit, "matches": len(matches)},
            )
            next_cursor = _cursor_after(sort_for_feed(candidates)[-1])

        return FeedPage(
            videos=videos,
            next_cursor=next_cursor,
            has_more=next_cursor is not None,
            total_in_radius=len(matches),
            candidates_fetched=len(candidates),
        )


def _cursor_after(video: Video) -> str:
    return FeedCursor.after(video).encode()
