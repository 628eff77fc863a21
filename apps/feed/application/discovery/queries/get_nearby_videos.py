"""GetNearbyVideos Query."""

from __future__ import annotations

from apps.feed.application.discovery.dto import DiscoveryRequest
from apps.feed.application.feed.ports import VideoCriteria, VideoReader
from apps.feed.application.feed.services import DistanceFilterService
from apps.feed.domain.entities import Video


class GetNearbyVideosQuery:
    """주변 영상 전체 조회 (페이지네이션 없음)."""

    def __init__(self, video_reader: VideoReader) -> None:
        self._video_reader = video_reader

    async def execute(self, request: DiscoveryRequest) -> list[Video]:
        criteria = VideoCriteria(
            category=request.category,
            require_coordinates=request.area is not None,
        )
        videos = await self._video_reader.find_many(criteria)
        if request.area is None:
            return videos
        return DistanceFilterService.videos_within(videos, request.area)
