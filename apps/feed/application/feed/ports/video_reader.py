"""Video Reader Port."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from apps.feed.domain.entities import Video
from apps.feed.domain.enums import Category
from apps.feed.domain.value_objects import FeedCursor


@dataclass(frozen=True)
class VideoCriteria:
    """저장소 레벨 영상 필터.

    Attributes:
        category: 비즈니스 카테고리 일치 조건
        cursor: 커서 경계 이후 항목만 (created_at < c OR (created_at == c AND id > c.id))
        require_coordinates: 위도/경도가 모두 있는 비즈니스의 영상만
    """

    category: Category | None = None
    cursor: FeedCursor | None = None
    require_coordinates: bool = False


class VideoReader(Protocol):
    """영상 조회 포트.

    결과는 항상 (created_at DESC, id ASC) 순서입니다.
    """

    async def find_many(self, criteria: VideoCriteria, *, limit: int | None = None) -> list[Video]:
        """조건에 맞는 영상을 최대 limit개 조회 (None이면 전체)."""
        ...
