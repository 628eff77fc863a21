"""Feed Request DTO."""

from __future__ import annotations

from dataclasses import dataclass

from apps.feed.domain.enums import Category
from apps.feed.domain.value_objects import FeedCursor, SearchArea


@dataclass(frozen=True)
class FeedRequest:
    """검증이 끝난 피드 조회 요청."""

    limit: int
    area: SearchArea | None = None
    category: Category | None = None
    cursor: FeedCursor | None = None

    @property
    def has_location(self) -> bool:
        return self.area is not None
