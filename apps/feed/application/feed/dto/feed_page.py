"""Feed Page DTO."""

from __future__ import annotations

from dataclasses import dataclass, field

from apps.feed.domain.entities import Video


@dataclass(frozen=True)
class FeedPage:
    """피드 한 페이지.

    Attributes:
        videos: 피드 순서로 정렬된 영상 (비즈니스 조인 포함)
        next_cursor: 다음 페이지 커서, 마지막 페이지면 None
        has_more: 이후 페이지 존재 여부
        total_in_radius: 위치 필터 사용 시, 가져온 배치 안에서 반경 내 항목 수
        candidates_fetched: 저장소에서 읽은 후보 수 (로깅/메트릭용)
    """

    videos: list[Video] = field(default_factory=list)
    next_cursor: str | None = None
    has_more: bool = False
    total_in_radius: int | None = None
    candidates_fetched: int = 0
