"""Feed Ordering.

피드 정렬 규칙: created_at 내림차순, 동률이면 id 오름차순.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from apps.feed.domain.entities.video import Video


def sort_for_feed(videos: Iterable["Video"]) -> list["Video"]:
    """피드 순서로 정렬된 새 리스트를 반환합니다."""
    # 두 번의 안정 정렬: id 오름차순 후 created_at 내림차순
    ordered = sorted(videos, key=lambda video: video.id_)
    ordered.sort(key=lambda video: video.created_at, reverse=True)
    return ordered


def is_feed_ordered(videos: list["Video"]) -> bool:
    """인접한 모든 쌍이 피드 순서를 만족하는지 검사."""
    for current, following in zip(videos, videos[1:]):
        if current.created_at < following.created_at:
            return False
        if current.created_at == following.created_at and current.id_ >= following.id_:
            return False
    return True
